"""Entry point: python -m aws_codegen

Reads an API spec, its doc spec and the endpoint catalog, and writes the
generated client module for one service.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import generate, template_for
from .context_builder import build_context
from .errors import CodegenError
from .loader import get_metadata, load_specs
from .models import ELIXIR, LANGUAGES, protocol_kind_for

DEFAULT_LANGUAGE = ELIXIR


def _parse_option(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return key, val


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aws_codegen",
        description="Generate an AWS service client module from its API spec.",
    )
    parser.add_argument("module_name", help="Module name of the generated client")
    parser.add_argument("--api", type=Path, required=True, help="API spec (api-2.json)")
    parser.add_argument("--docs", type=Path, required=True, help="Doc spec (docs-2.json)")
    parser.add_argument("--endpoints", type=Path, required=True, help="Endpoint catalog (endpoints.json)")
    parser.add_argument("--output", type=Path, required=True, help="Output directory")
    parser.add_argument("--language", choices=LANGUAGES, default=DEFAULT_LANGUAGE)
    parser.add_argument(
        "--option", dest="options", type=_parse_option, action="append", default=[],
        metavar="KEY=VALUE", help="Extra option passed to the template context",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        api_spec, doc_spec, endpoints_spec = load_specs(args.api, args.docs, args.endpoints)
        protocol_kind = protocol_kind_for(get_metadata(api_spec).get("protocol"))
        context = build_context(
            protocol_kind,
            args.module_name,
            endpoints_spec,
            api_spec,
            doc_spec,
            dict(args.options),
            language=args.language,
        )
        template_name, suffix = template_for(args.language, protocol_kind)
    except (CodegenError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output_path = args.output / f"{context.endpoint_prefix.replace('-', '_')}{suffix}"
    generate(context, template_name, output_path)
    print(f"Generated {output_path} ({len(context.actions)} actions)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
