"""Render templates and write generated output.

Takes the Service context from context_builder and renders it through a
Jinja2 template, bound to the name ``context``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from .models import ProtocolKind, Service

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# (language, protocol kind) -> (template name, output file suffix)
_TEMPLATES: dict[tuple[str, ProtocolKind], tuple[str, str]] = {
    ("elixir", ProtocolKind.POST): ("elixir/post.ex.j2", ".ex"),
    ("elixir", ProtocolKind.REST): ("elixir/rest.ex.j2", ".ex"),
    ("erlang", ProtocolKind.POST): ("erlang/post.erl.j2", ".erl"),
    ("erlang", ProtocolKind.REST): ("erlang/rest.erl.j2", ".erl"),
}


def template_for(language: str, protocol_kind: ProtocolKind) -> tuple[str, str]:
    """Return (template name, file suffix) for a language and protocol kind."""
    try:
        return _TEMPLATES[(language, protocol_kind)]
    except KeyError:
        raise ValueError(f"no template for {language}/{protocol_kind.value}") from None


def _environment(template_dir: Path) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render(context: Service, template_path: Path | str) -> str:
    """Render the template at ``template_path`` against ``context``."""
    template_path = Path(template_path)
    env = _environment(template_path.parent)
    template = env.get_template(template_path.name)
    return template.render(context=context)


def generate(context: Service, template_name: str, output_path: Path) -> Path:
    """Render a bundled template and write the result to ``output_path``."""
    output = render(context, TEMPLATE_DIR / template_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output)
    logger.info("wrote %s from %s", output_path, template_name)
    return output_path
