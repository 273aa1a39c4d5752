"""Convert AWS operation and member names to target language identifiers.

Examples:
  GetObject             -> get_object
  ListObjectsV2         -> list_objects_v2
  DescribeDBInstances   -> describe_db_instances
  x-amz-request-payer   -> x_amz_request_payer
  versionId (erlang)    -> VersionId
"""

from __future__ import annotations

import re

from .models import ELIXIR, ERLANG


def to_snake_case(name: str) -> str:
    """Convert CamelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1)
    s2 = re.sub(r"[.\-\s]", "_", s2)
    s2 = re.sub(r"[^A-Za-z0-9_]", "", s2)
    return re.sub(r"_+", "_", s2).strip("_").lower()


def upcase_first(name: str) -> str:
    """Uppercase the first character, leaving the rest alone."""
    return name[:1].upper() + name[1:]


# Names bound by the generated function bodies, plus Elixir reserved words
_ELIXIR_RESERVED = frozenset({
    "client", "input", "options", "url_path", "headers", "query_params",
    "after", "and", "catch", "do", "else", "end", "false", "fn", "in",
    "nil", "not", "or", "rescue", "true", "when",
})
_ERLANG_RESERVED = frozenset({
    "Client", "Input", "Input0", "Options", "Path", "Headers", "Headers0",
    "HeadersMapping", "H", "V",
})


def normalize_identifier(name: str, language: str = ELIXIR) -> str:
    """Build a parameter identifier for ``language``.

    Erlang variables must start uppercase, Elixir variables are snake_case.
    Names the generated code already binds get a ``Param``/``_param`` suffix.
    """
    if language == ERLANG:
        ident = upcase_first(name)
        return f"{ident}Param" if ident in _ERLANG_RESERVED else ident
    ident = to_snake_case(name)
    return f"{ident}_param" if ident in _ELIXIR_RESERVED else ident
