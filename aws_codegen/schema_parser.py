"""Classify shape members by wire binding.

Members carry ``location`` ("uri", "header", "querystring", ...) and
``locationName`` (the URI placeholder or literal header name). Members
without a location travel in the request body and are never returned.
"""

from __future__ import annotations

from typing import Any

from .loader import resolve_shape, shape_members
from .models import ELIXIR, Parameter
from .naming import normalize_identifier

# location kind -> member ``location`` values that belong to it
_LOCATIONS: dict[str, frozenset[str]] = {
    "path": frozenset({"uri", "path"}),
    "header": frozenset({"header"}),
}


def build_parameter(name: str, member: dict[str, Any], language: str = ELIXIR) -> Parameter:
    return Parameter(
        code_name=normalize_identifier(name, language),
        name=name,
        location_name=member.get("locationName") or name,
    )


def classify(
    members: list[tuple[str, dict[str, Any]]],
    location_kind: str,
    language: str = ELIXIR,
) -> tuple[Parameter, ...]:
    """Keep members bound to ``location_kind`` ("path" or "header"), in order."""
    try:
        locations = _LOCATIONS[location_kind]
    except KeyError:
        raise ValueError(f"unknown location kind: {location_kind!r}") from None
    return tuple(
        build_parameter(name, member, language)
        for name, member in members
        if member.get("location") in locations
    )


def parse_parameters(
    api_spec: dict[str, Any],
    operation: dict[str, Any],
    direction: str,
    location_kind: str,
    language: str = ELIXIR,
) -> tuple[Parameter, ...]:
    """Classify the members of an operation's input or output shape."""
    shape = resolve_shape(api_spec, operation, direction)
    return classify(shape_members(shape), location_kind, language)
