"""Load AWS API, documentation and endpoint specs and walk their shapes.

API specs follow the botocore JSON layout: ``metadata``, ``operations``
keyed by operation name, and ``shapes`` keyed by shape name.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load one JSON spec document from disk."""
    with open(path) as f:
        return json.load(f)


def load_specs(
    api_path: Path | str,
    doc_path: Path | str,
    endpoints_path: Path | str,
) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    """Load the API spec, doc spec and endpoint catalog, in that order."""
    return load_spec(api_path), load_spec(doc_path), load_spec(endpoints_path)


def get_metadata(api_spec: dict[str, Any]) -> dict[str, Any]:
    return api_spec.get("metadata", {})


def get_operations(api_spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the operation name -> operation metadata mapping."""
    return api_spec.get("operations", {})


def get_shapes(api_spec: dict[str, Any]) -> dict[str, Any]:
    return api_spec.get("shapes", {})


def resolve_shape(
    api_spec: dict[str, Any],
    operation: dict[str, Any],
    direction: str,
) -> dict[str, Any] | None:
    """Resolve an operation's ``input`` or ``output`` shape.

    Returns None when the operation declares no shape for ``direction``
    or the named shape is not in the spec.
    """
    ref = operation.get(direction) or {}
    shape_name = ref.get("shape")
    if not shape_name:
        return None
    return get_shapes(api_spec).get(shape_name)


def shape_members(shape: dict[str, Any] | None) -> list[tuple[str, dict[str, Any]]]:
    """Return a shape's members as (name, definition) pairs in declared order."""
    if not shape:
        return []
    return list(shape.get("members", {}).items())
