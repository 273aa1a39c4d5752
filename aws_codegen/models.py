"""Template context records: Service, Action, Parameter.

All records are frozen and built once per compilation pass. Parameter
sets are tuples so a context compares equal to one built from the same
input.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .uri import PathExpression

ELIXIR = "elixir"
ERLANG = "erlang"
LANGUAGES = (ELIXIR, ERLANG)


class ProtocolKind(enum.Enum):
    """Transport binding family, selects the action compiler."""

    POST = "post"
    REST = "rest"


# metadata.protocol -> binding family
_PROTOCOL_KINDS: dict[str, ProtocolKind] = {
    "json": ProtocolKind.POST,
    "query": ProtocolKind.POST,
    "ec2": ProtocolKind.POST,
    "rest-json": ProtocolKind.REST,
    "rest-xml": ProtocolKind.REST,
}


def protocol_kind_for(protocol: str) -> ProtocolKind:
    """Map an API spec's metadata.protocol to its binding family."""
    try:
        return _PROTOCOL_KINDS[protocol]
    except KeyError:
        raise ValueError(f"unsupported protocol: {protocol!r}") from None


@dataclass(frozen=True)
class Parameter:
    """A path- or header-bound field of an operation shape."""

    code_name: str
    name: str
    location_name: str


@dataclass(frozen=True)
class Action:
    """One callable API operation."""

    arity: int
    docstring: str
    function_name: str
    name: str
    method: str | None = None
    request_uri: str | None = None
    success_status_code: int | None = None
    url_parameters: tuple[Parameter, ...] = ()
    request_header_parameters: tuple[Parameter, ...] = ()
    response_header_parameters: tuple[Parameter, ...] = ()
    path: PathExpression | None = None
    language: str = ELIXIR

    @property
    def method_atom(self) -> str:
        """HTTP verb as a lowercase atom in the target language."""
        if self.method is None:
            return ""
        atom = self.method.lower()
        return f":{atom}" if self.language == ELIXIR else atom

    @property
    def url_path(self) -> str:
        """Path construction expression as target language source."""
        if self.path is None:
            return self.request_uri or ""
        return self.path.to_source(self.language)

    @property
    def function_parameters(self) -> str:
        """Path and GET header arguments, ready to splice after the client arg.

        Header arguments are only part of the signature for GET requests
        (other verbs carry them in the input map) and are required there.
        """
        params = list(self.url_parameters)
        if self.method == "GET":
            params.extend(self.request_header_parameters)
        return "".join(f", {p.code_name}" for p in params)


@dataclass(frozen=True)
class Service:
    """Fully resolved context for one API."""

    module_name: str
    endpoint_prefix: str
    signing_name: str
    protocol: str
    actions: tuple[Action, ...] = ()
    abbreviation: str | None = None
    api_version: str | None = None
    credential_scope: str | None = None
    docstring: str = ""
    is_global: bool = False
    json_version: str | None = None
    target_prefix: str | None = None
    language: str = ELIXIR
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # options is a read-only snapshot
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
