"""Compile REST request URI templates into path construction expressions.

A template such as ``/{Bucket}/{Key+}?uploads`` is split into literal
text and placeholders. ``{name}`` is single-segment: the bound value is
fully percent-encoded, ``/`` included. ``{name+}`` is multi-segment: the
value keeps its ``/`` separators.

The template is tokenized on brace boundaries rather than searched with
per-parameter patterns, so ``{Key}`` can never match inside ``{Key+}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol
from urllib.parse import quote

from .errors import MalformedUriTemplate


class _Bindable(Protocol):
    code_name: str
    location_name: str


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    """A ``{name}`` or ``{name+}`` token bound to a parameter identifier."""

    name: str
    multi_segment: bool
    code_name: str = ""


def encode_uri(value: Any, multi_segment: bool = False) -> str:
    """Percent-encode a path value.

    Multi-segment values keep ``/`` unescaped, everything else outside the
    unreserved set is encoded.
    """
    return quote(str(value), safe="/" if multi_segment else "")


def tokenize(template: str) -> list[Literal | Placeholder]:
    """Split a URI template into literal and placeholder tokens."""
    tokens: list[Literal | Placeholder] = []
    buf: list[str] = []
    pos = 0
    while pos < len(template):
        char = template[pos]
        if char == "}":
            raise MalformedUriTemplate(
                f"unmatched '}}' at offset {pos} in {template!r}"
            )
        if char != "{":
            buf.append(char)
            pos += 1
            continue

        end = template.find("}", pos + 1)
        if end == -1:
            raise MalformedUriTemplate(
                f"unterminated placeholder at offset {pos} in {template!r}"
            )
        body = template[pos + 1:end]
        if "{" in body:
            raise MalformedUriTemplate(
                f"nested '{{' at offset {pos} in {template!r}"
            )
        multi_segment = body.endswith("+")
        name = body[:-1] if multi_segment else body
        if not name or "+" in name:
            raise MalformedUriTemplate(
                f"invalid placeholder {{{body}}} in {template!r}"
            )

        if buf:
            tokens.append(Literal("".join(buf)))
            buf = []
        tokens.append(Placeholder(name, multi_segment))
        pos = end + 1

    if buf:
        tokens.append(Literal("".join(buf)))
    return tokens


@dataclass(frozen=True)
class PathExpression:
    """Request path with placeholders bound to parameter identifiers."""

    tokens: tuple[Literal | Placeholder, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Placeholder))

    def render(self, values: Mapping[str, Any]) -> str:
        """Evaluate the expression with live values keyed by code name."""
        out = []
        for token in self.tokens:
            if isinstance(token, Literal):
                out.append(token.text)
            else:
                out.append(encode_uri(values[token.code_name], token.multi_segment))
        return "".join(out)

    def to_source(self, language: str) -> str:
        """Render as target language source for the body of a string literal.

        Every placeholder goes through the runtime's ``encode_uri``; only
        multi-segment values pass ``true`` to keep their ``/`` separators.
        """
        out = []
        for token in self.tokens:
            if isinstance(token, Literal):
                out.append(token.text)
                continue
            args = token.code_name + (", true" if token.multi_segment else "")
            if language == "elixir":
                out.append(f"#{{AWS.Util.encode_uri({args})}}")
            else:
                out.append(f'", aws_util:encode_uri({args}), "')
        return "".join(out)


def compile_path(request_uri: str, parameters: Iterable[_Bindable]) -> PathExpression:
    """Bind every placeholder in ``request_uri`` to its path parameter.

    Parameters no placeholder refers to are ignored. A placeholder with no
    parameter raises MalformedUriTemplate.
    """
    by_location = {p.location_name: p for p in parameters}
    bound: list[Literal | Placeholder] = []
    for token in tokenize(request_uri):
        if isinstance(token, Placeholder):
            param = by_location.get(token.name)
            if param is None:
                raise MalformedUriTemplate(
                    f"placeholder {{{token.name}}} in {request_uri!r}"
                    " has no matching path parameter"
                )
            token = Placeholder(token.name, token.multi_segment, param.code_name)
        bound.append(token)
    return PathExpression(tuple(bound))
