"""Format AWS HTML documentation for generated source comments."""

from __future__ import annotations

import html
import re
import textwrap

from .models import ELIXIR

_WIDTH = 76


def _strip_html(text: str) -> str:
    """Strip HTML tags, unescape entities and collapse whitespace."""
    text = re.sub(r"</p>\s*<p>", "\n\n", text)
    text = re.sub(r"<[^>]+>", "", text)
    text = html.unescape(text)
    paragraphs = [re.sub(r"\s+", " ", p).strip() for p in text.split("\n\n")]
    return "\n\n".join(p for p in paragraphs if p)


def _escape_heredoc(text: str) -> str:
    """Escape backslashes, interpolation and triple quotes for an Elixir heredoc."""
    text = text.replace("\\", "\\\\")
    text = text.replace("#{", "\\#{")
    return text.replace('"""', '\\"\\"\\"')


def format_docstring(language: str, text: str | None) -> str:
    """Render ``text`` as a wrapped doc block body for ``language``.

    Elixir output is heredoc-safe text;
    Erlang output is prefixed with ``%% ``.
    """
    if not text:
        return ""
    text = _strip_html(text)
    lines: list[str] = []
    for paragraph in text.split("\n\n"):
        if lines:
            lines.append("")
        lines.extend(textwrap.wrap(paragraph, _WIDTH))

    if language == ELIXIR:
        return _escape_heredoc("\n".join(lines))
    return "\n".join(f"%% {line}".rstrip() for line in lines)
