"""Presentation markup for rendered SDL lines.

The renderers decide *what* goes on each line; a ``Markup`` decides how
keywords, names, comments and hyperlinks are decorated for the host
documentation system. ``PlainTextMarkup`` produces bare SDL text and
``HtmlMarkup`` produces classed spans and anchors for HTML pages.
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape
from typing import Protocol

COMMENT_PREFIX = "#"


class Markup(Protocol):
    """Decorations applied to SDL fragments."""

    indent: str

    def keyword(self, text: str) -> str: ...

    def identifier(self, name: str) -> str: ...

    def property(self, name: str) -> str: ...

    def value(self, text: str) -> str: ...

    def comment(self, text: str) -> str: ...

    def type_reference(self, name: str, url: str | None) -> str: ...

    def code_block(self, text: str) -> str: ...


class PlainTextMarkup:
    """Undecorated SDL; hyperlinks are dropped."""

    indent = "  "

    def keyword(self, text: str) -> str:
        return text

    def identifier(self, name: str) -> str:
        return name

    def property(self, name: str) -> str:
        return name

    def value(self, text: str) -> str:
        return text

    def comment(self, text: str) -> str:
        return f"{COMMENT_PREFIX} {text}" if text else COMMENT_PREFIX

    def type_reference(self, name: str, url: str | None) -> str:
        return name

    def code_block(self, text: str) -> str:
        return text


class HtmlMarkup:
    """HTML spans for syntax highlighting and anchors for cross-references."""

    indent = "  "

    def keyword(self, text: str) -> str:
        return _span("keyword", text)

    def identifier(self, name: str) -> str:
        return _span("identifier", name)

    def property(self, name: str) -> str:
        return _span("property", name)

    def value(self, text: str) -> str:
        return _span("value", text)

    def comment(self, text: str) -> str:
        content = f"{COMMENT_PREFIX} {text}" if text else COMMENT_PREFIX
        return _span("comment", content)

    def type_reference(self, name: str, url: str | None) -> str:
        if url is None:
            return _span("type", name)
        return f'<a class="type" href="{escape(url, quote=True)}">{escape(name)}</a>'

    def code_block(self, text: str) -> str:
        return f'<pre class="graphql-sdl"><code>{text}</code></pre>'


MARKUPS: dict[str, Callable[[], Markup]] = {
    "plain": PlainTextMarkup,
    "html": HtmlMarkup,
}


def markup_for(name: str) -> Markup:
    """Return a markup instance by its configuration name."""
    try:
        return MARKUPS[name]()
    except KeyError as exc:
        raise ValueError(f"Unsupported markup: {name}") from exc


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{escape(text)}</span>'
