"""Structured SDL lines and their assembly into text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .markup import Markup

NEWLINE = "\n"


@dataclass(frozen=True)
class SdlLine:
    """One physical output line with its indentation depth."""

    text: str
    depth: int = 0


BLANK_LINE = SdlLine("")


def indented(lines: Iterable[SdlLine]) -> tuple[SdlLine, ...]:
    """Move lines one indentation level deeper; blank lines stay blank."""
    return tuple(line if not line.text else SdlLine(line.text, line.depth + 1) for line in lines)


def assemble(lines: Iterable[SdlLine], markup: Markup) -> str:
    """Join lines into text, one newline per line including blank ones."""
    return "".join(_physical_line(line, markup) + NEWLINE for line in lines)


def _physical_line(line: SdlLine, markup: Markup) -> str:
    if not line.text:
        return ""
    return markup.indent * line.depth + line.text
