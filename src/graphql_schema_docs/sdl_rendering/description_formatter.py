"""Description wrapping for comment blocks."""

from __future__ import annotations

import textwrap
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_DESCRIPTION_WIDTH = 80


@dataclass(frozen=True)
class WrappedDescription:
    """Lazily wrapped description text; iterating again restarts the wrap.

    Lines break greedily at word boundaries. A word longer than ``width`` is
    kept whole on its own line. Line breaks already present in the text are
    kept, and empty or blank text yields no lines at all.
    """

    text: str | None
    width: int = DEFAULT_DESCRIPTION_WIDTH

    def __iter__(self) -> Iterator[str]:
        if not self.text or not self.text.strip():
            return
        for paragraph in self.text.strip().splitlines():
            wrapped = textwrap.wrap(
                paragraph,
                width=self.width,
                break_long_words=False,
                break_on_hyphens=False,
            )
            if not wrapped:
                yield ""
                continue
            yield from wrapped
