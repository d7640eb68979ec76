# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Public entry point.

``Diff(a, b)`` returns a DiffView: a handle around the selected strategy that
can print the diff, return it as text or write it to a binary sink. All three
render the same content.
"""

import io
import sys
from typing import Any, BinaryIO, TextIO

from diffview.constants import DEFAULT_WIDTH
from diffview.core.diff.selector import select_strategy
from diffview.core.diff.strategies import DiffStrategy
from diffview.core.ui.theme import Theme, get_theme


class DiffView:
    def __init__(self, strategy: DiffStrategy, theme: Theme | None = None):
        self._strategy = strategy
        self._theme = theme

    @property
    def strategy(self) -> DiffStrategy:
        return self._strategy

    @property
    def theme(self) -> Theme:
        # resolved per render so a theme switched later is picked up
        return self._theme if self._theme is not None else get_theme()

    def render(self, out: TextIO) -> None:
        self._strategy.render(out, self.theme)

    def print(self, file: TextIO | None = None) -> None:
        """Render to stdout (or ``file``), followed by a blank line."""
        out = file if file is not None else sys.stdout
        self.render(out)
        out.write("\n")

    def write_to(self, sink: BinaryIO) -> int:
        """
        Write the UTF-8 encoded diff to ``sink``.

        Partial writes are retried until everything is written and the total
        byte count is returned. A sink that stops accepting data raises
        ``OSError``; errors raised by the sink itself are not caught.
        """
        data = memoryview(str(self).encode("utf-8"))
        total = 0
        while total < len(data):
            written = sink.write(data[total:])
            if written is None:
                # buffered sinks take everything and report nothing
                return len(data)
            if written <= 0:
                raise OSError(
                    f"short write: {total} of {len(data)} bytes written to sink"
                )
            total += written
        return total

    def __str__(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return f"DiffView({self._strategy!r})"


def Diff(
    a: Any, b: Any, *, theme: Theme | None = None, width: int = DEFAULT_WIDTH
) -> DiffView:
    """Create a DiffView comparing ``a`` and ``b``."""
    return DiffView(select_strategy(a, b, width=width), theme=theme)
