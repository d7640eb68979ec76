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
Diff strategies.

Both strategies are plain value objects holding the two texts; every render
recomputes the diff from them. They share the hunk rendering in
``hunk_renderer`` and only differ in how the diff is computed and whether the
operation transcript is printed first.
"""

from dataclasses import dataclass
from typing import Protocol, TextIO

from diffview.core.diff.engine import DiffEngine, OpKind
from diffview.core.diff.hunk_renderer import render_patch
from diffview.core.logging.utils import time_block
from diffview.core.ui.theme import Theme

_OP_STYLES = {
    OpKind.DELETE: "deletion",
    OpKind.INSERT: "insertion",
}


class DiffStrategy(Protocol):
    """A way of rendering the difference between two texts."""

    def render(self, out: TextIO, theme: Theme) -> None:
        """Write the rendered diff to ``out``, styled with ``theme``."""
        ...


@dataclass(frozen=True)
class WordDiff:
    """
    Character level diff for single line texts.

    Prints every operation of the cleaned diff on its own line, a blank line,
    and then the hunks built from the same diff.
    """

    a: str
    b: str

    def render(self, out: TextIO, theme: Theme) -> None:
        with time_block("word diff"):
            engine = DiffEngine()
            diffs = engine.diff_chars(self.a, self.b)
            # lossless pass first, it only slides edits to word boundaries
            diffs = engine.cleanup_semantic_lossless(diffs)
            diffs = engine.cleanup_semantic(diffs)

            for op in diffs:
                out.write(theme.apply(_OP_STYLES.get(op.kind), op.text) + "\n")

            out.write("\n")

            render_patch(engine.make_patch(diffs), out, theme)


@dataclass(frozen=True)
class UnifiedDiff:
    """Line level diff for multi-line texts. Only the hunks are printed."""

    a: str
    b: str

    def render(self, out: TextIO, theme: Theme) -> None:
        with time_block("unified diff"):
            engine = DiffEngine()
            diffs = engine.cleanup_semantic(engine.diff_lines(self.a, self.b))

            render_patch(engine.make_patch(diffs), out, theme)
