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
Thin adapter over diff-match-patch.

diff-match-patch works on lists of ``(op, text)`` tuples and mutates them in
place. The adapter hides that behind DiffOperation values and returns new
lists from every call.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from diff_match_patch import diff_match_patch
from loguru import logger

from diffview.constants import DIFF_TIMEOUT


class OpKind(IntEnum):
    DELETE = diff_match_patch.DIFF_DELETE
    EQUAL = diff_match_patch.DIFF_EQUAL
    INSERT = diff_match_patch.DIFF_INSERT


@dataclass(frozen=True)
class DiffOperation:
    kind: OpKind
    text: str


def _to_raw(ops: Sequence[DiffOperation]) -> list[tuple[int, str]]:
    return [(int(op.kind), op.text) for op in ops]


def _from_raw(diffs: list[tuple[int, str]]) -> list[DiffOperation]:
    return [DiffOperation(OpKind(kind), text) for kind, text in diffs]


class DiffEngine:
    """Diff, cleanup and patch construction backed by diff-match-patch."""

    def __init__(self, timeout: float = DIFF_TIMEOUT):
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = timeout

    def diff_chars(self, a: str, b: str) -> list[DiffOperation]:
        """Character level diff, without the line level speedup pass."""
        return _from_raw(self._dmp.diff_main(a, b, False))

    def diff_lines(self, a: str, b: str) -> list[DiffOperation]:
        """
        Line level diff.

        Each distinct line is mapped to a single character token, the tokens
        are diffed, and the result is expanded back to the original lines.
        """
        chars_a, chars_b, line_array = self._dmp.diff_linesToChars(a, b)
        diffs = self._dmp.diff_main(chars_a, chars_b, False)
        self._dmp.diff_charsToLines(diffs, line_array)
        logger.debug(
            "Line diff: lines={lines} ops={ops}",
            lines=len(line_array) - 1,
            ops=len(diffs),
        )
        return _from_raw(diffs)

    def cleanup_semantic_lossless(
        self, ops: Sequence[DiffOperation]
    ) -> list[DiffOperation]:
        diffs = _to_raw(ops)
        self._dmp.diff_cleanupSemanticLossless(diffs)
        return _from_raw(diffs)

    def cleanup_semantic(self, ops: Sequence[DiffOperation]) -> list[DiffOperation]:
        diffs = _to_raw(ops)
        self._dmp.diff_cleanupSemantic(diffs)
        return _from_raw(diffs)

    def make_patch(self, ops: Sequence[DiffOperation]) -> list:
        """Build hunks from a diff. ``str()`` of a hunk gives its serialized text."""
        return self._dmp.patch_make(_to_raw(ops))
