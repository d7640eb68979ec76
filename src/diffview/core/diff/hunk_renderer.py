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
Rendering of serialized hunks.

A serialized hunk is a block of lines, each starting with one of:

    @   hunk header ("@@ -1,5 +1,5 @@")
    ' ' context
    +   insertion
    -   deletion

Insertion and deletion lines may carry several logical lines joined by an
encoded newline. They are split, decoded and styled one by one; header and
context lines are only decoded.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from diffview.core.diff.escape import ENCODED_NEWLINE, unescape
from diffview.core.exceptions import malformed_patch_line
from diffview.core.ui.theme import Theme

CONTEXT_PREFIXES = frozenset({" ", "@"})


class LineKind(Enum):
    BLANK = "blank"
    CONTEXT = "context"
    INSERTION = "insertion"
    DELETION = "deletion"


_PREFIX_KINDS = {"+": LineKind.INSERTION, "-": LineKind.DELETION}
_KIND_PREFIXES = {kind: prefix for prefix, kind in _PREFIX_KINDS.items()}


@dataclass(frozen=True)
class PatchLine:
    kind: LineKind
    # decoded logical lines, without the +/- prefix
    lines: tuple[str, ...] = ()

    @property
    def prefix(self) -> str:
        return _KIND_PREFIXES.get(self.kind, "")


def classify_line(line: str) -> PatchLine:
    """
    Classify and decode one physical line of a serialized hunk.

    Raises MalformedPatchError when the line starts with a character that no
    hunk line can start with.
    """
    if not line:
        return PatchLine(LineKind.BLANK)

    prefix = line[0]
    kind = _PREFIX_KINDS.get(prefix)
    if kind is not None:
        payload = line[1:].removesuffix(ENCODED_NEWLINE)
        return PatchLine(
            kind, tuple(unescape(part) for part in payload.split(ENCODED_NEWLINE))
        )

    if prefix not in CONTEXT_PREFIXES:
        raise malformed_patch_line(line)

    return PatchLine(LineKind.CONTEXT, (unescape(line),))


def render_patch(patch: Iterable[object], out: TextIO, theme: Theme) -> None:
    """
    Write every hunk of ``patch`` to ``out``.

    Hunks are serialized with ``str()``. Lines are written as soon as they are
    classified, so on a malformed line everything before it is already in
    ``out``.
    """
    for hunk in patch:
        for line in str(hunk).split("\n"):
            patch_line = classify_line(line)

            if patch_line.kind is LineKind.BLANK:
                out.write("\n")
            elif patch_line.kind is LineKind.CONTEXT:
                out.write(patch_line.lines[0] + "\n")
            else:
                style = patch_line.kind.value
                for text in patch_line.lines:
                    out.write(theme.apply(style, patch_line.prefix + text) + "\n")
