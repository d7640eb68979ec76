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

"""Decoding of the percent-escapes found in serialized diff-match-patch hunks."""

import re
from types import MappingProxyType

ENCODED_NEWLINE = "%0A"

# Closed table. Tabs and carriage returns are shown in caret notation,
# newlines decode to nothing as they already delimit lines.
_ESCAPES = MappingProxyType(
    {
        "%21": "!",
        "%7E": "~",
        "%27": "'",
        "%28": "(",
        "%29": ")",
        "%3B": ";",
        "%2F": "/",
        "%3F": "?",
        "%3A": ":",
        "%40": "@",
        "%26": "&",
        "%3D": "=",
        "%2B": "+",
        "%24": "$",
        "%2C": ",",
        "%23": "#",
        "%2A": "*",
        ENCODED_NEWLINE: "",
        "%5B": "[",
        "%5D": "]",
        "%09": "^I",
        "%0D": "^M",
        "%7B": "{",
        "%7D": "}",
        "%25": "%",
    }
)

# One alternation, one left-to-right pass: replaced text is never rescanned,
# so a decoded "%" cannot start another token.
_ESCAPE_RE = re.compile("|".join(re.escape(token) for token in _ESCAPES))


def unescape(line: str) -> str:
    """Replace every known escape token in ``line`` with its literal text."""
    if "%" not in line:
        return line
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], line)


def escape_table() -> dict[str, str]:
    """Return a copy of the escape table, encoded token to literal text."""
    return dict(_ESCAPES)
