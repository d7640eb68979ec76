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

from typing import Any

from loguru import logger

from diffview.constants import DEFAULT_WIDTH
from diffview.core.diff.strategies import DiffStrategy, UnifiedDiff, WordDiff
from diffview.core.diff.stringify import stringify


def select_strategy(a: Any, b: Any, *, width: int = DEFAULT_WIDTH) -> DiffStrategy:
    """
    Stringify both values and pick a strategy for them.

    Texts without line breaks get a word diff, as soon as one of them spans
    several lines the unified diff is used.
    """
    text_a = stringify(a, width=width)
    text_b = stringify(b, width=width)

    if "\n" in text_a or "\n" in text_b:
        strategy: DiffStrategy = UnifiedDiff(text_a, text_b)
    else:
        strategy = WordDiff(text_a, text_b)

    logger.debug(
        "Selected {strategy} for inputs of {len_a} and {len_b} chars",
        strategy=type(strategy).__name__,
        len_a=len(text_a),
        len_b=len(text_b),
    )
    return strategy
