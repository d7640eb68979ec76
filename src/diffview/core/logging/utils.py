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

import contextlib
from time import perf_counter

from loguru import logger


@contextlib.contextmanager
def time_block(block_name: str):
    """Log entry to and elapsed milliseconds of a diff rendering step."""
    log = logger.bind(block=block_name)
    log.debug("Starting {block}", block=block_name)
    start = perf_counter()

    try:
        yield
    finally:
        elapsed_ms = (perf_counter() - start) * 1000
        log.debug(
            "Finished {block} in {elapsed_ms:.1f}ms",
            block=block_name,
            elapsed_ms=elapsed_ms,
        )
