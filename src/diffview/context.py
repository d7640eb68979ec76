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

from typing import Literal

from pydantic import BaseModel, Field

from diffview.constants import DEFAULT_WIDTH, MIN_WIDTH


class DiffConfig(BaseModel):
    theme: Literal["classic", "ocean", "mono"] = Field(
        "classic", description="Color theme used for insertions and deletions"
    )
    width: int = Field(
        DEFAULT_WIDTH,
        ge=MIN_WIDTH,
        description="Line width used when pretty printing non-text values",
    )
    verbose: bool = Field(False, description="Enable verbose logging output")
    silent: bool = Field(
        False, description="Do not log anything to the console, only print the diff"
    )
