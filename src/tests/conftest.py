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

import pytest

from diffview.core.ui.theme import Theme, get_theme, set_theme


@pytest.fixture
def marker_theme():
    """A theme that wraps styled text in readable markers instead of ANSI codes."""
    return Theme(
        name="markers",
        styles={"insertion": "<ins>", "deletion": "<del>"},
        reset="</>",
    )


@pytest.fixture(autouse=True)
def restore_theme():
    previous = get_theme()
    yield
    set_theme(previous.name)
