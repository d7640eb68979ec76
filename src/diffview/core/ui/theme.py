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

from dataclasses import dataclass, field

from colorama import Fore, Style


@dataclass(frozen=True)
class Theme:
    name: str
    styles: dict[str, str] = field(default_factory=dict)
    reset: str = ""

    def apply(self, key: str | None, text: str) -> str:
        """Wrap ``text`` in the style for ``key``. None or an unknown key leaves it as is."""
        prefix = self.styles.get(key, "") if key is not None else ""
        if not prefix:
            return text
        return f"{prefix}{text}{self.reset}"


def _build_themes() -> dict[str, Theme]:
    reset = Style.RESET_ALL
    return {
        "classic": Theme(
            name="classic",
            reset=reset,
            styles={
                "primary": Fore.CYAN + Style.BRIGHT,
                "error": Fore.RED + Style.BRIGHT,
                "muted": Fore.WHITE + Style.DIM,
                "insertion": Fore.GREEN,
                "deletion": Fore.RED,
            },
        ),
        "ocean": Theme(
            name="ocean",
            reset=reset,
            styles={
                "primary": Fore.CYAN + Style.BRIGHT,
                "error": Fore.RED + Style.BRIGHT,
                "muted": Fore.BLUE + Style.DIM,
                "insertion": Fore.CYAN + Style.BRIGHT,
                "deletion": Fore.MAGENTA,
            },
        ),
        "mono": Theme(
            name="mono",
            reset="",
            styles={},
        ),
    }


_THEMES = _build_themes()
_current_theme: Theme = _THEMES["classic"]


def set_theme(name: str) -> None:
    global _current_theme
    _current_theme = _THEMES.get(name, _THEMES["classic"])


def get_theme() -> Theme:
    return _current_theme


def available_themes() -> list[str]:
    return sorted(_THEMES.keys())


def themed(key: str, text: str) -> str:
    return _current_theme.apply(key, text)
