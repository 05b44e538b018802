# SPDX-License-Identifier: MIT

from enum import Enum


class ThemeType(Enum):
    DEFAULT = "default"
    RETRO = "retro"
    SYNTHWAVE = "synthwave"
    HOURGLASS = "hourglass"

    @classmethod
    def from_name(cls, name: object) -> "ThemeType":
        """Look up a theme by name, ignoring case. Anything unrecognized falls back to DEFAULT."""
        if not isinstance(name, str):
            return cls.DEFAULT
        key = name.strip().lower()
        if key in THEME_ALIASES:
            return THEME_ALIASES[key]
        for theme_type in cls:
            if theme_type.value == key:
                return theme_type
        return cls.DEFAULT

    @classmethod
    def names(cls) -> list[str]:
        return [theme_type.value for theme_type in cls]


# Older names still accepted on the command line
THEME_ALIASES: dict[str, ThemeType] = {
    "cyberpunk": ThemeType.SYNTHWAVE,
}
