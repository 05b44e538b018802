# SPDX-License-Identifier: MIT

from justdoit.configuration import LOG_LEVELS
from justdoit.model.theme_type import ThemeType


def complete_theme(incomplete: str) -> list[str]:
    """Return list of theme names for shell completion."""
    return [name for name in ThemeType.names() if name.startswith(incomplete.lower())]


def complete_log_level(incomplete: str) -> list[str]:
    return [level for level in LOG_LEVELS if level.startswith(incomplete.upper())]
