# SPDX-License-Identifier: MIT

from justdoit.model.theme_type import ThemeType
from justdoit.view.themes.base import Theme
from justdoit.view.themes.default import DefaultTheme
from justdoit.view.themes.hourglass import HourglassTheme
from justdoit.view.themes.retro import RetroTheme
from justdoit.view.themes.synthwave import SynthwaveTheme


def get_theme(theme_type: ThemeType, show_quit_hint: bool = True) -> Theme:
    """Build the renderer for a theme type."""
    match theme_type:
        case ThemeType.DEFAULT:
            return DefaultTheme(show_quit_hint)
        case ThemeType.RETRO:
            return RetroTheme(show_quit_hint)
        case ThemeType.SYNTHWAVE:
            return SynthwaveTheme(show_quit_hint)
        case ThemeType.HOURGLASS:
            return HourglassTheme(show_quit_hint)
    raise ValueError(f"No renderer for theme {theme_type}")


def get_theme_by_name(name: str, show_quit_hint: bool = True) -> Theme:
    return get_theme(ThemeType.from_name(name), show_quit_hint)
