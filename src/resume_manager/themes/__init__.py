"""Theme registry: theme name -> renderable resume / cover-letter components."""

from __future__ import annotations

from types import MappingProxyType

from resume_manager.themes.base import DocumentComponent, Theme, ThemeComponents
from resume_manager.themes.classic import CLASSIC_THEME
from resume_manager.themes.modern import MODERN_THEME

DEFAULT_THEME = "modern"

THEMES: MappingProxyType[str, Theme] = MappingProxyType(
    {
        MODERN_THEME.name: MODERN_THEME,
        CLASSIC_THEME.name: CLASSIC_THEME,
    }
)

__all__ = [
    "DEFAULT_THEME",
    "DocumentComponent",
    "THEMES",
    "Theme",
    "ThemeComponents",
]
