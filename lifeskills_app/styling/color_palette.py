"""Color palette for the evaluation console supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    # Indicator group rows in the rubric table
    BACKGROUND_GROUP = ThemeColors(light="#E2E8F0", dark="#334155")

    # School navy
    ACCENT_PRIMARY = ThemeColors(light="#1E3A8A", dark="#60A5FA")
    ACCENT_DARK = ThemeColors(light="#172554", dark="#93C5FD")

    ERROR = ThemeColors(light="#EF4444", dark="#FF6B6B")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")

    # Score choice colors, 3 down to 0
    SCORE_COLORS = {
        3: ThemeColors(light="#166534", dark="#4ADE80"),
        2: ThemeColors(light="#1E40AF", dark="#60A5FA"),
        1: ThemeColors(light="#C2410C", dark="#FB923C"),
        0: ThemeColors(light="#B91C1C", dark="#F87171"),
    }
