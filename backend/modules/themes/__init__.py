"""
Themes module.

Static catalog of named theme presets, partitioned into free and premium.

Public API:
- Theme, ThemeUpdate, BackgroundGradient: theme models
- ThemePreset, THEME_PRESETS: the catalog
- get_preset / default_theme / available_presets: catalog lookups
"""

from .models import (
    BackgroundGradient,
    GradientDirection,
    Theme,
    ThemeCategory,
    ThemePreset,
    ThemeUpdate,
)
from .catalog import (
    THEME_PRESETS,
    available_presets,
    default_theme,
    free_presets,
    get_preset,
    premium_presets,
)
from .exceptions import ThemePresetNotFoundError

__all__ = [
    # Models
    "BackgroundGradient",
    "GradientDirection",
    "Theme",
    "ThemeCategory",
    "ThemePreset",
    "ThemeUpdate",
    # Catalog
    "THEME_PRESETS",
    "available_presets",
    "default_theme",
    "free_presets",
    "get_preset",
    "premium_presets",
    # Exceptions
    "ThemePresetNotFoundError",
]
