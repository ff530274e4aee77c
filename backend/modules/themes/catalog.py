"""
Static theme preset catalog.

Presets are looked up by exact name. The first preset is the default theme
for new profiles.
"""

from typing import Optional

from .models import (
    BackgroundGradient,
    GradientDirection,
    Theme,
    ThemeCategory,
    ThemePreset,
)


def _gradient(from_color: str, to_color: str) -> BackgroundGradient:
    return BackgroundGradient(
        from_color=from_color,
        to_color=to_color,
        direction=GradientDirection.TO_BOTTOM_RIGHT,
    )


THEME_PRESETS: tuple[ThemePreset, ...] = (
    ThemePreset(
        name="Ocean",
        category=ThemeCategory.FREE,
        theme=Theme(
            primary_color="#0ea5e9",
            background_color="#f0f9ff",
            text_color="#0f172a",
            card_color="#ffffff",
            is_dark_mode=False,
            background_gradient=_gradient("#f0f9ff", "#e0f2fe"),
        ),
    ),
    ThemePreset(
        name="Sunset",
        category=ThemeCategory.FREE,
        theme=Theme(
            primary_color="#f59e0b",
            background_color="#fef3c7",
            text_color="#0f172a",
            card_color="#ffffff",
            is_dark_mode=False,
            background_gradient=_gradient("#fef3c7", "#fed7aa"),
        ),
    ),
    ThemePreset(
        name="Forest",
        category=ThemeCategory.FREE,
        theme=Theme(
            primary_color="#10b981",
            background_color="#ecfdf5",
            text_color="#0f172a",
            card_color="#ffffff",
            is_dark_mode=False,
            background_gradient=_gradient("#ecfdf5", "#d1fae5"),
        ),
    ),
    ThemePreset(
        name="Dark Mode",
        category=ThemeCategory.FREE,
        theme=Theme(
            primary_color="#8b5cf6",
            background_color="#0f0f23",
            text_color="#f8fafc",
            card_color="#1e1e2e",
            is_dark_mode=True,
            background_gradient=_gradient("#0f0f23", "#1a1a2e"),
        ),
    ),
    ThemePreset(
        name="Minimal",
        category=ThemeCategory.FREE,
        theme=Theme(
            primary_color="#6b7280",
            background_color="#ffffff",
            text_color="#111827",
            card_color="#f9fafb",
            is_dark_mode=False,
        ),
    ),
    ThemePreset(
        name="Neon",
        category=ThemeCategory.PREMIUM,
        theme=Theme(
            primary_color="#00ff88",
            background_color="#0a0a0a",
            text_color="#ffffff",
            card_color="#1a1a1a",
            is_dark_mode=True,
            background_gradient=_gradient("#0a0a0a", "#1a1a1a"),
        ),
    ),
    ThemePreset(
        name="Aurora",
        category=ThemeCategory.PREMIUM,
        theme=Theme(
            primary_color="#ff6b9d",
            background_color="#667eea",
            text_color="#ffffff",
            card_color="#ffffff",
            is_dark_mode=False,
            background_gradient=_gradient("#667eea", "#764ba2"),
        ),
    ),
    ThemePreset(
        name="Midnight",
        category=ThemeCategory.PREMIUM,
        theme=Theme(
            primary_color="#6366f1",
            background_color="#0f172a",
            text_color="#f8fafc",
            card_color="#1e293b",
            is_dark_mode=True,
            background_gradient=_gradient("#0f172a", "#1e293b"),
        ),
    ),
)


def get_preset(name: str) -> Optional[ThemePreset]:
    """Find a preset by exact (case-sensitive) name."""
    for preset in THEME_PRESETS:
        if preset.name == name:
            return preset
    return None


def default_theme() -> Theme:
    """Return a fresh copy of the default (first) preset's theme."""
    return THEME_PRESETS[0].theme.model_copy(deep=True)


def free_presets() -> list[ThemePreset]:
    return [p for p in THEME_PRESETS if not p.is_premium]


def premium_presets() -> list[ThemePreset]:
    return [p for p in THEME_PRESETS if p.is_premium]


def available_presets(can_use_premium: bool) -> list[ThemePreset]:
    """Presets a picker may offer, hiding premium ones unless allowed."""
    if can_use_premium:
        return list(THEME_PRESETS)
    return free_presets()
