"""
Theme module exceptions.
"""

from shared.exceptions import NotFoundError


class ThemePresetNotFoundError(NotFoundError):
    """Raised when a preset name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(
            f"Theme preset not found: {name}",
            code="THEME_PRESET_NOT_FOUND",
            details={"name": name},
        )
