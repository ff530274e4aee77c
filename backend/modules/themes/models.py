"""
Theme module data models.

A Theme is always fully populated: presets replace it wholesale and custom
edits merge into it field by field (see ``ThemeUpdate``).
"""

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from shared.models import CamelModel


class GradientDirection(str, Enum):
    """Tailwind-style gradient directions supported by the page renderer."""

    TO_RIGHT = "to-r"
    TO_BOTTOM_RIGHT = "to-br"
    TO_BOTTOM = "to-b"
    TO_BOTTOM_LEFT = "to-bl"
    TO_LEFT = "to-l"
    TO_TOP_LEFT = "to-tl"
    TO_TOP = "to-t"
    TO_TOP_RIGHT = "to-tr"


class ThemeCategory(str, Enum):
    """Catalog tier of a theme preset."""

    FREE = "free"
    PREMIUM = "premium"


class BackgroundGradient(CamelModel):
    """Two-stop background gradient."""

    from_color: str = Field(..., alias="from", description="Start color")
    to_color: str = Field(..., alias="to", description="End color")
    direction: GradientDirection = Field(
        default=GradientDirection.TO_BOTTOM_RIGHT,
        description="Gradient direction",
    )


class Theme(CamelModel):
    """
    Visual styling for a profile page.

    Color values are stored as given; the model does not check their format.
    """

    primary_color: str = Field(..., description="Accent color for buttons and highlights")
    background_color: str = Field(..., description="Page background color")
    text_color: str = Field(..., description="Body text color")
    card_color: str = Field(..., description="Link card color")
    is_dark_mode: bool = Field(default=False, description="Whether the theme is dark")
    background_gradient: Optional[BackgroundGradient] = Field(
        None,
        description="Optional gradient drawn over the background color",
    )


class ThemeUpdate(CamelModel):
    """Partial theme edit. Only fields that are explicitly set are merged."""

    nullable_fields: ClassVar[tuple[str, ...]] = ("background_gradient",)

    primary_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    card_color: Optional[str] = None
    is_dark_mode: Optional[bool] = None
    background_gradient: Optional[BackgroundGradient] = None


class ThemePreset(CamelModel):
    """A named, catalog-defined theme."""

    name: str = Field(..., description="Display name, also the lookup key")
    theme: Theme = Field(..., description="Theme applied when the preset is chosen")
    category: ThemeCategory = Field(default=ThemeCategory.FREE, description="Catalog tier")

    @property
    def is_premium(self) -> bool:
        return self.category == ThemeCategory.PREMIUM
