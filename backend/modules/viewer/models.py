"""
Viewer module data models.

The read-only shape of a profile as a visitor sees it.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from shared.models import CamelModel
from modules.themes.models import Theme


class PublicLink(CamelModel):
    """A visible link. Analytics and affiliate bookkeeping are not exposed."""

    id: str
    title: str
    url: str
    icon: Optional[str] = None
    is_paid: Optional[bool] = None
    price: Optional[Decimal] = None


class PublicProfile(CamelModel):
    """A public profile with only its active links, in display order."""

    id: str = Field(..., description="Profile ID")
    username: str = Field(..., description="Handle the page was looked up by")
    title: str
    bio: str
    avatar_url: str = ""
    theme: Theme
    links: list[PublicLink] = Field(default_factory=list)
