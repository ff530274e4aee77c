"""
Profile module data models.

These models define the profile aggregate (profile, theme, ordered links),
the cached user, the partial-update payloads accepted by the store, and the
store snapshot that is persisted.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, ClassVar, Optional
import uuid

from pydantic import BaseModel, EmailStr, Field

from shared.models import CamelModel
from modules.analytics.models import Analytics
from modules.plans.models import SubscriptionStatus, SubscriptionTier
from modules.themes.models import Theme


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class LinkItem(CamelModel):
    """
    One clickable entry on a profile.

    ``order`` is the zero-based display position. The store keeps the order
    values of a profile's links dense: exactly ``0..n-1``.
    """

    id: str = Field(..., description="Link ID (UUID)")
    title: str = Field(..., description="Display text")
    url: str = Field(..., description="Normalized destination URL")
    icon: Optional[str] = Field(None, description="Icon tag, derived from the domain")
    is_active: bool = Field(default=True, description="Shown on the public page")
    order: int = Field(..., ge=0, description="Display position")

    # Analytics
    click_count: Optional[int] = Field(None, ge=0)
    last_clicked: Optional[datetime] = None

    # Monetization
    is_paid: Optional[bool] = None
    price: Optional[Decimal] = None
    is_affiliate: Optional[bool] = None
    affiliate_code: Optional[str] = None


class Profile(CamelModel):
    """A user's link-in-bio page."""

    id: str = Field(default_factory=new_id, description="Profile ID (UUID)")
    user_id: Optional[str] = Field(None, description="Owning user, if signed in")
    username: Optional[str] = Field(None, description="Public short-URL handle")
    custom_domain: Optional[str] = Field(None, description="Custom domain")
    title: str = Field(default="Your Name", description="Display name")
    bio: str = Field(default="Welcome to my link in bio page!", description="Short bio")
    avatar_url: str = Field(default="", description="Avatar image URL")
    theme: Theme = Field(..., description="Page theme")
    links: list[LinkItem] = Field(default_factory=list, description="Links, any storage order")
    is_public: bool = Field(default=True, description="Visible on the public route")
    is_premium: bool = Field(default=False)
    subscription_tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE,
        description="Display-only tier; feature gates read the user's tier",
    )
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def sorted_links(self, include_inactive: bool = True) -> list[LinkItem]:
        """Links in display order, optionally hiding inactive ones."""
        links = sorted(self.links, key=lambda link: link.order)
        if include_inactive:
            return links
        return [link for link in links if link.is_active]

    def find_link(self, link_id: str) -> Optional[LinkItem]:
        for link in self.links:
            if link.id == link_id:
                return link
        return None


class User(CamelModel):
    """
    Account identity, owned by the auth collaborator.

    The store only holds a cached copy.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: EmailStr = Field(..., description="Email address")
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    subscription_tier: SubscriptionTier = Field(default=SubscriptionTier.FREE)
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.ACTIVE)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    profiles: list[Profile] = Field(default_factory=list, description="Fetched lazily")


# -----------------------------------------------------------------------------
# Store inputs
# -----------------------------------------------------------------------------


class UserUpdate(CamelModel):
    """Fields of the cached user that may be edited."""

    nullable_fields: ClassVar[tuple[str, ...]] = ("username", "full_name", "avatar_url")

    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    subscription_tier: Optional[SubscriptionTier] = None
    subscription_status: Optional[SubscriptionStatus] = None


class ProfileCreate(CamelModel):
    """Fields that may be supplied when creating a profile. Omitted fields use defaults."""

    user_id: Optional[str] = None
    username: Optional[str] = None
    custom_domain: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    theme: Optional[Theme] = None
    links: Optional[list[LinkItem]] = None
    is_public: Optional[bool] = None
    is_premium: Optional[bool] = None
    subscription_tier: Optional[SubscriptionTier] = None


class ProfileUpdate(CamelModel):
    """Display fields of the current profile that may be edited."""

    nullable_fields: ClassVar[tuple[str, ...]] = ("username", "custom_domain")

    title: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    username: Optional[str] = None
    custom_domain: Optional[str] = None


class LinkCreate(CamelModel):
    """New link payload. ``id``, ``order`` and ``is_active`` are assigned by the store."""

    title: str
    url: str
    icon: Optional[str] = None
    is_paid: Optional[bool] = None
    price: Optional[Decimal] = None
    is_affiliate: Optional[bool] = None
    affiliate_code: Optional[str] = None


class LinkUpdate(CamelModel):
    """Partial link edit. ``id`` and ``order`` are not editable here."""

    nullable_fields: ClassVar[tuple[str, ...]] = (
        "icon",
        "is_paid",
        "price",
        "is_affiliate",
        "affiliate_code",
    )

    title: Optional[str] = None
    url: Optional[str] = None
    icon: Optional[str] = None
    is_active: Optional[bool] = None
    is_paid: Optional[bool] = None
    price: Optional[Decimal] = None
    is_affiliate: Optional[bool] = None
    affiliate_code: Optional[str] = None


# -----------------------------------------------------------------------------
# Snapshot
# -----------------------------------------------------------------------------


class StoreState(CamelModel):
    """
    Everything the store owns, and the shape that gets persisted.

    Profiles are stored once; the current profile is derived from
    ``current_profile_id``.
    """

    user: Optional[User] = None
    current_profile_id: Optional[str] = None
    profiles: list[Profile] = Field(default_factory=list)
    analytics: dict[str, Analytics] = Field(
        default_factory=dict,
        description="Analytics aggregates keyed by profile id",
    )

    @property
    def current_profile(self) -> Optional[Profile]:
        if self.current_profile_id is None:
            return None
        for profile in self.profiles:
            if profile.id == self.current_profile_id:
                return profile
        return None


def fields_set(update: BaseModel) -> dict[str, Any]:
    """
    The explicitly-set fields of a partial model, keeping nested models intact.

    ``model_dump(exclude_unset=True)`` would turn nested models into dicts,
    which ``model_copy(update=...)`` would then store as-is. An explicit None
    is kept only for fields listed in the model's ``nullable_fields``; for
    every other field it means "leave unchanged".
    """
    nullable = getattr(update, "nullable_fields", ())
    fields = {}
    for name in update.model_fields_set:
        value = getattr(update, name)
        if value is not None or name in nullable:
            fields[name] = value
    return fields
