"""
Profiles module.

The profile aggregate (profile, theme, ordered links), the store that owns
and mutates it, snapshot persistence, and the pure helpers around it.

Public API:
- ProfileStore: the state container
- StoreResult / StoreStatus: mutation outcomes
- Profile, LinkItem, User, StoreState: models
- ProfileCreate / ProfileUpdate / LinkCreate / LinkUpdate / UserUpdate: store inputs
- IStorageBackend, InMemoryStorage, JsonFileStorage: persistence
- generate_shareable_url / generate_username_url: share URLs
- validate_link_form / validate_profile_form: editor form validation
"""

from .models import (
    LinkCreate,
    LinkItem,
    LinkUpdate,
    Profile,
    ProfileCreate,
    ProfileUpdate,
    StoreState,
    User,
    UserUpdate,
)
from .exceptions import (
    FormValidationError,
    InvalidReorderError,
    LinkNotFoundError,
    NoActiveProfileError,
    NoUserError,
    PlanLimitError,
    ProfileError,
    ProfileNotFoundError,
)
from .interfaces import IProfileSource, IStorageBackend
from .links import (
    format_url,
    generate_slug,
    get_domain_from_url,
    get_icon_for_url,
    is_valid_url,
)
from .forms import validate_link_edit, validate_link_form, validate_profile_form
from .sharing import generate_shareable_url, generate_username_url
from .persistence import (
    InMemoryStorage,
    JsonFileStorage,
    create_storage,
    dump_state,
    load_state,
)
from .results import StoreResult, StoreStatus
from .store import ProfileStore
from .repository import ProfileRepository

__all__ = [
    # Models
    "LinkCreate",
    "LinkItem",
    "LinkUpdate",
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "StoreState",
    "User",
    "UserUpdate",
    # Exceptions
    "FormValidationError",
    "InvalidReorderError",
    "LinkNotFoundError",
    "NoActiveProfileError",
    "NoUserError",
    "PlanLimitError",
    "ProfileError",
    "ProfileNotFoundError",
    # Interfaces
    "IProfileSource",
    "IStorageBackend",
    # Link helpers
    "format_url",
    "generate_slug",
    "get_domain_from_url",
    "get_icon_for_url",
    "is_valid_url",
    # Forms
    "validate_link_edit",
    "validate_link_form",
    "validate_profile_form",
    # Share URLs
    "generate_shareable_url",
    "generate_username_url",
    # Persistence
    "InMemoryStorage",
    "JsonFileStorage",
    "create_storage",
    "dump_state",
    "load_state",
    # Store
    "StoreResult",
    "StoreStatus",
    "ProfileStore",
    "ProfileRepository",
]
