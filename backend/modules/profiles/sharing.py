"""
Shareable URL generation.

Pure functions over (origin, profile). ``origin`` is the public origin of the
running app; when it is unknown (None or empty) every URL degrades to "".
These URL shapes are the public contract the viewer route depends on.
"""

from typing import Optional

from .models import Profile

USERNAME_PLACEHOLDER = "username"


def _base(origin: Optional[str]) -> str:
    return (origin or "").strip().rstrip("/")


def generate_shareable_url(origin: Optional[str], profile: Optional[Profile]) -> str:
    """``{origin}/u/{username}`` when the profile has a username, else ``{origin}/profile/{id}``."""
    base = _base(origin)
    if not base or profile is None:
        return ""
    if profile.username:
        return f"{base}/u/{profile.username}"
    return f"{base}/profile/{profile.id}"


def generate_username_url(origin: Optional[str], profile: Optional[Profile]) -> str:
    """``{origin}/u/{username}``, with a literal placeholder when no username is set."""
    base = _base(origin)
    if not base:
        return ""
    username = profile.username if profile is not None and profile.username else USERNAME_PLACEHOLDER
    return f"{base}/u/{username}"
