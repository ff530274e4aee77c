"""
Public profile viewer.

Resolves ``/u/{username}`` to the profile a visitor should see.
"""

import logging
from typing import Optional

from modules.profiles.interfaces import IProfileSource
from modules.profiles.models import Profile

from .exceptions import PublicProfileNotFoundError
from .models import PublicLink, PublicProfile

logger = logging.getLogger(__name__)


def to_public_profile(profile: Profile) -> PublicProfile:
    """Project a profile onto its public view: active links only, sorted by order."""
    return PublicProfile(
        id=profile.id,
        username=profile.username or "",
        title=profile.title,
        bio=profile.bio,
        avatar_url=profile.avatar_url,
        theme=profile.theme.model_copy(deep=True),
        links=[
            PublicLink(
                id=link.id,
                title=link.title,
                url=link.url,
                icon=link.icon,
                is_paid=link.is_paid,
                price=link.price,
            )
            for link in profile.sorted_links(include_inactive=False)
        ],
    )


class ProfileViewer:
    """Looks up public profiles by username in an ``IProfileSource``."""

    def __init__(self, source: IProfileSource):
        self._source = source

    def find_public_profile(self, username: str) -> Optional[PublicProfile]:
        """
        Exact-match lookup.

        Returns:
            The public view, or None if no profile matches or it is not public
        """
        if not username:
            return None
        profile = self._source.get_by_username(username)
        if profile is None or not profile.is_public:
            logger.debug(f"No public profile for username {username!r}")
            return None
        return to_public_profile(profile)

    def get_public_profile(self, username: str) -> PublicProfile:
        """
        Like ``find_public_profile`` but raising on a miss.

        Raises:
            PublicProfileNotFoundError: If there is nothing to show
        """
        public = self.find_public_profile(username)
        if public is None:
            raise PublicProfileNotFoundError(username)
        return public
