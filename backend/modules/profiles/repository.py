"""
Profile repository for the hosted ``profiles`` table.

Encapsulates the Supabase queries and the row <-> model mapping. Theme and
links are stored as JSON columns in the same camelCase shape the local
snapshot uses.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.themes.models import Theme

from .models import LinkItem, Profile


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for published profiles.

    Note: This repository does NOT perform authorization checks.
    Row Level Security or the caller is responsible for ownership.
    """

    TABLE = "profiles"

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        result = self._db.table(self.TABLE).select("*").eq("id", profile_id).execute()
        row = self._first_row(result)
        return self._map_to_profile(row) if row else None

    def get_by_username(self, username: str) -> Optional[Profile]:
        """Find a profile by exact username."""
        result = self._db.table(self.TABLE).select("*").eq("username", username).execute()
        row = self._first_row(result)
        return self._map_to_profile(row) if row else None

    def list_for_user(self, user_id: str) -> list[Profile]:
        """All profiles owned by ``user_id``, oldest first."""
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_profile(row) for row in result.data]

    def upsert(self, profile: Profile) -> Profile:
        """Insert or replace the row for ``profile``."""
        result = self._db.table(self.TABLE).upsert(self._map_to_row(profile)).execute()
        return self._map_to_profile(result.data[0])

    def delete(self, profile_id: str) -> bool:
        """
        Delete a profile row.

        Returns:
            True if a row was deleted.
        """
        result = self._db.table(self.TABLE).delete().eq("id", profile_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def _map_to_profile(self, row: dict[str, Any]) -> Profile:
        links = [LinkItem.model_validate(link) for link in row.get("links") or []]
        return Profile(
            id=row["id"],
            user_id=row.get("user_id"),
            username=row.get("username"),
            custom_domain=row.get("custom_domain"),
            title=row.get("title") or "",
            bio=row.get("bio") or "",
            avatar_url=row.get("avatar_url") or "",
            theme=Theme.model_validate(row["theme"]),
            links=links,
            is_public=row.get("is_public", True),
            is_premium=row.get("is_premium", False),
            subscription_tier=row.get("subscription_tier") or "free",
            created_at=self._parse_timestamp(row["created_at"]),
            updated_at=self._parse_timestamp(row["updated_at"]),
        )

    def _map_to_row(self, profile: Profile) -> dict[str, Any]:
        return {
            "id": profile.id,
            "user_id": profile.user_id,
            "username": profile.username,
            "custom_domain": profile.custom_domain,
            "title": profile.title,
            "bio": profile.bio,
            "avatar_url": profile.avatar_url,
            "theme": profile.theme.to_json_dict(),
            "links": [link.to_json_dict() for link in profile.sorted_links()],
            "is_public": profile.is_public,
            "is_premium": profile.is_premium,
            "subscription_tier": profile.subscription_tier.value,
            "created_at": profile.created_at.isoformat(),
            "updated_at": profile.updated_at.isoformat(),
        }
