"""
Base repository class for database access.

Encapsulates Supabase client access and the row helpers shared by the
repositories that map table rows onto pydantic models.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods
    and handle row-to-model mapping internally.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            def get_by_username(self, username: str) -> Optional[Profile]:
                result = self._db.table("profiles").select("*").eq("username", username).execute()
                row = self._first_row(result)
                return self._map_to_profile(row) if row else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _first_row(result: Any) -> Optional[dict[str, Any]]:
        """First row of a query response, or None when it returned nothing."""
        if not result.data:
            return None
        return result.data[0]

    @staticmethod
    def _parse_timestamp(value: Any) -> Any:
        """Parse a PostgREST ISO timestamp (``Z`` suffix allowed); other values pass through."""
        if isinstance(value, str):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return value
