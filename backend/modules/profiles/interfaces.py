"""
Profile module interfaces.

The store depends on IStorageBackend, not on a concrete storage. The public
viewer depends on IProfileSource so that it can read either the local
snapshot or the hosted profiles table.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Profile


@runtime_checkable
class IStorageBackend(Protocol):
    """
    Durable key-value storage for serialized store snapshots.

    Mirrors browser local storage: one JSON document per name.
    """

    def load(self, name: str) -> Optional[dict[str, Any]]:
        """
        Load the document stored under ``name``.

        Returns:
            The decoded document, or None if nothing is stored

        Raises:
            ExternalServiceError: If the storage cannot be read or decoded
        """
        ...

    def save(self, name: str, payload: dict[str, Any]) -> None:
        """
        Store ``payload`` under ``name``, replacing any previous document.

        Raises:
            ExternalServiceError: If the write fails
        """
        ...

    def remove(self, name: str) -> None:
        """Delete the document stored under ``name``, if any."""
        ...


@runtime_checkable
class IProfileSource(Protocol):
    """Read access to published profiles, used by the public viewer."""

    def get_by_username(self, username: str) -> Optional[Profile]:
        """
        Find a profile by exact username.

        Returns:
            The profile, or None if no profile has that username
        """
        ...
