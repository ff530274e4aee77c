"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the module
implementations: the snapshot storage and the profile source the public
viewer reads from. The editor owns its own store (see main.py) so that the
snapshot keeps a single writer.
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.profiles.interfaces import IProfileSource, IStorageBackend
    from modules.viewer.service import ProfileViewer


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._storage: "IStorageBackend | None" = None
        self._profile_source: "IProfileSource | None" = None
        self._viewer: "ProfileViewer | None" = None

    @property
    def storage(self) -> "IStorageBackend":
        """Get the snapshot storage backend."""
        if self._storage is None:
            from modules.profiles.persistence import create_storage
            self._storage = create_storage(get_settings())
        return self._storage

    @property
    def profile_source(self) -> "IProfileSource":
        """Get the source of published profiles."""
        if self._profile_source is None:
            settings = get_settings()
            if settings.profile_source == "supabase":
                from modules.profiles.repository import ProfileRepository
                from shared.database import get_supabase_client
                self._profile_source = ProfileRepository(get_supabase_client())
            else:
                from modules.viewer.sources import SnapshotProfileSource
                self._profile_source = SnapshotProfileSource(
                    self.storage, settings.storage_key
                )
        return self._profile_source

    @property
    def viewer(self) -> "ProfileViewer":
        """Get the public profile viewer."""
        if self._viewer is None:
            from modules.viewer.service import ProfileViewer
            self._viewer = ProfileViewer(self.profile_source)
        return self._viewer

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._storage = None
        self._profile_source = None
        self._viewer = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_profile_viewer() -> "ProfileViewer":
    """FastAPI dependency for the public profile viewer."""
    return get_container().viewer
