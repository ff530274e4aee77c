"""
Profile sources for the public viewer.
"""

import logging
from typing import Optional

from shared.exceptions import ExternalServiceError
from modules.profiles.interfaces import IStorageBackend
from modules.profiles.models import Profile
from modules.profiles.persistence import find_profile_in_document
from modules.profiles.store import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class SnapshotProfileSource:
    """
    Looks profiles up in the editor's persisted snapshot.

    The document is re-read on every lookup so that edits saved by the
    editor show up without restarting the server. Both the multi-profile
    format and the legacy single-profile format are searched.
    """

    def __init__(self, storage: IStorageBackend, storage_key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._storage_key = storage_key

    def get_by_username(self, username: str) -> Optional[Profile]:
        try:
            document = self._storage.load(self._storage_key)
        except ExternalServiceError as e:
            logger.error(f"Error loading profile snapshot: {e.message}")
            return None
        return find_profile_in_document(document, username)
