"""
Snapshot persistence for the profile store.

Snapshots are versioned documents::

    {"version": 1, "state": {"user": ..., "currentProfileId": ...,
                             "profiles": [...], "analytics": {...}}}

Older single-profile documents (``{"profile": {...}}`` or
``{"state": {"profile": {...}}, "version": 0}``) are migrated on load.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError

from .interfaces import IStorageBackend
from .models import Profile, StoreState

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class InMemoryStorage:
    """Storage backend that keeps documents in a dict. For tests and previews."""

    def __init__(self, documents: Optional[dict[str, dict[str, Any]]] = None):
        self._documents: dict[str, str] = {}
        for name, payload in (documents or {}).items():
            self.save(name, payload)

    def load(self, name: str) -> Optional[dict[str, Any]]:
        raw = self._documents.get(name)
        if raw is None:
            return None
        # Stored as JSON text so callers never share live objects with storage
        return json.loads(raw)

    def save(self, name: str, payload: dict[str, Any]) -> None:
        self._documents[name] = json.dumps(payload)

    def remove(self, name: str) -> None:
        self._documents.pop(name, None)


class JsonFileStorage:
    """
    Storage backend writing one ``<name>.json`` file per document.

    Writes go to a temporary file that then replaces the target, so a failed
    write never leaves a truncated document behind.
    """

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        return self._directory / f"{name}.json"

    def load(self, name: str) -> Optional[dict[str, Any]]:
        path = self.path_for(name)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ExternalServiceError(
                f"Failed to read snapshot {path}: {e}",
                service="storage",
                code="STORAGE_READ_FAILED",
            )

    def save(self, name: str, payload: dict[str, Any]) -> None:
        path = self.path_for(name)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_path, path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ExternalServiceError(
                f"Failed to write snapshot {path}: {e}",
                service="storage",
                code="STORAGE_WRITE_FAILED",
            )

    def remove(self, name: str) -> None:
        self.path_for(name).unlink(missing_ok=True)


def create_storage(settings: Optional[Settings] = None) -> IStorageBackend:
    """Build the storage backend selected by ``STORAGE_BACKEND``."""
    settings = settings or get_settings()
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(settings.storage_dir)


# -----------------------------------------------------------------------------
# Snapshot encoding
# -----------------------------------------------------------------------------


def dump_state(state: StoreState) -> dict[str, Any]:
    """Encode a store snapshot as a versioned JSON document."""
    return {"version": SNAPSHOT_VERSION, "state": state.to_json_dict()}


def _migrate_single_profile(raw_profile: dict[str, Any]) -> dict[str, Any]:
    profile = Profile.model_validate(raw_profile)
    return {
        "user": None,
        "currentProfileId": profile.id,
        "profiles": [profile.to_json_dict()],
        "analytics": {},
    }


def load_state(document: Optional[dict[str, Any]]) -> Optional[StoreState]:
    """
    Decode a stored document into a store snapshot.

    Returns:
        The snapshot, or None when the document is missing, from an unknown
        version, or does not validate. Callers fall back to defaults.
    """
    if not document:
        return None
    if not isinstance(document, dict):
        logger.warning("Ignoring snapshot that is not a JSON object")
        return None

    version = document.get("version")
    state = document.get("state", document)
    if not isinstance(state, dict):
        logger.warning("Ignoring snapshot whose state is not a JSON object")
        return None

    try:
        if "profile" in state and "profiles" not in state:
            state = _migrate_single_profile(state["profile"])
        elif version is not None and version != SNAPSHOT_VERSION:
            logger.warning(f"Ignoring snapshot with unsupported version {version}")
            return None
        return StoreState.model_validate(state)
    except PydanticValidationError as e:
        logger.warning(f"Ignoring snapshot that failed validation: {e.error_count()} errors")
        return None


def find_profile_in_document(
    document: Optional[dict[str, Any]],
    username: str,
) -> Optional[Profile]:
    """Exact-username lookup over a stored document, without building a store."""
    state = load_state(document)
    if state is None:
        return None
    for profile in state.profiles:
        if profile.username == username:
            return profile
    return None
