"""
Profile store.

The single authoritative container for the cached user, every profile and
the analytics counters. All mutations are synchronous and total: they either
apply completely or report a failure and leave state untouched. An applied
mutation is followed by a write-through save of the snapshot and then by a
synchronous notification of every subscriber.

Profiles are stored once, keyed by id. The current profile is an id pointer,
so there is no second copy that could drift from the collection.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from shared.exceptions import ExternalServiceError
from modules.analytics.models import Analytics
from modules.analytics.tracking import empty_analytics, record_click, record_view
from modules.features.gate import can_use_feature, effective_plan
from modules.features.models import Feature
from modules.themes.catalog import default_theme, get_preset
from modules.themes.exceptions import ThemePresetNotFoundError
from modules.themes.models import ThemeUpdate

from .exceptions import (
    InvalidReorderError,
    LinkNotFoundError,
    NoActiveProfileError,
    NoUserError,
    PlanLimitError,
    ProfileNotFoundError,
)
from .interfaces import IStorageBackend
from .links import normalize_link_fields
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
    fields_set,
    new_id,
    utc_now,
)
from .persistence import dump_state, load_state
from .results import StoreResult, StoreStatus
from .sharing import generate_shareable_url, generate_username_url

logger = logging.getLogger(__name__)

Listener = Callable[[StoreState], None]

DEFAULT_STORAGE_KEY = "linkora-profile"


def renumber(links: list[LinkItem]) -> list[LinkItem]:
    """Reassign ``order`` to match list position (0..n-1)."""
    return [
        link if link.order == index else link.model_copy(update={"order": index})
        for index, link in enumerate(links)
    ]


def build_default_profile(now: datetime) -> Profile:
    return Profile(
        id=new_id(),
        theme=default_theme(),
        links=[],
        created_at=now,
        updated_at=now,
    )


class ProfileStore:
    """
    State container for user, profiles and analytics.

    Args:
        storage: Where snapshots are mirrored. None keeps state in memory only.
        storage_key: Name of the snapshot document in ``storage``.
        origin: Public origin used for share URLs. None or "" means unknown.
        enforce_plan_limits: Reject link/profile/premium-theme operations
            that exceed the user's plan.
        clock: Source of "now"; injectable for tests.
    """

    def __init__(
        self,
        storage: Optional[IStorageBackend] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        origin: Optional[str] = None,
        enforce_plan_limits: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._origin = origin
        self._enforce_plan_limits = enforce_plan_limits
        self._clock = clock
        self._listeners: list[Listener] = []

        self._user: Optional[User] = None
        self._profiles: dict[str, Profile] = {}
        self._current_id: Optional[str] = None
        self._analytics: dict[str, Analytics] = {}

        state = self._load_snapshot()
        if state is None:
            self._reset_state()
        else:
            self._apply_state(state)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def origin(self) -> Optional[str]:
        return self._origin

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def profiles(self) -> list[Profile]:
        return list(self._profiles.values())

    @property
    def current_profile(self) -> Optional[Profile]:
        if self._current_id is None:
            return None
        return self._profiles.get(self._current_id)

    @property
    def state(self) -> StoreState:
        """A detached copy of everything the store holds."""
        return self._snapshot().model_copy(deep=True)

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    def get_analytics(self, profile_id: Optional[str] = None) -> Optional[Analytics]:
        """Counters for ``profile_id``, defaulting to the current profile."""
        profile_id = profile_id or self._current_id
        if profile_id is None:
            return None
        return self._analytics.get(profile_id)

    def sorted_links(self, include_inactive: bool = True) -> list[LinkItem]:
        """Current profile's links in display order (empty with no current profile)."""
        profile = self.current_profile
        if profile is None:
            return []
        return profile.sorted_links(include_inactive=include_inactive)

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener`` with the new state after every applied mutation.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------------------------------
    # User
    # -------------------------------------------------------------------------

    def set_user(self, user: Optional[User]) -> StoreResult:
        """Replace the cached user wholesale (None signs out)."""
        self._user = user.model_copy(deep=True) if user is not None else None
        return self._commit("set_user", self._user)

    def update_user(self, update: UserUpdate) -> StoreResult:
        """Merge ``update`` into the cached user."""
        if self._user is None:
            return StoreResult.failed(StoreStatus.NO_USER, NoUserError())

        fields = fields_set(update)
        fields["updated_at"] = self._later_than(self._user.updated_at)
        self._user = self._user.model_copy(update=fields)
        return self._commit("update_user", self._user)

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    def set_current_profile(self, profile: Optional[Profile]) -> StoreResult:
        """
        Make ``profile`` the current profile.

        The collection is the only copy, so the given profile is stored under
        its id (inserted, or replacing the entry with the same id). None
        clears the pointer.
        """
        if profile is None:
            self._current_id = None
            return self._commit("set_current_profile", None)

        stored = profile.model_copy(deep=True)
        self._profiles[stored.id] = stored
        self._current_id = stored.id
        return self._commit("set_current_profile", stored)

    def create_profile(self, data: Optional[ProfileCreate] = None) -> StoreResult:
        """
        Create a profile from defaults overlaid with ``data`` and make it current.

        Supplied links are renumbered into a dense order; a missing theme or
        link list falls back to the defaults.
        """
        if self._enforce_plan_limits:
            plan = effective_plan(self._user)
            if not plan.allows_profiles(len(self._profiles) + 1):
                return StoreResult.failed(
                    StoreStatus.LIMIT_REACHED,
                    PlanLimitError("profiles", plan.max_profiles),
                )

        fields = {
            name: value
            for name, value in fields_set(data or ProfileCreate()).items()
            if value is not None
        }
        theme = fields.pop("theme", None)
        links = fields.pop("links", [])
        now = self._clock()

        profile = Profile(
            id=new_id(),
            theme=theme.model_copy(deep=True) if theme is not None else default_theme(),
            links=renumber(sorted(links, key=lambda link: link.order)),
            created_at=now,
            updated_at=now,
            **fields,
        )
        self._profiles[profile.id] = profile
        self._current_id = profile.id
        logger.debug(f"Created profile {profile.id}")
        return self._commit("create_profile", profile)

    def update_profile(self, update: ProfileUpdate) -> StoreResult:
        """Merge display fields (title, bio, avatar, username, domain) into the current profile."""
        return self._mutate_current(
            "update_profile",
            lambda profile: self._touch(profile, **fields_set(update)),
        )

    def update_theme(self, update: ThemeUpdate) -> StoreResult:
        """Merge individual theme fields into the current theme."""
        return self._mutate_current(
            "update_theme",
            lambda profile: self._touch(
                profile,
                theme=profile.theme.model_copy(update=fields_set(update)),
            ),
        )

    def set_theme_preset(self, name: str) -> StoreResult:
        """Replace the current theme with the named catalog preset."""
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())

        preset = get_preset(name)
        if preset is None:
            logger.debug(f"Ignoring unknown theme preset {name!r}")
            return StoreResult.failed(StoreStatus.NOT_FOUND, ThemePresetNotFoundError(name))

        if (
            self._enforce_plan_limits
            and preset.is_premium
            and not can_use_feature(self._user, Feature.PREMIUM_THEMES)
        ):
            return StoreResult.failed(
                StoreStatus.LIMIT_REACHED,
                PlanLimitError("premium themes"),
            )

        updated = self._touch(profile, theme=preset.theme.model_copy(deep=True))
        return self._save_profile("set_theme_preset", updated)

    def delete_profile(self, profile_id: str) -> StoreResult:
        """
        Remove a profile and its analytics.

        If it was current, the first remaining profile becomes current (or
        none when the collection is now empty).
        """
        if profile_id not in self._profiles:
            return StoreResult.failed(StoreStatus.NOT_FOUND, ProfileNotFoundError(profile_id))

        removed = self._profiles.pop(profile_id)
        self._analytics.pop(profile_id, None)
        if self._current_id == profile_id:
            self._current_id = next(iter(self._profiles), None)
        return self._commit("delete_profile", removed)

    def switch_profile(self, profile_id: str) -> StoreResult:
        """
        Make the profile with ``profile_id`` current.

        When no profile matches, the current pointer is cleared and the
        result is NOT_FOUND.
        """
        if profile_id in self._profiles:
            self._current_id = profile_id
            return self._commit("switch_profile", self._profiles[profile_id])

        self._current_id = None
        self._commit("switch_profile", None)
        return StoreResult.failed(StoreStatus.NOT_FOUND, ProfileNotFoundError(profile_id))

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    def add_link(self, data: LinkCreate) -> StoreResult:
        """
        Append a link to the current profile.

        The link gets a fresh id, ``order`` equal to the current link count and
        ``is_active=True``. Its URL is normalized and the icon derived from the
        domain when not supplied.
        """
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())

        if self._enforce_plan_limits:
            plan = effective_plan(self._user)
            if not plan.allows_links(len(profile.links) + 1):
                return StoreResult.failed(
                    StoreStatus.LIMIT_REACHED,
                    PlanLimitError("links", plan.max_links),
                )

        fields = fields_set(data)
        url, icon = normalize_link_fields(data.url, data.icon)
        fields.update(url=url, icon=icon)

        link = LinkItem(
            id=new_id(),
            order=len(profile.links),
            is_active=True,
            **fields,
        )
        updated = self._touch(profile, links=profile.sorted_links() + [link])
        self._save_profile("add_link", updated)
        return StoreResult.applied(link)

    def update_link(self, link_id: str, update: LinkUpdate) -> StoreResult:
        """
        Merge ``update`` into the link with ``link_id``.

        A new URL is normalized, and its icon re-derived unless one is given.
        """
        fields = fields_set(update)
        if "url" in fields and fields["url"] is not None:
            url, icon = normalize_link_fields(fields["url"], fields.get("icon"))
            fields.update(url=url, icon=icon)

        return self._mutate_link(
            "update_link",
            link_id,
            lambda link: link.model_copy(update=fields),
        )

    def delete_link(self, link_id: str) -> StoreResult:
        """Remove a link and renumber the rest to 0..n-1, keeping their sequence."""
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())
        if profile.find_link(link_id) is None:
            return StoreResult.failed(
                StoreStatus.NOT_FOUND,
                LinkNotFoundError(link_id, profile.id),
            )

        remaining = [link for link in profile.sorted_links() if link.id != link_id]
        updated = self._touch(profile, links=renumber(remaining))
        return self._save_profile("delete_link", updated)

    def reorder_links(self, from_index: int, to_index: int) -> StoreResult:
        """
        Move the link at display position ``from_index`` to ``to_index``.

        Both indices must lie in ``0..n-1``; anything else is rejected with
        OUT_OF_RANGE and nothing changes.
        """
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())

        links = profile.sorted_links()
        size = len(links)
        if not (0 <= from_index < size and 0 <= to_index < size):
            return StoreResult.failed(
                StoreStatus.OUT_OF_RANGE,
                InvalidReorderError(from_index, to_index, size),
            )

        moved = links.pop(from_index)
        links.insert(to_index, moved)
        updated = self._touch(profile, links=renumber(links))
        return self._save_profile("reorder_links", updated)

    def toggle_link_active(self, link_id: str) -> StoreResult:
        """Flip a link's visibility on the public page."""
        return self._mutate_link(
            "toggle_link_active",
            link_id,
            lambda link: link.model_copy(update={"is_active": not link.is_active}),
        )

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------

    def set_analytics(self, analytics: Analytics) -> StoreResult:
        """Replace the counters for ``analytics.profile_id`` wholesale."""
        stored = analytics.model_copy(deep=True)
        self._analytics[stored.profile_id] = stored
        return self._commit("set_analytics", stored)

    def track_view(self, profile_id: str) -> StoreResult:
        """Count a page view. Creates the profile's counters on first use."""
        if profile_id not in self._profiles:
            return StoreResult.failed(StoreStatus.NOT_FOUND, ProfileNotFoundError(profile_id))

        current = self._analytics.get(profile_id) or empty_analytics(profile_id)
        self._analytics[profile_id] = record_view(current, self._clock())
        return self._commit("track_view", self._analytics[profile_id])

    def track_click(self, profile_id: str, link_id: str) -> StoreResult:
        """Count a click on one of the profile's links. Creates counters on first use."""
        profile = self._profiles.get(profile_id)
        if profile is None:
            return StoreResult.failed(StoreStatus.NOT_FOUND, ProfileNotFoundError(profile_id))
        if profile.find_link(link_id) is None:
            return StoreResult.failed(
                StoreStatus.NOT_FOUND,
                LinkNotFoundError(link_id, profile_id),
            )

        current = self._analytics.get(profile_id) or empty_analytics(profile_id)
        self._analytics[profile_id] = record_click(current, link_id, self._clock())
        return self._commit("track_click", self._analytics[profile_id])

    # -------------------------------------------------------------------------
    # Utilities
    # -------------------------------------------------------------------------

    def reset_store(self) -> StoreResult:
        """Back to a signed-out store holding one fresh default profile."""
        self._reset_state()
        return self._commit("reset_store", self.current_profile)

    def generate_shareable_url(self) -> str:
        return generate_shareable_url(self._origin, self.current_profile)

    def generate_username_url(self) -> str:
        return generate_username_url(self._origin, self.current_profile)

    def can_use_feature(self, feature: Union[Feature, str]) -> bool:
        return can_use_feature(self._user, feature)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _later_than(self, previous: datetime) -> datetime:
        # Never move updated_at backwards, even with a coarse or skewed clock
        return max(self._clock(), previous)

    def _touch(self, profile: Profile, **changes) -> Profile:
        changes["updated_at"] = self._later_than(profile.updated_at)
        return profile.model_copy(update=changes)

    def _mutate_current(
        self,
        action: str,
        change: Callable[[Profile], Profile],
    ) -> StoreResult:
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())
        return self._save_profile(action, change(profile))

    def _mutate_link(
        self,
        action: str,
        link_id: str,
        change: Callable[[LinkItem], LinkItem],
    ) -> StoreResult:
        profile = self.current_profile
        if profile is None:
            return StoreResult.failed(StoreStatus.NO_PROFILE, NoActiveProfileError())

        target = profile.find_link(link_id)
        if target is None:
            return StoreResult.failed(
                StoreStatus.NOT_FOUND,
                LinkNotFoundError(link_id, profile.id),
            )

        changed = change(target)
        links = [changed if link.id == link_id else link for link in profile.sorted_links()]
        self._save_profile(action, self._touch(profile, links=links))
        return StoreResult.applied(changed)

    def _save_profile(self, action: str, profile: Profile) -> StoreResult:
        self._profiles[profile.id] = profile
        return self._commit(action, profile)

    def _commit(self, action: str, value=None) -> StoreResult:
        logger.debug(f"Store mutation applied: {action}")
        self._persist()
        self._notify()
        return StoreResult.applied(value)

    def _snapshot(self) -> StoreState:
        return StoreState(
            user=self._user,
            current_profile_id=self._current_id,
            profiles=list(self._profiles.values()),
            analytics=dict(self._analytics),
        )

    def _persist(self) -> None:
        if self._storage is None:
            return
        try:
            self._storage.save(self._storage_key, dump_state(self._snapshot()))
        except ExternalServiceError as e:
            # In-memory state stays authoritative for this session
            logger.warning(f"Failed to persist store snapshot: {e.message}")

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Store listener raised")

    def _load_snapshot(self) -> Optional[StoreState]:
        if self._storage is None:
            return None
        try:
            return load_state(self._storage.load(self._storage_key))
        except ExternalServiceError as e:
            logger.warning(f"Failed to load store snapshot, using defaults: {e.message}")
            return None

    def _apply_state(self, state: StoreState) -> None:
        self._user = state.user
        self._profiles = {}
        for profile in state.profiles:
            # Heal snapshots written by older clients with gaps in link order
            self._profiles[profile.id] = profile.model_copy(
                update={"links": renumber(profile.sorted_links())}
            )
        self._current_id = (
            state.current_profile_id if state.current_profile_id in self._profiles else None
        )
        self._analytics = dict(state.analytics)

    def _reset_state(self) -> None:
        profile = build_default_profile(self._clock())
        self._user = None
        self._profiles = {profile.id: profile}
        self._current_id = profile.id
        self._analytics = {}
