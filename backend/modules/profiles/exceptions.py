"""
Profile module exceptions.

The store does not raise these for lookup misses; it returns them inside a
``StoreResult`` so that callers can decide whether to surface them.
"""

from typing import Optional

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class ProfileError(NotFoundError):
    """Base exception for profile lookups."""

    pass


class ProfileNotFoundError(ProfileError):
    """Raised when a profile id is not in the store."""

    def __init__(self, profile_id: str):
        super().__init__(
            f"Profile not found: {profile_id}",
            code="PROFILE_NOT_FOUND",
            details={"profile_id": profile_id},
        )


class NoActiveProfileError(ProfileError):
    """Raised when an operation needs a current profile and there is none."""

    def __init__(self):
        super().__init__("No profile is selected", code="NO_ACTIVE_PROFILE")


class NoUserError(ProfileError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self):
        super().__init__("No user is signed in", code="NO_USER")


class LinkNotFoundError(ProfileError):
    """Raised when a link id is not on the profile."""

    def __init__(self, link_id: str, profile_id: Optional[str] = None):
        super().__init__(
            f"Link not found: {link_id}",
            code="LINK_NOT_FOUND",
            details={"link_id": link_id},
        )
        if profile_id:
            self.details["profile_id"] = profile_id


class InvalidReorderError(ValidationError):
    """Raised when reorder indices fall outside the link list."""

    def __init__(self, from_index: int, to_index: int, size: int):
        super().__init__(
            f"Cannot move link from {from_index} to {to_index}: "
            f"indices must be between 0 and {size - 1}",
            code="INVALID_REORDER",
            details={"from_index": from_index, "to_index": to_index, "size": size},
        )


class PlanLimitError(AuthorizationError):
    """Raised when an operation would exceed the user's plan."""

    def __init__(self, resource: str, limit: Optional[int] = None):
        if limit is None:
            message = f"Your plan does not include {resource}"
        else:
            message = f"Your plan allows at most {limit} {resource}"
        super().__init__(
            message,
            code="PLAN_LIMIT_REACHED",
            details={"resource": resource, "limit": limit},
        )


class FormValidationError(ValidationError):
    """
    Raised by form validation with one message per invalid field.

    The editor shows these inline next to the offending inputs.
    """

    def __init__(self, field_errors: dict[str, str]):
        super().__init__(
            "Please fix the highlighted fields",
            code="FORM_INVALID",
            details={"fields": dict(field_errors)},
        )
        self.field_errors = dict(field_errors)
