"""
Viewer module exceptions.
"""

from shared.exceptions import NotFoundError


class PublicProfileNotFoundError(NotFoundError):
    """
    Raised when no public profile has the requested username.

    Private profiles raise this too, so visitors cannot tell them apart
    from missing ones.
    """

    def __init__(self, username: str):
        super().__init__(
            "Profile Not Found",
            code="PROFILE_NOT_FOUND",
            details={"username": username},
        )
