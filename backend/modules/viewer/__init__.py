"""
Viewer module.

Read-only public rendering of profiles at ``/u/{username}``.

Public API:
- ProfileViewer: username lookup over an IProfileSource
- SnapshotProfileSource: source backed by the editor's snapshot
- PublicProfile / PublicLink: the visitor-facing models
"""

from .models import PublicLink, PublicProfile
from .exceptions import PublicProfileNotFoundError
from .sources import SnapshotProfileSource
from .service import ProfileViewer, to_public_profile

__all__ = [
    "PublicLink",
    "PublicProfile",
    "PublicProfileNotFoundError",
    "SnapshotProfileSource",
    "ProfileViewer",
    "to_public_profile",
]
