"""
Authentication module data models.

These models define the session and result shapes exchanged with the
Supabase Auth collaborator.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from modules.profiles.models import User


class AuthSession(BaseModel):
    """
    The signed-in session as reported by Supabase Auth.

    Only the fields the application reads are kept.
    """

    user_id: str = Field(..., description="Supabase user ID (UUID)")
    email: Optional[str] = Field(None, description="User's email")
    access_token: str = Field(..., description="JWT access token")
    refresh_token: Optional[str] = Field(None, description="Refresh token")
    expires_at: Optional[int] = Field(None, description="Expiry as a UNIX timestamp")
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class AuthResult(BaseModel):
    """
    Outcome of an auth call.

    Failures are reported through ``error``/``code`` rather than raised, so a
    UI can show the message next to the form that triggered it.
    """

    user_id: Optional[str] = Field(None, description="Affected user, when known")
    session: Optional[AuthSession] = Field(None, description="Session, if one was established")
    user: Optional[User] = Field(None, description="Application user row, when fetched")
    error: Optional[str] = Field(None, description="Error message if the call failed")
    code: Optional[str] = Field(None, description="Machine-readable error code")

    @property
    def ok(self) -> bool:
        return self.error is None
