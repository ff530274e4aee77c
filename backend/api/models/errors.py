"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional

from shared.exceptions import LinkoraError


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    detail: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_error(cls, error: LinkoraError) -> "ErrorResponse":
        return cls(error=error.code, detail=error.message, code=error.code)
