"""
QR module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidQROptionsError(ValidationError):
    """Raised when a size or color cannot be rendered."""

    def __init__(self, message: str, field: str):
        super().__init__(message, code="INVALID_QR_OPTIONS", details={"field": field})
