"""
QR module.

Renders a profile's share URL as a downloadable PNG QR code.

Public API:
- render_qr_png: url + size/colors -> PNG bytes
- resolve_color: preset name -> hex
- QR_SIZES / QR_COLOR_PRESETS: choices offered to the user
"""

from .models import QR_COLOR_PRESETS, QR_SIZES
from .exceptions import InvalidQROptionsError
from .service import render_qr_png, resolve_color

__all__ = [
    "QR_COLOR_PRESETS",
    "QR_SIZES",
    "InvalidQROptionsError",
    "render_qr_png",
    "resolve_color",
]
