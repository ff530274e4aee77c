"""
QR code rendering.

Turns a share URL into a PNG image with the qrcode library (Pillow backend).
"""

import io
import logging

import qrcode
from PIL import Image, ImageColor

from .exceptions import InvalidQROptionsError
from .models import QR_COLOR_PRESETS, QR_SIZES

logger = logging.getLogger(__name__)


def resolve_color(value: str) -> str:
    """Hex value of a color preset name (case-insensitive); other values pass through."""
    for name, hex_value in QR_COLOR_PRESETS:
        if value.strip().lower() == name.lower():
            return hex_value
    return value


def _check_color(value: str, field: str) -> str:
    color = resolve_color(value)
    try:
        ImageColor.getrgb(color)
    except ValueError:
        raise InvalidQROptionsError(f"Unrecognized color: {value}", field=field)
    return color


def render_qr_png(
    url: str,
    size: int = 256,
    color: str = "#000000",
    background_color: str = "#ffffff",
) -> bytes:
    """
    Render ``url`` as a square PNG QR code.

    Args:
        url: Text to encode (normally the profile's share URL)
        size: Edge length in pixels, one of 128, 256 or 512
        color: Foreground color (hex, preset name or CSS color name)
        background_color: Background color

    Returns:
        PNG-encoded image bytes

    Raises:
        InvalidQROptionsError: If the size is not offered or a color is unknown
    """
    if size not in QR_SIZES:
        raise InvalidQROptionsError(
            f"size must be one of {', '.join(map(str, QR_SIZES))}",
            field="size",
        )
    color = _check_color(color, "color")
    background_color = _check_color(background_color, "background_color")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(url)
    qr.make(fit=True)

    img = qr.make_image(fill_color=color, back_color=background_color).get_image()
    img = img.convert("RGB").resize((size, size), Image.Resampling.NEAREST)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    logger.debug(f"Rendered {size}px QR code for {url}")
    return buffer.getvalue()
