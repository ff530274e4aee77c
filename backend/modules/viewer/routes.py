"""
Public profile endpoints.

Serves ``/u/{username}`` and the QR code of a profile's public URL. Lookup
misses and bad QR options raise module errors, which the API's exception
handlers turn into 404 and 422 responses.
"""

from fastapi import APIRouter, Depends, Query, Request, Response

from api.dependencies import get_profile_viewer
from api.models import ErrorResponse
from shared.config import get_settings
from modules.profiles.sharing import generate_username_url
from modules.qr.models import QR_SIZES
from modules.qr.service import render_qr_png

from .models import PublicProfile
from .service import ProfileViewer

router = APIRouter()


def _public_origin(request: Request) -> str:
    return get_settings().public_origin or str(request.base_url)


@router.get(
    "/{username}",
    response_model=PublicProfile,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse}},
)
async def get_public_profile(
    username: str,
    viewer: ProfileViewer = Depends(get_profile_viewer),
) -> PublicProfile:
    """
    Get a published profile by exact username.

    Only active links are returned, in display order. Private and missing
    profiles both return 404.
    """
    return viewer.get_public_profile(username)


@router.get(
    "/{username}/qr",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def get_profile_qr(
    username: str,
    request: Request,
    size: int = Query(default=256, description=f"Edge length, one of {QR_SIZES}"),
    color: str = Query(default="#000000", description="Foreground color"),
    background: str = Query(default="#ffffff", description="Background color"),
    download: bool = Query(default=False, description="Send as an attachment"),
    viewer: ProfileViewer = Depends(get_profile_viewer),
) -> Response:
    """
    Render the QR code of a profile's public URL as a PNG.
    """
    profile = viewer.get_public_profile(username)
    url = generate_username_url(_public_origin(request), profile)
    png = render_qr_png(url, size=size, color=color, background_color=background)

    headers = {}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="{username}-qr.png"'
    return Response(content=png, media_type="image/png", headers=headers)
