"""
Editor form validation.

Validation happens at the form boundary: invalid input produces inline field
errors and never reaches the store. Valid input is returned as the store's
input models, already normalized.
"""

import re
from typing import Optional

from .exceptions import FormValidationError
from .links import format_url, get_icon_for_url, is_valid_url
from .models import LinkCreate, LinkUpdate, ProfileUpdate

TITLE_REQUIRED = "Title is required"
URL_REQUIRED = "URL is required"
URL_INVALID = "Please enter a valid URL"
USERNAME_INVALID = "Username may only contain lowercase letters, numbers and hyphens"

USERNAME_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")


def link_form_errors(title: str, url: str) -> dict[str, str]:
    """Field -> message for every invalid field of a link form."""
    errors: dict[str, str] = {}

    if not title.strip():
        errors["title"] = TITLE_REQUIRED

    if not url.strip():
        errors["url"] = URL_REQUIRED
    elif not is_valid_url(format_url(url)):
        errors["url"] = URL_INVALID

    return errors


def validate_link_form(title: str, url: str, icon: Optional[str] = None) -> LinkCreate:
    """
    Validate a new-link form.

    Returns:
        LinkCreate with a normalized URL and an icon (derived when blank)

    Raises:
        FormValidationError: If the title or URL is missing or the URL is invalid
    """
    errors = link_form_errors(title, url)
    if errors:
        raise FormValidationError(errors)

    final_url = format_url(url)
    return LinkCreate(
        title=title.strip(),
        url=final_url,
        icon=icon or get_icon_for_url(final_url),
    )


def validate_link_edit(
    title: Optional[str] = None,
    url: Optional[str] = None,
    icon: Optional[str] = None,
) -> LinkUpdate:
    """
    Validate an edit of an existing link. Only given fields are checked and set.

    Raises:
        FormValidationError: If a given field is invalid
    """
    errors = {}
    fields = {}

    if title is not None:
        if title.strip():
            fields["title"] = title.strip()
        else:
            errors["title"] = TITLE_REQUIRED

    if url is not None:
        if not url.strip():
            errors["url"] = URL_REQUIRED
        elif not is_valid_url(format_url(url)):
            errors["url"] = URL_INVALID
        else:
            fields["url"] = format_url(url)

    if errors:
        raise FormValidationError(errors)

    if icon:
        fields["icon"] = icon
    return LinkUpdate(**fields)


def validate_profile_form(
    title: Optional[str] = None,
    bio: Optional[str] = None,
    avatar_url: Optional[str] = None,
    username: Optional[str] = None,
    custom_domain: Optional[str] = None,
) -> ProfileUpdate:
    """
    Validate the profile details form. Only given fields are checked and set.

    Raises:
        FormValidationError: If the title is blank, the username is not a
            slug, or the avatar URL is not a valid URL
    """
    errors: dict[str, str] = {}

    if title is not None and not title.strip():
        errors["title"] = TITLE_REQUIRED
    if username and not USERNAME_PATTERN.match(username):
        errors["username"] = USERNAME_INVALID
    if avatar_url and not is_valid_url(format_url(avatar_url)):
        errors["avatar_url"] = URL_INVALID

    if errors:
        raise FormValidationError(errors)

    fields: dict = {}
    if title is not None:
        fields["title"] = title.strip()
    if bio is not None:
        fields["bio"] = bio
    if avatar_url is not None:
        fields["avatar_url"] = format_url(avatar_url) if avatar_url else ""
    if username is not None:
        fields["username"] = username or None
    if custom_domain is not None:
        fields["custom_domain"] = custom_domain or None
    return ProfileUpdate(**fields)
