"""
Link URL helpers.

Normalization, validation, icon detection and display formatting for link
URLs entered in the editor.
"""

import re
from typing import Optional
from urllib.parse import urlparse


# Domain (or keyword) -> icon tag shown next to the link
ICON_MAP: dict[str, str] = {
    "github.com": "github",
    "twitter.com": "twitter",
    "x.com": "twitter",
    "instagram.com": "instagram",
    "linkedin.com": "linkedin",
    "youtube.com": "youtube",
    "tiktok.com": "music",
    "facebook.com": "facebook",
    "discord.com": "message-circle",
    "twitch.tv": "twitch",
    "spotify.com": "music",
    "apple.com": "music",
    "soundcloud.com": "music",
    "pinterest.com": "image",
    "behance.net": "palette",
    "dribbble.com": "palette",
    "medium.com": "book-open",
    "dev.to": "code",
    "stackoverflow.com": "help-circle",
    "reddit.com": "message-square",
    "telegram.org": "send",
    "whatsapp.com": "message-circle",
    "snapchat.com": "camera",
    "vimeo.com": "play",
    "etsy.com": "shopping-bag",
    "amazon.com": "shopping-cart",
    "paypal.com": "credit-card",
    "ko-fi.com": "coffee",
    "patreon.com": "heart",
    "onlyfans.com": "user",
    "substack.com": "mail",
}

# Hostname substrings that also select the mail icon
MAIL_KEYWORDS = ("newsletter", "email")

DEFAULT_ICON = "link"
MAIL_ICON = "mail"

_WEB_SCHEMES = ("http://", "https://")


def format_url(url: str) -> str:
    """
    Normalize a user-entered URL.

    Addresses containing ``@`` become ``mailto:`` links; anything without a
    protocol gets ``https://``.
    """
    url = url.strip()
    if not url:
        return ""

    if "@" in url and not url.startswith("mailto:") and not url.startswith(_WEB_SCHEMES):
        return f"mailto:{url}"

    if not url.startswith(_WEB_SCHEMES) and not url.startswith("mailto:"):
        return f"https://{url}"

    return url


def is_valid_url(url: str) -> bool:
    """Whether ``url`` parses as an absolute web or mailto URL."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme in ("http", "https"):
        return bool(parsed.hostname) and " " not in parsed.netloc
    if parsed.scheme == "mailto":
        return "@" in parsed.path
    return False


def _hostname(url: str) -> str:
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""


def _matches_domain(hostname: str, domain: str) -> bool:
    return hostname == domain or hostname.endswith("." + domain)


def get_icon_for_url(url: str) -> str:
    """Pick an icon tag for ``url`` from its domain, falling back to ``link``."""
    if url.startswith("mailto:"):
        return MAIL_ICON

    hostname = _hostname(url)
    if hostname:
        for domain, icon in ICON_MAP.items():
            if _matches_domain(hostname, domain):
                return icon
        if any(keyword in hostname for keyword in MAIL_KEYWORDS):
            return MAIL_ICON

    if "@" in url:
        return MAIL_ICON

    return DEFAULT_ICON


def get_domain_from_url(url: str) -> str:
    """Short display form of a URL: the bare domain, or the address for mailto links."""
    if url.startswith("mailto:"):
        return url[len("mailto:"):]

    hostname = _hostname(url)
    if not hostname:
        return url
    return hostname[4:] if hostname.startswith("www.") else hostname


def generate_slug(text: str) -> str:
    """Lowercase, hyphen-separated slug suitable for a username."""
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def normalize_link_fields(url: str, icon: Optional[str]) -> tuple[str, str]:
    """Normalized URL and the icon to store with it (derived when not given)."""
    final_url = format_url(url)
    return final_url, icon or get_icon_for_url(final_url)
