"""
Feature gate data models.
"""

from enum import Enum


class Feature(str, Enum):
    """Premium capabilities that can be gated by plan."""

    PREMIUM_THEMES = "premiumThemes"
    ANALYTICS = "analytics"
    QR_CODES = "qrCodes"
    CUSTOM_DOMAINS = "customDomains"
    UNLIMITED_LINKS = "unlimitedLinks"
    MULTIPLE_PROFILES = "multipleProfiles"
