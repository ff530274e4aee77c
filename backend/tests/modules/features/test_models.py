"""Tests for modules/features/models.py."""

from modules.features.models import Feature


class TestFeature:
    def test_keys_match_client_identifiers(self):
        """Feature values are the camelCase keys used by clients."""
        assert {f.value for f in Feature} == {
            "premiumThemes",
            "analytics",
            "qrCodes",
            "customDomains",
            "unlimitedLinks",
            "multipleProfiles",
        }
