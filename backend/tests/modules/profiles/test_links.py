"""Tests for modules/profiles/links.py."""

import pytest

from modules.profiles.links import (
    format_url,
    generate_slug,
    get_domain_from_url,
    get_icon_for_url,
    is_valid_url,
    normalize_link_fields,
)


class TestFormatUrl:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("example.com", "https://example.com"),
            ("  example.com/path  ", "https://example.com/path"),
            ("http://example.com", "http://example.com"),
            ("https://example.com", "https://example.com"),
            ("me@example.com", "mailto:me@example.com"),
            ("mailto:me@example.com", "mailto:me@example.com"),
            ("", ""),
        ],
    )
    def test_normalizes(self, raw, expected):
        """Protocol-less URLs get https://, addresses get mailto:."""
        assert format_url(raw) == expected

    def test_keeps_at_sign_in_web_url(self):
        """An @ inside an http(s) URL does not make it a mail link."""
        assert format_url("https://medium.com/@someone") == "https://medium.com/@someone"


class TestIsValidUrl:
    def test_accepts_web_and_mail(self):
        """Absolute http(s) and mailto URLs are valid."""
        assert is_valid_url("https://example.com")
        assert is_valid_url("http://localhost:3000/x")
        assert is_valid_url("mailto:me@example.com")

    def test_rejects_invalid(self):
        """Missing hosts, spaces and other schemes are invalid."""
        assert not is_valid_url("https://")
        assert not is_valid_url("https://exa mple.com")
        assert not is_valid_url("ftp://example.com")
        assert not is_valid_url("mailto:nobody")
        assert not is_valid_url("example.com")


class TestGetIconForUrl:
    @pytest.mark.parametrize(
        "url,icon",
        [
            ("https://github.com/linkora", "github"),
            ("https://www.youtube.com/@linkora", "youtube"),
            ("https://x.com/linkora", "twitter"),
            ("https://open.spotify.com/artist/1", "music"),
            ("mailto:me@example.com", "mail"),
            ("https://newsletter.example.com", "mail"),
            ("https://example.com", "link"),
        ],
    )
    def test_icon_from_domain(self, url, icon):
        """The icon follows the domain, including subdomains."""
        assert get_icon_for_url(url) == icon

    def test_lookalike_domain_does_not_match(self):
        """A domain that merely ends with a known name is not matched."""
        assert get_icon_for_url("https://notgithub.com") == "link"


class TestDisplayHelpers:
    def test_domain_strips_www(self):
        """Display domains drop the www. prefix."""
        assert get_domain_from_url("https://www.example.com/a/b") == "example.com"

    def test_domain_for_mailto(self):
        """Mail links display their address."""
        assert get_domain_from_url("mailto:me@example.com") == "me@example.com"

    def test_generate_slug(self):
        """Slugs are lowercase and hyphen-separated."""
        assert generate_slug("  Jane Doe's Links!  ") == "jane-does-links"
        assert generate_slug("a_b--c") == "a-b-c"


class TestNormalizeLinkFields:
    def test_derives_icon(self):
        """Without an icon one is derived from the normalized URL."""
        assert normalize_link_fields("github.com/me", None) == ("https://github.com/me", "github")

    def test_keeps_given_icon(self):
        """An explicit icon wins over the derived one."""
        assert normalize_link_fields("github.com/me", "star") == ("https://github.com/me", "star")
