"""Tests for modules/profiles/sharing.py."""

from modules.profiles.models import Profile
from modules.profiles.sharing import generate_shareable_url, generate_username_url
from modules.themes.catalog import default_theme


def make_profile(username=None) -> Profile:
    return Profile(id="abc-123", username=username, theme=default_theme())


class TestShareableUrl:
    def test_username_url_when_username_set(self):
        """Profiles with a username share their /u/ URL."""
        assert generate_shareable_url("https://linkora.app", make_profile("jane")) == (
            "https://linkora.app/u/jane"
        )

    def test_id_url_without_username(self):
        """Profiles without a username share their /profile/ URL."""
        assert generate_shareable_url("https://linkora.app", make_profile()) == (
            "https://linkora.app/profile/abc-123"
        )

    def test_trailing_slash_is_stripped(self):
        """A trailing slash on the origin does not double up."""
        assert generate_shareable_url("https://linkora.app/", make_profile("jane")) == (
            "https://linkora.app/u/jane"
        )

    def test_empty_without_origin_or_profile(self):
        """No origin or no profile yields an empty string."""
        assert generate_shareable_url(None, make_profile("jane")) == ""
        assert generate_shareable_url("", make_profile("jane")) == ""
        assert generate_shareable_url("https://linkora.app", None) == ""


class TestUsernameUrl:
    def test_uses_username(self):
        """The username URL uses the profile's handle."""
        assert generate_username_url("https://linkora.app", make_profile("jane")) == (
            "https://linkora.app/u/jane"
        )

    def test_placeholder_without_username(self):
        """Without a handle the literal placeholder is used."""
        assert generate_username_url("https://linkora.app", make_profile()) == (
            "https://linkora.app/u/username"
        )
        assert generate_username_url("https://linkora.app", None) == (
            "https://linkora.app/u/username"
        )

    def test_empty_without_origin(self):
        """No origin yields an empty string."""
        assert generate_username_url(None, make_profile("jane")) == ""
