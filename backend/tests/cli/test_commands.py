"""Tests for cli/commands.py."""

import io
import os
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from cli.commands import resolve_link, run_command
from cli.display import console
from main import build_parser, main
from modules.analytics.models import Analytics
from modules.auth.models import AuthResult
from modules.profiles.models import LinkCreate, ProfileUpdate
from modules.profiles.store import ProfileStore
from modules.themes.catalog import get_preset
from tests.conftest import make_user


def run(store: ProfileStore, *argv: str) -> tuple[int, str]:
    """Run one editor command and capture what it printed."""
    args = build_parser().parse_args(list(argv))
    with console.capture() as capture:
        code = run_command(store, args)
    return code, capture.get()


@pytest.fixture
def linked_store(store):
    for title in ("A", "B", "C"):
        store.add_link(LinkCreate(title=title, url=f"{title.lower()}.example.com"))
    return store


def titles(store: ProfileStore) -> list[str]:
    return [link.title for link in store.sorted_links()]


class TestResolveLink:
    def test_by_position(self, linked_store):
        """Positions are 1-based."""
        assert resolve_link(linked_store, "1").title == "A"
        assert resolve_link(linked_store, "3").title == "C"
        assert resolve_link(linked_store, "4") is None
        assert resolve_link(linked_store, "0") is None

    def test_by_id_prefix(self, linked_store):
        """A unique id prefix selects the link."""
        link = linked_store.sorted_links()[1]
        assert resolve_link(linked_store, link.id[:8]).id == link.id

    def test_ambiguous_prefix(self, linked_store):
        """The empty prefix matches every link, so nothing is selected."""
        assert resolve_link(linked_store, "") is None


class TestLinkCommands:
    def test_add_link(self, store):
        """add-link normalizes the URL and appends the link."""
        code, output = run(store, "add-link", "Site", "example.com")
        assert code == 0
        assert "https://example.com" in output
        link = store.sorted_links()[0]
        assert link.url == "https://example.com"
        assert link.icon == "link"

    def test_add_link_invalid(self, store):
        """Form errors are shown inline and nothing is added."""
        code, output = run(store, "add-link", " ", "example.com")
        assert code == 1
        assert "Title is required" in output
        assert store.sorted_links() == []

    def test_edit_link(self, linked_store):
        """edit-link updates the selected link."""
        code, _ = run(linked_store, "edit-link", "2", "--title", "Bee", "--url", "github.com/b")
        assert code == 0
        link = linked_store.sorted_links()[1]
        assert link.title == "Bee"
        assert link.url == "https://github.com/b"
        assert link.icon == "github"

    def test_edit_unknown_link(self, linked_store):
        """Unknown references fail."""
        code, output = run(linked_store, "edit-link", "9", "--title", "x")
        assert code == 1
        assert "No link matches" in output

    def test_delete_link(self, linked_store):
        """delete-link removes the link and renumbers."""
        assert run(linked_store, "delete-link", "2")[0] == 0
        assert titles(linked_store) == ["A", "C"]
        assert [link.order for link in linked_store.sorted_links()] == [0, 1]

    def test_move(self, linked_store):
        """move uses 1-based positions."""
        assert run(linked_store, "move", "1", "3")[0] == 0
        assert titles(linked_store) == ["B", "C", "A"]

    def test_move_out_of_range(self, linked_store):
        """Positions past the end are rejected."""
        assert run(linked_store, "move", "1", "9")[0] == 1
        assert titles(linked_store) == ["A", "B", "C"]

    def test_toggle(self, linked_store):
        """toggle hides and shows a link."""
        code, output = run(linked_store, "toggle", "1")
        assert code == 0
        assert "hidden" in output
        assert linked_store.sorted_links()[0].is_active is False


class TestProfileCommands:
    def test_show(self, linked_store):
        """show prints the profile and its share URL."""
        code, output = run(linked_store, "show")
        assert code == 0
        assert "Your Name" in output
        assert "https://linkora.app/profile/" in output

    def test_profile_update(self, store):
        """profile edits the display fields."""
        code, _ = run(store, "profile", "--title", "Jane", "--username", "jane")
        assert code == 0
        assert store.current_profile.title == "Jane"
        assert store.current_profile.username == "jane"

    def test_profile_invalid_username_suggests_slug(self, store):
        """Invalid usernames are rejected with a slug suggestion."""
        code, output = run(store, "profile", "--username", "Jane Doe")
        assert code == 1
        assert "jane-doe" in output
        assert store.current_profile.username is None

    def test_custom_domain_needs_plan(self, store, free_user, pro_user):
        """Custom domains are gated by plan."""
        store.set_user(free_user)
        assert run(store, "profile", "--domain", "jane.dev")[0] == 1
        assert store.current_profile.custom_domain is None

        store.set_user(pro_user)
        assert run(store, "profile", "--domain", "jane.dev")[0] == 0
        assert store.current_profile.custom_domain == "jane.dev"

    def test_new_profile_and_switch(self, store):
        """new-profile creates and selects; switch goes back by id prefix."""
        first = store.current_profile
        assert run(store, "new-profile", "--title", "Work")[0] == 0
        assert store.current_profile.title == "Work"

        assert run(store, "switch", first.id[:8])[0] == 0
        assert store.current_profile.id == first.id

    def test_switch_unknown(self, store):
        """Switching to an unknown profile fails and clears the selection."""
        code, output = run(store, "switch", "missing")
        assert code == 1
        assert "missing" in output
        assert store.current_profile is None
        assert run(store, "show")[0] == 1

    def test_delete_profile(self, store):
        """delete-profile falls back to the remaining profile."""
        first = store.current_profile
        second = store.create_profile().value
        assert run(store, "delete-profile", second.id)[0] == 0
        assert store.current_profile.id == first.id

    def test_profiles(self, store):
        """profiles lists every profile."""
        store.create_profile()
        code, output = run(store, "profiles")
        assert code == 0
        assert output.count("Your Name") == 2


class TestThemeCommands:
    def test_theme(self, store):
        """theme applies a preset."""
        assert run(store, "theme", "Forest")[0] == 0
        assert store.current_profile.theme == get_preset("Forest").theme

    def test_premium_theme_needs_plan(self, store, free_user):
        """Free users cannot apply premium presets."""
        store.set_user(free_user)
        before = store.current_profile.theme
        code, output = run(store, "theme", "Neon")
        assert code == 1
        assert "Pro or Business" in output
        assert store.current_profile.theme == before

    def test_premium_theme_signed_out(self, store):
        """Signed-out users are on the Free plan."""
        assert run(store, "theme", "Neon")[0] == 1
        assert store.current_profile.theme != get_preset("Neon").theme

    def test_premium_theme_with_plan(self, store, pro_user):
        """Pro users can apply premium presets."""
        store.set_user(pro_user)
        assert run(store, "theme", "Neon")[0] == 0
        assert store.current_profile.theme == get_preset("Neon").theme

    def test_unknown_theme(self, store):
        """Unknown presets fail and change nothing."""
        before = store.current_profile.theme
        assert run(store, "theme", "Nope")[0] == 1
        assert store.current_profile.theme == before

    def test_color(self, store):
        """color merges individual fields."""
        assert run(store, "color", "--primary", "#123456", "--dark")[0] == 0
        assert store.current_profile.theme.primary_color == "#123456"
        assert store.current_profile.theme.is_dark_mode is True

    def test_color_nothing(self, store):
        """color without options is an error."""
        assert run(store, "color")[0] == 1

    def test_themes_lists_locked_premium(self, store):
        """Free users see premium presets as locked."""
        code, output = run(store, "themes")
        assert code == 0
        assert "Ocean" in output
        assert "Neon" in output


class TestShareCommands:
    def test_share(self, store):
        """share prints the username URL once a username is set."""
        store.update_profile(ProfileUpdate(username="jane"))
        code, output = run(store, "share")
        assert code == 0
        assert "https://linkora.app/u/jane" in output

    def test_share_without_origin(self, clock):
        """Without an origin there is nothing to share."""
        code, output = run(ProfileStore(clock=clock), "share")
        assert code == 1
        assert "PUBLIC_ORIGIN" in output

    def test_qr(self, store, tmp_path):
        """qr writes a PNG of the requested size."""
        output = tmp_path / "qr.png"
        code, _ = run(store, "qr", "--size", "128", "-o", str(output))
        assert code == 0
        assert Image.open(io.BytesIO(output.read_bytes())).size == (128, 128)

    def test_qr_invalid_color(self, store, tmp_path):
        """Bad colors are reported and no file is written."""
        output = tmp_path / "qr.png"
        assert run(store, "qr", "--color", "nope", "-o", str(output))[0] == 1
        assert not output.exists()


    def test_qr_preset_color(self, store, tmp_path):
        """Preset color names are accepted."""
        output = tmp_path / "qr.png"
        assert run(store, "qr", "--color", "Blue", "-o", str(output))[0] == 0
        image = Image.open(io.BytesIO(output.read_bytes())).convert("RGB")
        assert (59, 130, 246) in {color for _, color in image.getcolors(maxcolors=256)}

    def test_qr_unwritable_output(self, store, tmp_path):
        """Write failures are reported instead of raised."""
        output = tmp_path / "missing" / "qr.png"
        code, output_text = run(store, "qr", "-o", str(output))
        assert code == 1
        assert "Could not write" in output_text
        assert not output.exists()


class TestStatsAndPlans:
    def test_stats_needs_plan(self, store, free_user):
        """Analytics are gated by plan."""
        store.set_user(free_user)
        code, output = run(store, "stats")
        assert code == 1
        assert "Pro or Business" in output

    def test_stats(self, linked_store, pro_user):
        """stats shows totals and top links."""
        linked_store.set_user(pro_user)
        profile = linked_store.current_profile
        link = linked_store.sorted_links()[0]
        linked_store.track_view(profile.id)
        linked_store.track_click(profile.id, link.id)

        code, output = run(linked_store, "stats", "--range", "30d")

        assert code == 0
        assert "Total views" in output
        assert "a.example.com" in output

    def test_stats_without_counters(self, store, pro_user):
        """A profile never viewed shows zeros."""
        store.set_user(pro_user)
        assert run(store, "stats")[0] == 0

    def test_plans(self, store):
        """plans lists every plan and the link usage."""
        code, output = run(store, "plans")
        assert code == 0
        assert "Business" in output
        assert "0/10 links used" in output


class TestUtilityCommands:
    def test_reset_needs_confirmation(self, linked_store):
        """reset without --yes changes nothing."""
        assert run(linked_store, "reset")[0] == 1
        assert len(linked_store.sorted_links()) == 3

    def test_reset(self, linked_store):
        """reset --yes starts over."""
        assert run(linked_store, "reset", "--yes")[0] == 0
        assert linked_store.sorted_links() == []


class TestAccountCommands:
    @pytest.fixture
    def auth(self):
        service = MagicMock()
        with patch("cli.commands._auth_service", return_value=service), \
             patch("cli.commands.getpass.getpass", return_value="secret"):
            yield service

    def test_login(self, store, auth):
        """login signs in and loads the user into the store."""
        auth.sign_in.return_value = AuthResult(user_id="test-user-123")

        def sync(target):
            target.set_user(make_user())
            return AuthResult(user_id="test-user-123")

        auth.sync_store.side_effect = sync

        code, output = run(store, "login", "test@example.com")

        assert code == 0
        auth.sign_in.assert_called_once_with("test@example.com", "secret")
        assert store.user.email == "test@example.com"
        assert "Signed in" in output

    def test_login_failure(self, store, auth):
        """Sign-in errors are shown and the store is untouched."""
        auth.sign_in.return_value = AuthResult(error="Invalid login credentials")

        code, output = run(store, "login", "test@example.com")

        assert code == 1
        assert "Invalid login credentials" in output
        auth.sync_store.assert_not_called()

    def test_logout(self, store, auth):
        """logout clears the cached user."""
        store.set_user(make_user())
        auth.sign_out.return_value = AuthResult()
        assert run(store, "logout")[0] == 0
        assert store.user is None

    def test_login_without_configuration(self, store):
        """Missing Supabase settings are reported, not raised."""
        with patch.dict(os.environ, {"SUPABASE_URL": "", "SUPABASE_ANON_KEY": ""}), \
             patch("cli.commands.getpass.getpass", return_value="secret"):
            code, output = run(store, "login", "test@example.com")
        assert code == 1
        assert "Supabase configuration missing" in output


class TestMain:
    def test_main_runs_command(self):
        """main builds a store from settings and dispatches."""
        with patch.dict(os.environ, {"STORAGE_BACKEND": "memory"}):
            assert main(["show"]) == 0

    def test_main_uses_file_storage(self, tmp_path):
        """Edits persist between runs with file storage."""
        env = {"STORAGE_BACKEND": "file", "STORAGE_DIR": str(tmp_path)}
        with patch.dict(os.environ, env):
            assert main(["add-link", "Site", "example.com"]) == 0
            assert main(["delete-link", "1"]) == 0
            assert main(["delete-link", "1"]) == 1
        assert (tmp_path / "linkora-profile.json").exists()
