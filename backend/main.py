"""
Linkora - link-in-bio profile editor for the terminal.

Edits the locally stored profiles (title, bio, theme, ordered links),
shows plans and analytics, and produces share URLs and QR codes. The
snapshot written here is what the public viewer (run_api.py) serves.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from shared.config import Settings, get_settings
from modules.analytics.models import TimeRange
from modules.profiles.persistence import create_storage
from modules.profiles.store import ProfileStore
from modules.qr.models import QR_SIZES
from cli.commands import run_command


def build_store(settings: Settings) -> ProfileStore:
    """Create the editor's store over the configured snapshot storage."""
    return ProfileStore(
        storage=create_storage(settings),
        storage_key=settings.storage_key,
        origin=settings.public_origin or None,
        enforce_plan_limits=settings.enforce_plan_limits,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit your Linkora link-in-bio profile")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Show the current profile")

    profile = sub.add_parser("profile", help="Edit profile details")
    profile.add_argument("--title", help="Display name")
    profile.add_argument("--bio", help="Short bio")
    profile.add_argument("--avatar", help="Avatar image URL (empty to clear)")
    profile.add_argument("--username", help="Public handle (empty to clear)")
    profile.add_argument("--domain", help="Custom domain (empty to clear)")

    sub.add_parser("profiles", help="List profiles")
    new_profile = sub.add_parser("new-profile", help="Create a profile and switch to it")
    new_profile.add_argument("--title", help="Display name")
    switch = sub.add_parser("switch", help="Switch the current profile")
    switch.add_argument("profile_id", help="Profile id or unique prefix")
    delete_profile = sub.add_parser("delete-profile", help="Delete a profile")
    delete_profile.add_argument("profile_id", help="Profile id or unique prefix")

    add_link = sub.add_parser("add-link", help="Append a link")
    add_link.add_argument("title", help="Link text")
    add_link.add_argument("url", help="Destination (https:// is added when missing)")
    add_link.add_argument("--icon", help="Icon tag (derived from the domain by default)")

    edit_link = sub.add_parser("edit-link", help="Edit a link")
    edit_link.add_argument("link", help="Position (1-based) or id prefix")
    edit_link.add_argument("--title", help="New link text")
    edit_link.add_argument("--url", help="New destination")
    edit_link.add_argument("--icon", help="New icon tag")

    delete_link = sub.add_parser("delete-link", help="Delete a link")
    delete_link.add_argument("link", help="Position (1-based) or id prefix")

    move = sub.add_parser("move", help="Move a link to another position")
    move.add_argument("from_position", type=int, help="Current position (1-based)")
    move.add_argument("to_position", type=int, help="New position (1-based)")

    toggle = sub.add_parser("toggle", help="Show or hide a link on the public page")
    toggle.add_argument("link", help="Position (1-based) or id prefix")

    sub.add_parser("themes", help="List theme presets")
    theme = sub.add_parser("theme", help="Apply a theme preset")
    theme.add_argument("name", help="Preset name, e.g. Ocean")

    color = sub.add_parser("color", help="Customize theme colors")
    color.add_argument("--primary", help="Accent color")
    color.add_argument("--background", help="Background color")
    color.add_argument("--text", help="Text color")
    color.add_argument("--card", help="Link card color")
    mode = color.add_mutually_exclusive_group()
    mode.add_argument("--dark", dest="dark", action="store_true", default=None)
    mode.add_argument("--light", dest="dark", action="store_false")

    sub.add_parser("plans", help="Show subscription plans")
    sub.add_parser("share", help="Print the share URL")

    qr = sub.add_parser("qr", help="Save a QR code of the profile URL")
    qr.add_argument("--size", type=int, choices=QR_SIZES, default=256)
    qr.add_argument("--color", default="#000000", help="Foreground color (hex, CSS name or Black, Blue, Green, Purple, Red)")
    qr.add_argument("--background", default="#ffffff", help="Background color")
    qr.add_argument("-o", "--output", type=Path, default=Path("linkora-qr.png"))

    stats = sub.add_parser("stats", help="Show analytics")
    stats.add_argument(
        "--range",
        choices=[r.value for r in TimeRange],
        default=TimeRange.LAST_7_DAYS.value,
        help="Trailing window for the daily table",
    )

    reset = sub.add_parser("reset", help="Delete everything and start over")
    reset.add_argument("--yes", action="store_true", help="Confirm")

    login = sub.add_parser("login", help="Sign in and load your account")
    login.add_argument("email")
    sub.add_parser("logout", help="Sign out")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = build_store(settings)
    return run_command(store, args)


if __name__ == "__main__":
    sys.exit(main())
