"""
Editor commands.

Each command reads store state, invokes store mutations and renders the
outcome. Commands return a process exit code.
"""

import argparse
import getpass
import logging
from pathlib import Path
from typing import Callable, Optional

from shared.exceptions import LinkoraError
from modules.analytics.models import TimeRange
from modules.analytics.reports import daily_series, growth, top_links
from modules.analytics.tracking import empty_analytics
from modules.features.gate import effective_plan
from modules.features.models import Feature
from modules.plans.catalog import SUBSCRIPTION_PLANS
from modules.plans.models import SubscriptionTier
from modules.profiles.exceptions import FormValidationError
from modules.profiles.forms import validate_link_edit, validate_link_form, validate_profile_form
from modules.profiles.links import generate_slug
from modules.profiles.models import LinkItem, ProfileCreate
from modules.profiles.store import ProfileStore
from modules.qr.exceptions import InvalidQROptionsError
from modules.qr.service import render_qr_png
from modules.themes.catalog import available_presets, get_preset, premium_presets
from modules.themes.models import ThemeUpdate

from .display import (
    console,
    format_tier,
    print_error,
    print_result,
    render_links,
    render_plans,
    render_presets,
    render_profile,
    render_profiles,
    render_stats,
)

logger = logging.getLogger(__name__)

Command = Callable[[ProfileStore, argparse.Namespace], int]


def resolve_link(store: ProfileStore, ref: str) -> Optional[LinkItem]:
    """
    Find a link of the current profile by position (1-based) or id prefix.

    An id prefix must match exactly one link.
    """
    links = store.sorted_links()
    if ref.isdigit():
        index = int(ref) - 1
        return links[index] if 0 <= index < len(links) else None

    matches = [link for link in links if link.id.startswith(ref)]
    return matches[0] if len(matches) == 1 else None


def _link_or_error(store: ProfileStore, ref: str) -> Optional[LinkItem]:
    link = resolve_link(store, ref)
    if link is None:
        console.print(f"[red]Error:[/red] No link matches {ref!r}")
    return link


# -----------------------------------------------------------------------------
# Profile
# -----------------------------------------------------------------------------


def cmd_show(store: ProfileStore, args: argparse.Namespace) -> int:
    profile = store.current_profile
    if profile is None:
        console.print("[yellow]No profile selected.[/yellow] Use 'profiles' and 'switch'.")
        return 1
    console.print(render_profile(profile, store.generate_shareable_url(), store.user))
    return 0


def cmd_profile(store: ProfileStore, args: argparse.Namespace) -> int:
    try:
        update = validate_profile_form(
            title=args.title,
            bio=args.bio,
            avatar_url=args.avatar,
            username=args.username,
            custom_domain=args.domain,
        )
    except FormValidationError as e:
        print_error(e)
        suggestion = generate_slug(args.username or "")
        if "username" in e.field_errors and suggestion:
            console.print(f"  [dim]Try: --username {suggestion}[/dim]")
        return 1

    if args.domain and not store.can_use_feature(Feature.CUSTOM_DOMAINS):
        console.print("[yellow]Custom domains need a Pro or Business plan.[/yellow]")
        return 1

    return 0 if print_result(store.update_profile(update), "Profile updated") else 1


def cmd_profiles(store: ProfileStore, args: argparse.Namespace) -> int:
    current = store.current_profile
    console.print(render_profiles(store.profiles, current.id if current else None))
    return 0


def cmd_new_profile(store: ProfileStore, args: argparse.Namespace) -> int:
    data = ProfileCreate(title=args.title) if args.title else ProfileCreate()
    result = store.create_profile(data)
    if print_result(result, "Profile created"):
        console.print(f"[dim]{result.value.id}[/dim]")
        return 0
    return 1


def _profile_id(store: ProfileStore, ref: str) -> str:
    matches = [profile.id for profile in store.profiles if profile.id.startswith(ref)]
    return matches[0] if len(matches) == 1 else ref


def cmd_switch(store: ProfileStore, args: argparse.Namespace) -> int:
    result = store.switch_profile(_profile_id(store, args.profile_id))
    return 0 if print_result(result, "Switched profile") else 1


def cmd_delete_profile(store: ProfileStore, args: argparse.Namespace) -> int:
    result = store.delete_profile(_profile_id(store, args.profile_id))
    return 0 if print_result(result, "Profile deleted") else 1


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------


def cmd_add_link(store: ProfileStore, args: argparse.Namespace) -> int:
    try:
        data = validate_link_form(args.title, args.url, args.icon)
    except FormValidationError as e:
        print_error(e)
        return 1

    result = store.add_link(data)
    if not result.ok:
        print_result(result, "")
        return 1
    console.print(f"[green]Added {result.value.url}[/green]")
    console.print(render_links(store.sorted_links()))
    return 0


def cmd_edit_link(store: ProfileStore, args: argparse.Namespace) -> int:
    link = _link_or_error(store, args.link)
    if link is None:
        return 1
    try:
        update = validate_link_edit(args.title, args.url, args.icon)
    except FormValidationError as e:
        print_error(e)
        return 1
    return 0 if print_result(store.update_link(link.id, update), "Link updated") else 1


def cmd_delete_link(store: ProfileStore, args: argparse.Namespace) -> int:
    link = _link_or_error(store, args.link)
    if link is None:
        return 1
    return 0 if print_result(store.delete_link(link.id), f"Deleted {link.title}") else 1


def cmd_move(store: ProfileStore, args: argparse.Namespace) -> int:
    # Positions are 1-based on the command line
    result = store.reorder_links(args.from_position - 1, args.to_position - 1)
    if not print_result(result, "Links reordered"):
        return 1
    console.print(render_links(store.sorted_links()))
    return 0


def cmd_toggle(store: ProfileStore, args: argparse.Namespace) -> int:
    link = _link_or_error(store, args.link)
    if link is None:
        return 1
    result = store.toggle_link_active(link.id)
    if not result.ok:
        print_result(result, "")
        return 1
    state = "visible" if result.value.is_active else "hidden"
    console.print(f"[green]{link.title} is now {state}[/green]")
    return 0


# -----------------------------------------------------------------------------
# Theme
# -----------------------------------------------------------------------------


def cmd_themes(store: ProfileStore, args: argparse.Namespace) -> int:
    can_use_premium = store.can_use_feature(Feature.PREMIUM_THEMES)
    locked = [] if can_use_premium else premium_presets()
    console.print(render_presets(available_presets(can_use_premium), locked))
    return 0


def cmd_theme(store: ProfileStore, args: argparse.Namespace) -> int:
    preset = get_preset(args.name)
    if preset is not None and preset.is_premium and not store.can_use_feature(Feature.PREMIUM_THEMES):
        console.print(f"[yellow]{args.name} needs a Pro or Business plan.[/yellow]")
        return 1
    return 0 if print_result(store.set_theme_preset(args.name), f"Theme set to {args.name}") else 1


def cmd_color(store: ProfileStore, args: argparse.Namespace) -> int:
    fields = {
        name: value
        for name, value in (
            ("primary_color", args.primary),
            ("background_color", args.background),
            ("text_color", args.text),
            ("card_color", args.card),
            ("is_dark_mode", args.dark),
        )
        if value is not None
    }
    if not fields:
        console.print("[yellow]Nothing to change.[/yellow]")
        return 1
    return 0 if print_result(store.update_theme(ThemeUpdate(**fields)), "Theme updated") else 1


# -----------------------------------------------------------------------------
# Plans, sharing, analytics
# -----------------------------------------------------------------------------


def cmd_plans(store: ProfileStore, args: argparse.Namespace) -> int:
    current = store.user.subscription_tier if store.user else SubscriptionTier.FREE
    console.print(render_plans(SUBSCRIPTION_PLANS, current))

    plan = effective_plan(store.user)
    profile = store.current_profile
    if profile is not None and plan.max_links is not None:
        console.print(f"[dim]{len(profile.links)}/{plan.max_links} links used[/dim]")
    return 0


def cmd_share(store: ProfileStore, args: argparse.Namespace) -> int:
    url = store.generate_shareable_url()
    if not url:
        console.print("[yellow]Set PUBLIC_ORIGIN to generate share URLs.[/yellow]")
        return 1
    console.print(url)
    username_url = store.generate_username_url()
    if username_url != url:
        console.print(f"[dim]Username URL: {username_url}[/dim]")
    return 0


def cmd_qr(store: ProfileStore, args: argparse.Namespace) -> int:
    url = store.generate_username_url()
    if not url:
        console.print("[yellow]Set PUBLIC_ORIGIN to generate share URLs.[/yellow]")
        return 1
    try:
        png = render_qr_png(url, size=args.size, color=args.color, background_color=args.background)
    except InvalidQROptionsError as e:
        print_error(e)
        return 1

    output: Path = args.output
    try:
        output.write_bytes(png)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {output}: {e.strerror or e}")
        return 1
    console.print(f"[green]Saved QR code for {url} to {output}[/green]")
    return 0


def cmd_stats(store: ProfileStore, args: argparse.Namespace) -> int:
    profile = store.current_profile
    if profile is None:
        console.print("[yellow]No profile selected.[/yellow]")
        return 1
    if not store.can_use_feature(Feature.ANALYTICS):
        console.print("[yellow]Analytics need a Pro or Business plan.[/yellow]")
        return 1

    analytics = store.get_analytics(profile.id) or empty_analytics(profile.id)
    console.print(
        render_stats(
            analytics,
            top_links(profile, analytics),
            daily_series(analytics, TimeRange(args.range)),
            growth(analytics),
        )
    )
    return 0


def cmd_reset(store: ProfileStore, args: argparse.Namespace) -> int:
    if not args.yes:
        console.print("[yellow]This deletes every profile. Re-run with --yes to confirm.[/yellow]")
        return 1
    return 0 if print_result(store.reset_store(), "Store reset") else 1


# -----------------------------------------------------------------------------
# Account
# -----------------------------------------------------------------------------


def _auth_service():
    from modules.auth.service import get_auth_service
    return get_auth_service()


def cmd_login(store: ProfileStore, args: argparse.Namespace) -> int:
    password = getpass.getpass("Password: ")
    try:
        auth = _auth_service()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    result = auth.sign_in(args.email, password)
    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error}")
        return 1

    synced = auth.sync_store(store)
    if not synced.ok:
        console.print(f"[red]Error:[/red] {synced.error}")
        return 1
    tier = format_tier(store.user.subscription_tier) if store.user else "Free"
    console.print(f"[green]Signed in as {args.email} ({tier})[/green]")
    return 0


def cmd_logout(store: ProfileStore, args: argparse.Namespace) -> int:
    try:
        auth = _auth_service()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    result = auth.sign_out()
    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error}")
        return 1
    store.set_user(None)
    console.print("[green]Signed out[/green]")
    return 0


COMMANDS: dict[str, Command] = {
    "show": cmd_show,
    "profile": cmd_profile,
    "profiles": cmd_profiles,
    "new-profile": cmd_new_profile,
    "switch": cmd_switch,
    "delete-profile": cmd_delete_profile,
    "add-link": cmd_add_link,
    "edit-link": cmd_edit_link,
    "delete-link": cmd_delete_link,
    "move": cmd_move,
    "toggle": cmd_toggle,
    "themes": cmd_themes,
    "theme": cmd_theme,
    "color": cmd_color,
    "plans": cmd_plans,
    "share": cmd_share,
    "qr": cmd_qr,
    "stats": cmd_stats,
    "reset": cmd_reset,
    "login": cmd_login,
    "logout": cmd_logout,
}


def run_command(store: ProfileStore, args: argparse.Namespace) -> int:
    """Dispatch ``args.command``. Unexpected module errors are reported, not raised."""
    try:
        return COMMANDS[args.command](store, args)
    except LinkoraError as e:
        logger.debug(f"Command {args.command} failed: {e.code}")
        print_error(e)
        return 1
