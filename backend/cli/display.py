"""Rich terminal rendering for the profile editor."""

from typing import Optional

from rich.console import Console, Group
from rich.errors import StyleSyntaxError
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from shared.exceptions import LinkoraError
from modules.analytics.models import Analytics, DailyPoint, Growth, TopLink
from modules.plans.models import SubscriptionPlan, SubscriptionTier
from modules.profiles.exceptions import FormValidationError
from modules.profiles.links import get_domain_from_url
from modules.profiles.models import LinkItem, Profile, User
from modules.profiles.results import StoreResult
from modules.themes.models import Theme, ThemePreset

console = Console()


def format_tier(tier: SubscriptionTier) -> str:
    """Format a tier for display.

    Example: SubscriptionTier.PRO -> "Pro"
    """
    return tier.value.title()


def color_swatch(color: str) -> Text:
    """A colored block followed by the color value.

    Values rich cannot parse are shown without the block.
    """
    try:
        style = Style.parse(f"on {color.lower()}")
    except StyleSyntaxError:
        style = None

    text = Text()
    if style is not None:
        text.append("  ", style=style)
        text.append(" ")
    text.append(color)
    return text


def render_theme(theme: Theme) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_row("Primary", color_swatch(theme.primary_color))
    table.add_row("Background", color_swatch(theme.background_color))
    table.add_row("Text", color_swatch(theme.text_color))
    table.add_row("Card", color_swatch(theme.card_color))
    table.add_row("Mode", "dark" if theme.is_dark_mode else "light")
    if theme.background_gradient:
        gradient = theme.background_gradient
        table.add_row(
            "Gradient",
            f"{gradient.from_color} -> {gradient.to_color} ({gradient.direction.value})",
        )
    return table


def render_links(links: list[LinkItem]) -> Table:
    """Table of links in display order, numbered from 1."""
    table = Table(title="Links", expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    table.add_column("URL", overflow="fold")
    table.add_column("Icon", style="dim")
    table.add_column("Status")
    table.add_column("ID", style="dim")

    for position, link in enumerate(links, start=1):
        status = "[green]active[/green]" if link.is_active else "[yellow]hidden[/yellow]"
        table.add_row(str(position), link.title, link.url, link.icon or "", status, link.id[:8])
    return table


def render_profile(profile: Profile, share_url: str, user: Optional[User] = None) -> Group:
    """Profile header, theme and links."""
    header = Text()
    header.append(f"{profile.title}\n", style="bold")
    header.append(f"{profile.bio}\n")
    if profile.username:
        header.append(f"@{profile.username}  ", style="cyan")
    header.append("public" if profile.is_public else "private", style="dim")
    if share_url:
        header.append(f"\n{share_url}", style="blue underline")

    subtitle = f"signed in as {user.email}" if user else "not signed in"
    return Group(
        Panel(header, title="Profile", subtitle=subtitle, border_style="blue"),
        Panel(render_theme(profile.theme), title="Theme", border_style="blue"),
        render_links(profile.sorted_links()),
    )


def render_profiles(profiles: list[Profile], current_id: Optional[str]) -> Table:
    table = Table(title="Profiles")
    table.add_column("")
    table.add_column("Title")
    table.add_column("Username")
    table.add_column("Links", justify="right")
    table.add_column("ID", style="dim")
    for profile in profiles:
        marker = "[bold green]*[/bold green]" if profile.id == current_id else ""
        table.add_row(
            marker,
            profile.title,
            profile.username or "",
            str(len(profile.links)),
            profile.id,
        )
    return table


def render_presets(presets: list[ThemePreset], locked: list[ThemePreset]) -> Table:
    """Available presets, followed by premium presets the user cannot pick yet."""
    table = Table(title="Themes")
    table.add_column("Name")
    table.add_column("Primary")
    table.add_column("Background")
    table.add_column("Mode")
    table.add_column("")
    for preset in presets:
        table.add_row(
            preset.name,
            color_swatch(preset.theme.primary_color),
            color_swatch(preset.theme.background_color),
            "dark" if preset.theme.is_dark_mode else "light",
            "[magenta]premium[/magenta]" if preset.is_premium else "",
        )
    for preset in locked:
        table.add_row(
            Text(preset.name, style="dim"),
            "",
            "",
            "",
            "[dim]premium (upgrade)[/dim]",
        )
    return table


def render_plans(plans: tuple[SubscriptionPlan, ...], current: SubscriptionTier) -> Table:
    table = Table(title="Plans")
    table.add_column("Plan")
    table.add_column("Price", justify="right")
    table.add_column("Profiles", justify="right")
    table.add_column("Links", justify="right")
    table.add_column("Features")
    for plan in plans:
        name = plan.name + (" [green](current)[/green]" if plan.id == current else "")
        table.add_row(
            name,
            f"${plan.price}/{plan.interval.value}",
            "unlimited" if plan.unlimited_profiles else str(plan.max_profiles),
            "unlimited" if plan.unlimited_links else str(plan.max_links),
            "\n".join(plan.features),
        )
    return table


def render_stats(
    analytics: Analytics,
    top: list[TopLink],
    series: list[DailyPoint],
    change: Growth,
) -> Group:
    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_row("Total views", str(analytics.total_views), f"{change.views:+.1f}%")
    summary.add_row("Total clicks", str(analytics.total_clicks), f"{change.clicks:+.1f}%")

    top_table = Table(title="Top links")
    top_table.add_column("Title")
    top_table.add_column("Site", overflow="fold")
    top_table.add_column("Clicks", justify="right")
    for item in top:
        top_table.add_row(item.title, get_domain_from_url(item.url), str(item.clicks))

    daily = Table(title="Daily")
    daily.add_column("Date")
    daily.add_column("Views", justify="right")
    daily.add_column("Clicks", justify="right")
    for point in series:
        daily.add_row(point.date, str(point.views), str(point.clicks))

    return Group(Panel(summary, title="Analytics", border_style="blue"), top_table, daily)


def print_error(error: LinkoraError) -> None:
    console.print(f"[red]Error:[/red] {error.message}")
    if isinstance(error, FormValidationError):
        for field, message in error.field_errors.items():
            console.print(f"  [red]{field}:[/red] {message}")


def print_result(result: StoreResult, success: str) -> bool:
    """Print ``success`` or the failure of ``result``. Returns ``result.ok``."""
    if result.ok:
        console.print(f"[green]{success}[/green]")
    elif result.error is not None:
        print_error(result.error)
    return result.ok
