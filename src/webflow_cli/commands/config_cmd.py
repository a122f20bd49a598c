"""Config commands: manage connection profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from webflow_cli.client.errors import error_handler
from webflow_cli.commands._common import get_manager
from webflow_cli.config.constants import DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE, DEFAULT_TIMEOUT
from webflow_cli.config.models import WebflowProfile
from webflow_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage connection profiles and CLI configuration.")
console = Console()


def _mask(token: str) -> str:
    return token[:8] + "..." if len(token) > 8 else "***"


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    token: Annotated[str, typer.Option("--token", "-t", help="Webflow API token")],
    base_url: Annotated[str, typer.Option("--base-url", help="API base URL")] = DEFAULT_BASE_URL,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = DEFAULT_TIMEOUT,
    page_size: Annotated[int, typer.Option("--page-size", help="Items per page")] = DEFAULT_PAGE_SIZE,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a connection profile."""
    mgr = get_manager()
    profile = WebflowProfile(
        name=name,
        token=token,
        base_url=base_url,
        timeout=timeout,
        page_size=page_size,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'webflow-cli config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Base URL", "Page Size", "Default"]
    rows = [
        [name, p.base_url, p.page_size, "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    data = []
    for p in profiles.values():
        entry = p.model_dump(exclude_none=True)
        if "token" in entry:
            entry["token"] = _mask(entry["token"])
        data.append(entry)

    output(
        {"profiles": data},
        fmt,
        columns=columns,
        rows=rows,
        title="Connection Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = _mask(data["token"])

    output(data, fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default connection profile."""
    mgr = get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a connection profile."""
    mgr = get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Check that a profile's token is accepted by the API."""
    from webflow_cli.client.webflow import new_client

    mgr = get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.base_url}[/]...")

    with new_client(profile.token or "", profile.to_settings()) as client:
        sites = client.get_sites()
        console.print(f"[green]Connected![/] {len(sites)} site(s) visible to this token.")
