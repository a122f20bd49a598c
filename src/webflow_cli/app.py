"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from webflow_cli import __version__
from webflow_cli.commands import collection, config_cmd, item, site
from webflow_cli.log import setup_logging

app = typer.Typer(
    name="webflow-cli",
    help="CLI tool for the Webflow CMS REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"webflow-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each API request to stderr."
    ),
) -> None:
    """Webflow CLI: browse sites, collections, and items."""
    setup_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(site.app, name="site")
app.add_typer(collection.app, name="collection")
app.add_typer(item.app, name="item")


def main() -> None:
    app()
