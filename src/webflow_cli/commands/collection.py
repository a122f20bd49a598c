"""Collection commands."""

from __future__ import annotations

from typing import Annotated

import typer

from webflow_cli.client.errors import error_handler
from webflow_cli.commands._common import BaseUrlOpt, FormatOpt, ProfileOpt, TokenOpt, make_client
from webflow_cli.output.formatter import output

app = typer.Typer(name="collection", help="Browse CMS collections.")


@app.command("list")
@error_handler
def list_collections(
    site_id: Annotated[str, typer.Argument(help="Site ID")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    base_url: BaseUrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the collections of a site."""
    with make_client(profile, token, base_url) as client:
        collections = client.get_collections(site_id)
        columns = ["ID", "Name", "Slug", "Last Updated"]
        rows = [[c.id, c.name, c.slug, c.lastUpdated] for c in collections]
        output(collections, fmt, columns=columns, rows=rows, title=f"Collections of {site_id}")
