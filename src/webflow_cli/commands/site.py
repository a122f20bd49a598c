"""Site commands."""

from __future__ import annotations

import typer

from webflow_cli.client.errors import error_handler
from webflow_cli.commands._common import BaseUrlOpt, FormatOpt, ProfileOpt, TokenOpt, make_client
from webflow_cli.output.formatter import output

app = typer.Typer(name="site", help="Browse Webflow sites.")


@app.command("list")
@error_handler
def list_sites(
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    base_url: BaseUrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List sites associated with the account."""
    with make_client(profile, token, base_url) as client:
        sites = client.get_sites()
        columns = ["ID", "Name", "Short Name", "Last Published"]
        rows = [[s.id, s.name, s.shortName, s.lastPublished] for s in sites]
        output(sites, fmt, columns=columns, rows=rows, title="Sites")
