"""Item commands: one page at a time or the whole collection."""

from __future__ import annotations

from typing import Annotated

import typer

from webflow_cli.client.errors import error_handler
from webflow_cli.commands._common import BaseUrlOpt, FormatOpt, ProfileOpt, TokenOpt, make_client
from webflow_cli.models.item import Item
from webflow_cli.output.formatter import output

app = typer.Typer(name="item", help="Browse collection items.")

COLUMNS = ["ID", "Name", "Slug", "Draft", "Archived"]


def _rows(items: list[Item]) -> list[list[object]]:
    return [[i.id, i.name, i.slug, i.draft, i.archived] for i in items]


@app.command("list")
@error_handler
def list_items(
    collection_id: Annotated[str, typer.Argument(help="Collection ID")],
    page: Annotated[int, typer.Option("--page", min=0, help="Zero-based page number")] = 0,
    page_size: Annotated[
        int | None,
        typer.Option("--page-size", min=0, help="Items per page (defaults to the profile's)"),
    ] = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    base_url: BaseUrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one page of a collection's items."""
    with make_client(profile, token, base_url, page_size=page_size) as client:
        result = client.paginate_items(collection_id, page)
        caption = (
            f"Items {result.offset + 1}-{result.offset + result.count} of {result.total}"
            if result.count
            else f"No items on page {page} ({result.total} total)"
        )
        if result.has_next_page:
            caption += f", more on page {page + 1}"
        data = {
            "items": result.items,
            "offset": result.offset,
            "count": result.count,
            "total": result.total,
            "has_next_page": result.has_next_page,
        }
        output(
            data,
            fmt,
            columns=COLUMNS,
            rows=_rows(result.items),
            title=f"Items of {collection_id}",
            caption=caption,
        )


@app.command("all")
@error_handler
def all_items(
    collection_id: Annotated[str, typer.Argument(help="Collection ID")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    base_url: BaseUrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Fetch every item of a collection, page by page."""
    with make_client(profile, token, base_url) as client:
        items = list(client.iter_items(collection_id))
        output(
            items,
            fmt,
            columns=COLUMNS,
            rows=_rows(items),
            title=f"Items of {collection_id}",
            caption=f"{len(items)} item(s)",
        )
