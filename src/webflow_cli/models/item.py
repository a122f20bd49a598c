"""Default container for collection items."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A collection item.

    Only the system fields every collection shares are declared; the
    collection-specific fields are kept as extras and show up in
    ``model_dump()``. Pass your own model to the item accessors for typed
    access to them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    cid: str | None = Field(default=None, alias="_cid")
    archived: bool = Field(default=False, alias="_archived")
    draft: bool = Field(default=False, alias="_draft")
    name: str | None = None
    slug: str | None = None
