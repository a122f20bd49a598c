"""Site and collection data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Site(BaseModel):
    """A site associated with the account."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    shortName: str | None = None
    createdOn: str | None = None
    lastPublished: str | None = None
    previewUrl: str | None = None
    timezone: str | None = None
    database: str | None = None


class Collection(BaseModel):
    """A CMS collection belonging to a site."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    slug: str | None = None
    singularName: str | None = None
    createdOn: str | None = None
    lastUpdated: str | None = None
