"""Pydantic data models for the Webflow REST API."""

from webflow_cli.models.common import ErrorPayload, GenericItemsPage, ItemsPage
from webflow_cli.models.item import Item
from webflow_cli.models.site import Collection, Site

__all__ = [
    "Collection",
    "ErrorPayload",
    "GenericItemsPage",
    "Item",
    "ItemsPage",
    "Site",
]
