"""Common response models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorPayload(BaseModel):
    """Error body returned by the API for non-2xx responses."""

    code: int = 0
    name: str = ""
    msg: str | None = None
    err: str | None = None
    path: str | None = None


class GenericItemsPage(BaseModel):
    """One page of a collection listing with the items left undecoded.

    Format: ``{"items": [...], "offset": 0, "count": 20, "total": 45}``
    """

    items: list[Any] = Field(default_factory=list)
    offset: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @property
    def has_next_page(self) -> bool:
        return self.offset + self.count < self.total


class ItemsPage(BaseModel, Generic[T]):
    """One page of a collection listing with items decoded into ``T``."""

    items: list[T] = Field(default_factory=list)
    offset: int = 0
    count: int = 0
    total: int = 0

    @property
    def has_next_page(self) -> bool:
        """Whether items remain past this page (``offset + count < total``)."""
        return self.offset + self.count < self.total
