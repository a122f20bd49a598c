"""Description of a single outbound API call."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Method(str, Enum):
    """HTTP methods understood by the transport."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Envelope(BaseModel):
    """An outbound call: method, API-relative path and optional JSON body.

    ``path`` may carry a query string, e.g. ``/collections/x/items?limit=20``.
    """

    model_config = ConfigDict(frozen=True)

    method: Method
    path: str
    body: Any = None
