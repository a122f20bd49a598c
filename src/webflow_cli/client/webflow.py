"""Webflow HTTP client."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from webflow_cli.client.auth import BearerTokenAuth
from webflow_cli.client.envelope import Envelope, Method
from webflow_cli.client.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    RequestConstructionError,
    SerializationError,
    TransportError,
)
from webflow_cli.config.models import ClientSettings
from webflow_cli.models.common import ErrorPayload, GenericItemsPage, ItemsPage
from webflow_cli.models.item import Item
from webflow_cli.models.site import Collection, Site

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _decode(raw: bytes, tp: Any, what: str) -> Any:
    try:
        return _adapter(tp).validate_json(raw)
    except PydanticValidationError as exc:
        raise DecodeError(f"could not decode {what}: {exc}") from exc


class WebflowClient:
    """Synchronous HTTP client for the Webflow REST API.

    Settings are fixed at construction. The client holds no other state, so a
    single instance may be shared by independent callers.
    """

    def __init__(self, token: str, settings: ClientSettings | None = None) -> None:
        if not token or not token.strip():
            raise ConfigurationError("missing webflow authentication token")
        self.settings = settings or ClientSettings()
        self._client = httpx.Client(
            base_url=self.settings.base_url,
            auth=BearerTokenAuth(token),
            timeout=self.settings.timeout,
            headers={
                "Accept": "application/json",
                "Accept-Version": self.settings.api_version,
            },
        )

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def page_size(self) -> int:
        return self.settings.page_size

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> WebflowClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(self, envelope: Envelope, response_type: Any = Any) -> Any:
        """Execute one API call and decode the response.

        A 2xx body is validated against *response_type* and returned. Any
        other status is decoded as an ``ErrorPayload`` and raised as
        ``ApiError``. The response is closed on every path out.

        Raises:
            SerializationError: ``envelope.body`` cannot be encoded as JSON.
            RequestConstructionError: invalid method or URL.
            TransportError: network failure or timeout.
            DecodeError: malformed or unexpected JSON in the response body.
            ApiError: the API reported an error.
        """
        content: bytes | None = None
        headers: dict[str, str] = {}
        if envelope.body is not None:
            try:
                content = _adapter(Any).dump_json(envelope.body)
            except (ValueError, TypeError) as exc:
                raise SerializationError(f"could not encode request body: {exc}") from exc
            headers["Content-Type"] = "application/json"

        try:
            method = Method(envelope.method)
            request = self._client.build_request(
                method.value, envelope.path, content=content, headers=headers,
            )
        except (ValueError, httpx.InvalidURL) as exc:
            raise RequestConstructionError(f"could not create request: {exc}") from exc

        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._client.send(request, stream=True)
        except (httpx.UnsupportedProtocol, httpx.InvalidURL) as exc:
            raise RequestConstructionError(f"could not create request: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {request.url} timed out after {self.settings.timeout}s: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Request to {request.url} failed: {exc}") from exc

        try:
            raw = response.read()
        except httpx.TransportError as exc:
            raise TransportError(f"Reading response from {request.url} failed: {exc}") from exc
        except httpx.DecodingError as exc:
            raise DecodeError(
                f"could not decode response body from {request.url}: {exc}"
            ) from exc
        finally:
            response.close()

        status = response.status_code
        logger.debug("%s %s -> %d (%d bytes)", request.method, request.url, status, len(raw))
        if 200 <= status < 300:
            return _decode(raw, response_type, "response body")

        payload: ErrorPayload = _decode(raw, ErrorPayload, f"error response ({status})")
        raise ApiError(payload.code, payload.name, status_code=status)

    # Accessors

    def get_sites(self) -> list[Site]:
        """List sites associated with the current account."""
        return self.request(Envelope(method=Method.GET, path="/sites"), list[Site])

    def get_collections(self, site_id: str) -> list[Collection]:
        """List collections of a site."""
        return self.request(
            Envelope(method=Method.GET, path=f"/sites/{site_id}/collections"),
            list[Collection],
        )

    def get_items(
        self,
        collection_id: str,
        limit: int,
        offset: int,
        item_type: Any = Item,
    ) -> ItemsPage[Any]:
        """Fetch one window of a collection's items.

        The page envelope is decoded first with the items left as raw JSON
        values, then the items are validated against *item_type*, which may
        be any type pydantic can validate (a model, ``dict[str, Any]``, ...).
        """
        if limit < 0 or offset < 0:
            raise ValueError("limit and offset must be non-negative")
        page: GenericItemsPage = self.request(
            Envelope(
                method=Method.GET,
                path=f"/collections/{collection_id}/items?limit={limit}&offset={offset}",
            ),
            GenericItemsPage,
        )
        try:
            items = _adapter(list[item_type]).validate_python(page.items)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"could not decode items of collection {collection_id}: {exc}"
            ) from exc
        return ItemsPage(
            items=items, offset=page.offset, count=page.count, total=page.total,
        )

    # Pagination

    def paginate_items(
        self,
        collection_id: str,
        page: int,
        item_type: Any = Item,
    ) -> ItemsPage[Any]:
        """Fetch page *page* (zero-based) using the configured page size.

        Pages past the end are not rejected; the API answers them with no
        items and ``has_next_page`` is false.
        """
        if page < 0:
            raise ValueError("page must be non-negative")
        limit = self.settings.page_size
        return self.get_items(collection_id, limit, page * limit, item_type)

    def iter_items(self, collection_id: str, item_type: Any = Item) -> Iterator[Any]:
        """Yield every item of a collection, fetching pages as they are consumed."""
        page = 0
        while True:
            result = self.paginate_items(collection_id, page, item_type)
            yield from result.items
            if not result.has_next_page or not result.items:
                break
            page += 1


def new_client(
    token: str,
    settings: ClientSettings | None = None,
    **overrides: Any,
) -> WebflowClient:
    """Create a client for *token*.

    *settings* replaces the defaults wholesale; keyword *overrides* (e.g.
    ``page_size=5``) are applied on top of it. Overrides given as ``None``
    are ignored.

    Raises:
        ConfigurationError: empty token or invalid settings.
    """
    if not token or not token.strip():
        raise ConfigurationError("missing webflow authentication token")
    base = settings or ClientSettings()
    given = {k: v for k, v in overrides.items() if v is not None}
    if given:
        unknown = set(given) - set(ClientSettings.model_fields)
        if unknown:
            raise ConfigurationError(f"unknown client settings: {', '.join(sorted(unknown))}")
        try:
            base = ClientSettings(**{**base.model_dump(), **given})
        except PydanticValidationError as exc:
            raise ConfigurationError(f"invalid client settings: {exc}") from exc
    return WebflowClient(token, base)
