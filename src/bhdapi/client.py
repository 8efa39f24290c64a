"""BHD API client."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import BaseModel

from bhdapi.config import BASE_URL, Settings
from bhdapi.encoder import encode_params
from bhdapi.models import ApiResponse, SearchParams, SearchResponse, search
from bhdapi.pagination import SearchIterator
from bhdapi.transport import Transport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SEARCH_ACTION = "search"


class Client:
    """Client for the Beyond-HD torrents API.

    Implements the ``PageFetcher`` protocol. The client keeps no per-request
    state; one instance can serve any number of concurrent calls. Use it as an
    async context manager (or call ``aclose()``) to release the HTTP client it
    owns. A caller-supplied ``http_client`` is left open.
    """

    def __init__(
        self,
        api_key: str = "",
        rss_key: str = "",
        *,
        add_rss_key: bool = False,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.rss_key = rss_key
        self.add_rss_key = add_rss_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self._owns_http_client = http_client is None
        self._http_client = http_client
        self._api: Transport | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: object) -> Client:
        """Build a client from ``Settings``; keyword arguments take precedence."""
        options: dict[str, object] = {
            "api_key": settings.api_key,
            "rss_key": settings.rss_key,
            "add_rss_key": settings.add_rss_key,
            "base_url": settings.base_url,
            "timeout": settings.timeout,
        }
        options.update(kwargs)
        return cls(**options)  # type: ignore[arg-type]

    def _transport(self) -> Transport:
        if self._api is None:
            if self._http_client is None:
                self._http_client = httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout),
                    transport=self.transport,
                )
            self._api = Transport(self._http_client, self.base_url)
        return self._api

    async def aclose(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._api = None

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def do(self, action: str, params: BaseModel, result_type: type[ModelT]) -> ModelT:
        """Encode *params* for *action*, POST it and decode the reply.

        Replies that carry the service status envelope are checked, so a
        failed call raises ``ServiceError`` with the service's message.

        Raises:
            ConfigurationError: If no api key is configured.
            EncodeError: If *params* cannot be encoded.
            TransportError: On network failure or a non-200 status.
            DecodeError: If the reply does not match *result_type*.
            ServiceError: If the service reports a failure.
        """
        rss_key = self.rss_key if self.add_rss_key else None
        body = encode_params(params, action, rss_key=rss_key)
        result = await self._transport().post(self.api_key, body, result_type)
        if isinstance(result, ApiResponse):
            result.raise_for_status()
        return result

    async def fetch_page(self, params: SearchParams) -> SearchResponse:
        """Run one search request and return that page."""
        res = await self.do(SEARCH_ACTION, params, SearchResponse)
        logger.info(
            "search page %d/%d returned %d result(s) (total=%d)",
            res.page,
            res.total_pages,
            len(res.results),
            res.total_results,
        )
        return res

    async def search(self, *query: str) -> SearchResponse:
        """Search for the query tokens and return the first page."""
        return await self.fetch_page(search(*query))

    def iterate(self, *query: str, params: SearchParams | None = None) -> SearchIterator:
        """Return an iterator over every result of a search.

        Pass either query tokens or ready-made *params*, which take precedence.
        """
        if params is None:
            params = search(*query)
        return SearchIterator(self, params)

    async def torrent(self, torrent_id: int) -> bytes:
        """Download the ``.torrent`` file for *torrent_id*."""
        return await self._transport().get_torrent(torrent_id, self.rss_key)


Option = Callable[[Client], None]


def with_api_key(api_key: str) -> Option:
    def apply(client: Client) -> None:
        client.api_key = api_key

    return apply


def with_rss_key(rss_key: str, add_rss_key: bool = False) -> Option:
    """Set the rss key, optionally injecting it into search bodies."""

    def apply(client: Client) -> None:
        client.rss_key, client.add_rss_key = rss_key, add_rss_key

    return apply


def with_base_url(base_url: str) -> Option:
    def apply(client: Client) -> None:
        client.base_url = base_url

    return apply


def with_timeout(timeout: float | None) -> Option:
    def apply(client: Client) -> None:
        client.timeout = timeout

    return apply


def with_transport(transport: httpx.AsyncBaseTransport) -> Option:
    """Set the httpx transport used by the client's own ``AsyncClient``."""

    def apply(client: Client) -> None:
        client.transport = transport

    return apply


def new(*options: Option) -> Client:
    """Create a client by applying *options* in order."""
    client = Client()
    for option in options:
        option(client)
    return client
