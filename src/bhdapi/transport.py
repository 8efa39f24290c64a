"""HTTP transport for the BHD torrents API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from bhdapi.config import BASE_URL
from bhdapi.exceptions import ConfigurationError, DecodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Transport:
    """Send API calls over a shared ``httpx.AsyncClient``.

    Credentials travel in the URL path, so they are never logged. Redirects
    are not followed: any status other than 200 is an error.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = BASE_URL) -> None:
        self._client = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def post(self, api_key: str, body: dict[str, Any], result_type: type[ModelT]) -> ModelT:
        """POST *body* as JSON to ``/api/torrents/{api_key}`` and decode the reply.

        Args:
            api_key: The user's API key.
            body: Encoded request body.
            result_type: Model the response is decoded into; unknown keys fail.

        Raises:
            ConfigurationError: If *api_key* is empty (no request is sent).
            HTTPStatusError: If the service answers with a non-200 status.
            TransportError: If the HTTP request fails.
            DecodeError: If the body is not valid JSON of the expected shape.
        """
        if not api_key:
            raise ConfigurationError("must supply api key")

        logger.debug("POST %s/api/torrents/*** action=%s", self._base_url, body.get("action"))
        try:
            resp = await self._client.post(
                f"{self._base_url}/api/torrents/{api_key}",
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"BHD request failed: {exc!r}") from exc

        if resp.status_code != httpx.codes.OK:
            raise HTTPStatusError(resp.status_code)

        try:
            return result_type.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"invalid {result_type.__name__} body: {exc}") from exc

    async def get_torrent(self, torrent_id: int, rss_key: str) -> bytes:
        """Download the ``.torrent`` file for *torrent_id*.

        Returns:
            The response body, verbatim.

        Raises:
            ConfigurationError: If *rss_key* is empty (no request is sent).
            HTTPStatusError: If the service answers with a non-200 status.
            TransportError: If the HTTP request fails.
        """
        if not rss_key:
            raise ConfigurationError("must supply rss key")

        logger.debug("GET %s/torrent/download/auto.%d.***", self._base_url, torrent_id)
        try:
            resp = await self._client.get(f"{self._base_url}/torrent/download/auto.{torrent_id}.{rss_key}")
        except httpx.HTTPError as exc:
            raise TransportError(f"BHD download failed: {exc!r}") from exc

        if resp.status_code != httpx.codes.OK:
            raise HTTPStatusError(resp.status_code)

        logger.info("downloaded torrent %d (%d bytes)", torrent_id, len(resp.content))
        return resp.content
