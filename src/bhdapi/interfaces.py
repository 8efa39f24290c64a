"""Interfaces between the client and the pagination layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bhdapi.models import SearchParams, SearchResponse


@runtime_checkable
class PageFetcher(Protocol):
    """Protocol for anything that can fetch one page of search results."""

    async def fetch_page(self, params: SearchParams) -> SearchResponse:
        """Run a single search request.

        Args:
            params: Search parameters, ``page`` included.

        Returns:
            The decoded page.

        Raises:
            BhdError: On transport, decode or service failure.
        """
        ...
