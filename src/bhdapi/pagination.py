"""Lazy iteration over every page of a search."""

from __future__ import annotations

import asyncio
import logging

from bhdapi.interfaces import PageFetcher
from bhdapi.models import SearchParams, Torrent

logger = logging.getLogger(__name__)


class SearchIterator:
    """Cursor over a paged search, fetching one page at a time.

    Pages are requested starting at ``params.page`` (1 when unset). Iteration
    stops when a page comes back empty or when the number of yielded results
    reaches the total the service reported. The first error is kept and every
    later ``advance()`` returns False without further requests. An iterator
    is single-use and must not be advanced from two tasks at once.

    Usage::

        it = client.iterate("fight", "club")
        while await it.advance():
            print(it.current().name)
        if it.error() is not None:
            ...

    or ``async for torrent in it``, which raises the stored error at the end.
    """

    def __init__(self, fetcher: PageFetcher, params: SearchParams) -> None:
        self._fetcher = fetcher
        self._params = params
        self._buf: list[Torrent] = []
        self._page_offset = 0
        self._idx = 0
        self._consumed = 0
        self._total = 0
        self._fetched = False
        self._done = False
        self._err: BaseException | None = None

    @property
    def consumed(self) -> int:
        """Number of results yielded so far."""
        return self._consumed

    @property
    def total(self) -> int:
        """Total result count from the most recent page (0 before the first fetch)."""
        return self._total

    @property
    def done(self) -> bool:
        return self._done

    def error(self) -> BaseException | None:
        """Return the error that stopped iteration, if any."""
        return self._err

    def current(self) -> Torrent:
        """Return the result the last successful ``advance()`` moved to."""
        if self._idx == 0:
            raise LookupError("no current result; advance() has not returned True")
        return self._buf[self._idx - 1]

    async def advance(self) -> bool:
        """Move to the next result, fetching the next page when needed.

        Returns:
            True when ``current()`` holds a new result; False when iteration
            is over or failed (see ``error()``).

        Raises:
            asyncio.CancelledError: If the task is cancelled during a fetch.
                The cancellation is also stored as the sticky error.
        """
        if self._err is not None or self._done:
            return False

        while True:
            if self._idx < len(self._buf) and self._consumed < self._total:
                self._idx += 1
                self._consumed += 1
                return True

            if self._fetched and self._consumed >= self._total:
                return self._finish()

            page = (self._params.page or 1) + self._page_offset
            try:
                res = await self._fetcher.fetch_page(self._params.with_page(page))
            except asyncio.CancelledError as exc:
                self._err = exc
                raise
            except Exception as exc:
                logger.warning("search page %d failed: %s", page, exc)
                self._err = exc
                return False

            self._buf = res.results
            self._idx = 0
            self._total = res.total_results
            self._page_offset += 1
            self._fetched = True
            logger.debug(
                "search page %d: %d result(s), %d/%d consumed",
                page,
                len(self._buf),
                self._consumed,
                self._total,
            )

            if not self._buf:
                return self._finish()

    def _finish(self) -> bool:
        self._done = True
        logger.info("search finished after %d page(s), %d result(s)", self._page_offset, self._consumed)
        return False

    def __aiter__(self) -> SearchIterator:
        return self

    async def __anext__(self) -> Torrent:
        if await self.advance():
            return self.current()
        if self._err is not None:
            raise self._err
        raise StopAsyncIteration
