"""
Lazy iteration over paginated list endpoints.

A ``Paginator`` is returned by every listing operation of the client. It
fetches nothing until the first record is requested and never fetches a
page before the previous one has been fully consumed.
"""

import logging
from collections import deque
from enum import Enum
from typing import Deque, Iterator, Optional, Type, TypeVar

from .errors import DecodeError
from .page import decode_page
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatorState(str, Enum):
    """
    Lifecycle of a paginator.

    START: nothing fetched yet
    BUFFERED: unread records, or a next page, remain
    FETCHING: a page request is in progress
    EXHAUSTED: terminal, every record has been yielded
    """

    START = "START"
    BUFFERED = "BUFFERED"
    FETCHING = "FETCHING"
    EXHAUSTED = "EXHAUSTED"


class Paginator(Iterator[T]):
    """
    Forward-only iterator over every record of a list endpoint.

    Single pass: to start over, call the client operation again. A failed
    page fetch raises from ``next()`` and leaves the pending URL in place,
    so calling ``next()`` again requests the same page once more.
    """

    def __init__(self, transport: Transport, url: str, schema: Type[T]):
        self._transport = transport
        self._schema = schema
        self._buffer: Deque[T] = deque()
        self._next_url: Optional[str] = url
        self._state = PaginatorState.START
        self._count: Optional[int] = None
        self._pages_fetched = 0

    @property
    def state(self) -> PaginatorState:
        return self._state

    @property
    def count(self) -> Optional[int]:
        """Total record count reported by the last page, None before any fetch."""
        return self._count

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __iter__(self) -> "Paginator[T]":
        return self

    def __next__(self) -> T:
        if not self._buffer:
            if self._next_url is None:
                self._state = PaginatorState.EXHAUSTED
                raise StopIteration
            self._fetch_next_page(self._next_url)
        if not self._buffer:
            raise StopIteration
        return self._buffer.popleft()

    def _fetch_next_page(self, url: str) -> None:
        previous_state = self._state
        self._state = PaginatorState.FETCHING
        try:
            page = decode_page(self._transport.fetch(url), self._schema, url=url)
            # At most one request per demand: a page must make progress
            if page.next is not None and page.next == url:
                raise DecodeError("'next' points back to the page just fetched", url=url)
            if page.next is not None and not page.results:
                raise DecodeError("empty 'results' with a 'next' link", url=url)
        except Exception:
            self._state = previous_state
            raise

        self._pages_fetched += 1
        self._count = page.count
        self._buffer.extend(page.results)
        self._next_url = page.next
        logger.debug(
            "Fetched page %d from %s: %d records, next=%s",
            self._pages_fetched,
            url,
            len(page.results),
            page.next,
        )

        if self._buffer or self._next_url is not None:
            self._state = PaginatorState.BUFFERED
        else:
            self._state = PaginatorState.EXHAUSTED

    def __repr__(self) -> str:
        return (
            f"Paginator({self._schema.__name__}, state={self._state.value}, "
            f"pages_fetched={self._pages_fetched})"
        )
