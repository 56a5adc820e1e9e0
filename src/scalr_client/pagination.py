"""Lazy iteration over paginated listings.

``PageIterator`` calls ``fetch_page(page_number)`` on demand, starting at
page 1 and following ``next_page`` from the listing's pagination metadata.
Iteration stops on an empty page, a ``None`` result or a missing
``next_page``. Errors raised by ``fetch_page`` propagate to the caller.

Example:
    ```python
    it = client.environments.iterate(EnvironmentListOptions(page_size=50))
    for env in it:
        print(env.name, it.page_info())
    ```
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from scalr_client.jsonapi import Pagination

T = TypeVar("T")

PageResult = tuple[Sequence[T], Pagination | None] | None


@dataclass(frozen=True)
class PageInfo:
    """Position of an iterator within the listing."""

    current_page: int = 0
    total_pages: int = 0
    has_started: bool = False
    is_done: bool = False

    def __str__(self) -> str:
        if not self.has_started:
            return "not started"
        text = f"page {self.current_page}/{self.total_pages}"
        if self.is_done:
            text += " (done)"
        return text


class _PageCursor(Generic[T]):
    """Page bookkeeping shared by the sync and async iterators."""

    def __init__(self, page_size: int = 0) -> None:
        self._page_size = page_size
        self._items: list[T] = []
        self._index = -1
        self._pagination: Pagination | None = None
        self._next_page: int | None = 1
        self._started = False
        self._done = False

    def _advance_in_page(self) -> bool:
        self._started = True
        self._index += 1
        return self._index < len(self._items)

    def _load(self, result: "PageResult[T]") -> bool:
        """Install a fetched page; False means the listing is exhausted."""
        if result is None:
            self._done = True
            return False
        items, pagination = result
        if not items:
            self._done = True
            return False
        self._items = list(items)
        self._index = 0
        self._pagination = pagination
        self._next_page = pagination.next_page if pagination is not None else None
        return True

    @property
    def value(self) -> T:
        """The item most recently returned by the iterator.

        Raises:
            RuntimeError: Iteration has not started or is already finished.
        """
        if not self._started:
            raise RuntimeError("value accessed before iteration started")
        if self._done:
            raise RuntimeError("value accessed after iteration finished")
        return self._items[self._index]

    def page_info(self) -> PageInfo:
        pagination = self._pagination
        return PageInfo(
            current_page=pagination.current_page if pagination else 0,
            total_pages=pagination.total_pages if pagination else 0,
            has_started=self._started,
            is_done=self._done,
        )

    def remaining(self) -> int:
        """Items not yet returned; -1 before the first page is fetched.

        Later pages are estimated as full pages.
        """
        if not self._started:
            return -1
        if self._done:
            return 0
        left = len(self._items) - self._index - 1
        pagination = self._pagination
        if pagination is not None:
            page_size = self._page_size or pagination.page_size
            left += max(pagination.total_pages - pagination.current_page, 0) * page_size
        return left


class PageIterator(_PageCursor[T]):
    """Iterator over every item of a listing, fetching pages lazily."""

    def __init__(self, fetch_page: Callable[[int], "PageResult[T]"], page_size: int = 0) -> None:
        super().__init__(page_size)
        self._fetch_page = fetch_page

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        if self._advance_in_page():
            return self._items[self._index]
        if self._next_page is None:
            self._done = True
            raise StopIteration
        try:
            result = self._fetch_page(self._next_page)
        except Exception:
            self._done = True
            raise
        if not self._load(result):
            raise StopIteration
        return self._items[self._index]

    def collect(self) -> list[T]:
        """Drain the iterator into a list."""
        return list(self)


class AsyncPageIterator(_PageCursor[T]):
    """``PageIterator`` for coroutine fetchers, used with ``async for``."""

    def __init__(self, fetch_page: Callable[[int], Awaitable["PageResult[T]"]], page_size: int = 0) -> None:
        super().__init__(page_size)
        self._fetch_page = fetch_page

    def __aiter__(self) -> "AsyncPageIterator[T]":
        return self

    async def __anext__(self) -> T:
        if self._done:
            raise StopAsyncIteration
        if self._advance_in_page():
            return self._items[self._index]
        if self._next_page is None:
            self._done = True
            raise StopAsyncIteration
        try:
            result = await self._fetch_page(self._next_page)
        except Exception:
            self._done = True
            raise
        if not self._load(result):
            raise StopAsyncIteration
        return self._items[self._index]

    async def collect(self) -> list[T]:
        return [item async for item in self]
