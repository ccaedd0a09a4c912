"""Pagination strategies built on top of a resource's ``find`` function.

Every listing endpoint exposes a ``find(options) -> PagedResult`` function.
The helpers in this module drive that function repeatedly, rewriting the
``limit(...)`` term of the caller's expression for each page:

- ``add_pagers``: wraps one fetched page with ``next()``/``previous()``
- ``find_all``: fetches every page and returns the concatenated records
- ``find_all_iterator``: lazily yields one page at a time

Requests are strictly sequential. Errors raised by ``find`` propagate to the
caller unchanged.

Example:
    ```python
    from rql_client.pagination import FindOptions, find_all
    from rql_client.rql import rql_builder

    options = FindOptions(rql=rql_builder().eq("status", "active").build())
    users = await find_all(users_client.find_page, options)
    ```
"""

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field, replace
from typing import TypeVar

from rql_client.errors import InvalidUsageError, PaginationError
from rql_client.pagination.models import FindOptions, PagedResult
from rql_client.rql import rql_builder
from rql_client.rql.builder import WarningSink, has_operator

logger = logging.getLogger(__name__)

T = TypeVar("T")

FindFunction = Callable[[FindOptions], PagedResult[T] | Awaitable[PagedResult[T]]]

# Page size forced on full-collection fetches
MAX_LIMIT = 50

# Collections above this size trigger a resource usage warning in find_all
LARGE_COLLECTION_THRESHOLD = 2000


async def _fetch(find: FindFunction, options: FindOptions) -> PagedResult[T]:
    logger.debug(f"Fetching page with rql {options.rql or ''!r}")
    result = find(options)
    if inspect.isawaitable(result):
        result = await result
    return result


def _window(options: FindOptions, limit: int, offset: int) -> FindOptions:
    """Options for one page window, composed from the caller's base expression."""
    if limit <= 0:
        raise PaginationError(
            f"Cannot move between pages of limit {limit}, the find function must report a positive page size"
        )
    rql = rql_builder(options.rql).without("limit").limit(limit, offset).build()
    return replace(options, rql=rql)


def _first_page(options: FindOptions) -> FindOptions:
    if has_operator(options.rql, "limit"):
        return options
    return replace(options, rql=rql_builder(options.rql).limit(MAX_LIMIT).build())


@dataclass
class PagedResultWithPager(PagedResult[T]):
    """A paged result that can fetch the pages around it.

    ``next()`` and ``previous()`` each fetch a new page, remember it as the
    current position of this pager and return it wrapped with its own pagers.
    Calling ``next()`` twice on the same object therefore advances two pages.
    """

    _find: FindFunction | None = field(default=None, kw_only=True, repr=False, compare=False)
    _options: FindOptions = field(default_factory=FindOptions, kw_only=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._current = PagedResult(page=self.page, data=self.data)

    async def _move(self, offset: int) -> "PagedResultWithPager[T]":
        if self._find is None:
            raise InvalidUsageError("This page has no find function to fetch other pages with, use add_pagers")
        self._current = await _fetch(self._find, _window(self._options, self._current.page.limit, offset))
        return add_pagers(self._find, self._options, self._current)

    async def next(self) -> "PagedResultWithPager[T]":
        """Fetch the page after the current one.

        The offset is not clamped to ``total``; past the last page the
        request is simply sent with the advanced offset.
        """
        page = self._current.page
        return await self._move(page.offset + page.limit)

    async def previous(self) -> "PagedResultWithPager[T]":
        """Fetch the page before the current one, never going below offset 0."""
        page = self._current.page
        return await self._move(max(page.offset - page.limit, 0))


def add_pagers(
    find: FindFunction, options: FindOptions | None, paged_result: PagedResult[T]
) -> PagedResultWithPager[T]:
    """Extend an already fetched page with ``next()`` and ``previous()``.

    Args:
        find: The function that produced ``paged_result``.
        options: Options the page was fetched with. Their expression is the
            filter and sort baseline for every following page.
        paged_result: The fetched page.
    """
    return PagedResultWithPager(
        page=paged_result.page,
        data=paged_result.data,
        _find=find,
        _options=options or FindOptions(),
    )


async def find_all(
    find: FindFunction, options: FindOptions | None = None, *, on_warning: WarningSink | None = None
) -> list[T]:
    """Fetch every page of a collection and return all records in order.

    Pages are requested with ``limit(50)`` and walked until
    ``offset + limit >= total``.

    Args:
        find: Paged fetch function of the resource.
        options: Options carrying an optional base expression. The expression
            must not contain a ``limit(...)`` term.
        on_warning: Callback receiving non-fatal diagnostics. Defaults to this
            module's logger.

    Returns:
        The concatenated records of every page.

    Raises:
        InvalidUsageError: If the base expression already contains a limit.
        PaginationError: If a page reports a non-positive limit before the
            collection is exhausted.
    """
    options = options or FindOptions()
    if has_operator(options.rql, "limit"):
        raise InvalidUsageError("Do not pass in limit operator with find_all, the page size is managed internally")

    warn = on_warning if on_warning is not None else logger.warning

    result = await _fetch(find, _first_page(options))
    if result.page.total > LARGE_COLLECTION_THRESHOLD and result.page.offset == 0:
        warn(
            f"WARNING: total amount is > {LARGE_COLLECTION_THRESHOLD}, be aware that this function "
            f"can hog up resources. Total = {result.page.total}"
        )
    records = list(result.data)

    while result.page.total > result.page.offset + result.page.limit:
        page = result.page
        result = await _fetch(find, _window(options, page.limit, page.offset + page.limit))
        records.extend(result.data)

    logger.debug(f"Fetched {len(records)} records")
    return records


async def find_all_iterator(find: FindFunction, options: FindOptions | None = None) -> AsyncIterator[PagedResult[T]]:
    """Lazily yield every page of a collection.

    Nothing is fetched until the first page is requested and each following
    page is fetched only when the consumer asks for it. A limit in the base
    expression is honored for the first page; otherwise ``limit(50)`` is used.
    The iterator cannot be restarted and may be abandoned at any point.

    Example:
        ```python
        async for page in find_all_iterator(find, options):
            for record in page.data:
                ...
        ```
    """
    options = options or FindOptions()

    result = await _fetch(find, _first_page(options))
    yield result

    while result.page.total > result.page.offset + result.page.limit:
        page = result.page
        result = await _fetch(find, _window(options, page.limit, page.offset + page.limit))
        yield result
