"""Testing utilities for code built on the client.

Example:
    ```python
    from rql_client.pagination import find_all
    from rql_client.testing import PagedProvider


    async def test_reads_everything():
        provider = PagedProvider(list(range(5)), page_limit=2)
        assert await find_all(provider) == [0, 1, 2, 3, 4]
        assert provider.call_count == 3
    ```
"""

import re
from typing import Any

from rql_client.pagination import FindOptions, PagedResult, PageInfo

LIMIT_PATTERN = re.compile(r"limit\((\d+)(?:,(\d+))?\)")


def create_paged_response(
    data: list[Any], *, total: int | None = None, offset: int = 0, limit: int = 20
) -> dict[str, Any]:
    """Build a JSON body the way listing endpoints return it."""
    return {
        "page": {"total": len(data) if total is None else total, "offset": offset, "limit": limit},
        "data": data,
    }


class PagedProvider:
    """Fake ``find`` function serving windows of a fixed list of records.

    The window is taken from the last ``limit(...)`` term of the requested
    expression. ``page_limit`` caps the page size the way a backend caps it.
    Every received ``FindOptions`` is recorded in ``calls``.
    """

    def __init__(self, items: list[Any], *, page_limit: int | None = None, total: int | None = None):
        self.items = list(items)
        self.page_limit = page_limit
        self.total = len(self.items) if total is None else total
        self.calls: list[FindOptions] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def requested_rql(self) -> list[str]:
        return [str(call.rql or "") for call in self.calls]

    async def __call__(self, options: FindOptions) -> PagedResult[Any]:
        self.calls.append(options)

        limit, offset = len(self.items) or 1, 0
        matches = LIMIT_PATTERN.findall(options.rql or "")
        if matches:
            raw_limit, raw_offset = matches[-1]
            limit, offset = int(raw_limit), int(raw_offset or 0)
        if self.page_limit is not None:
            limit = min(limit, self.page_limit)

        return PagedResult(
            page=PageInfo(total=self.total, offset=offset, limit=limit),
            data=self.items[offset : offset + limit],
        )
