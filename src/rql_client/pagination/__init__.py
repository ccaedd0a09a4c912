"""Paged results and the strategies that walk them.

Example:
    ```python
    from rql_client.pagination import find_all_iterator

    async for page in find_all_iterator(client.find_page):
        print(page.page.offset, len(page.data))
    ```
"""

from rql_client.pagination.helpers import (
    LARGE_COLLECTION_THRESHOLD,
    MAX_LIMIT,
    FindFunction,
    PagedResultWithPager,
    add_pagers,
    find_all,
    find_all_iterator,
)
from rql_client.pagination.models import FindOptions, PagedResult, PageInfo

__all__ = [
    "LARGE_COLLECTION_THRESHOLD",
    "MAX_LIMIT",
    "FindFunction",
    "FindOptions",
    "PageInfo",
    "PagedResult",
    "PagedResultWithPager",
    "add_pagers",
    "find_all",
    "find_all_iterator",
]
