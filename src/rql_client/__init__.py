"""RQL Client - query building and pagination for multi-service REST backends.

This library provides the pieces every listing endpoint relies on:
- An immutable RQL (Resource Query Language) expression builder
- Pagination helpers: navigable pages, eager and lazy full-collection fetches
- A generic httpx-based resource client with structured API errors
- Settings resolution from the environment and .env files

Example:
    ```python
    from rql_client import ClientSettings, FindOptions, ResourceClient, create_http_client, rql_builder

    settings = ClientSettings.from_env()

    async with create_http_client(settings) as http:
        users = ResourceClient(http, "/users/v2")
        rql = rql_builder().eq("status", "active").sort("-creationTimestamp").build()

        async for page in users.find_all_iterator(FindOptions(rql=rql)):
            for user in page.data:
                print(user["email"])
    ```
"""

from rql_client.client import ResourceClient, create_http_client
from rql_client.config import ClientSettings
from rql_client.errors import APIError, InvalidUsageError, PaginationError
from rql_client.pagination import (
    FindOptions,
    PagedResult,
    PagedResultWithPager,
    PageInfo,
    add_pagers,
    find_all,
    find_all_iterator,
)
from rql_client.rql import RQLBuilder, RQLString, rql_builder

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "ClientSettings",
    "FindOptions",
    "InvalidUsageError",
    "PageInfo",
    "PaginationError",
    "PagedResult",
    "PagedResultWithPager",
    "RQLBuilder",
    "RQLString",
    "ResourceClient",
    "__version__",
    "add_pagers",
    "create_http_client",
    "find_all",
    "find_all_iterator",
    "rql_builder",
]
