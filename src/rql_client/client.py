"""HTTP plumbing shared by every listing resource of the backend."""

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import replace
from typing import Any, Generic, TypeVar

import httpx

from rql_client.config import ClientSettings
from rql_client.errors import raise_for_status
from rql_client.pagination import (
    FindOptions,
    PagedResult,
    PagedResultWithPager,
    add_pagers,
    find_all,
    find_all_iterator,
)
from rql_client.rql import rql_builder
from rql_client.rql.builder import WarningSink

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_http_client(settings: ClientSettings, **kwargs: Any) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` for the configured host.

    A static bearer token from the settings is sent with every request.
    Extra keyword arguments are passed to ``httpx.AsyncClient``.
    """
    headers = dict(kwargs.pop("headers", None) or {})
    if settings.token:
        headers["Authorization"] = f"Bearer {settings.token}"
    kwargs.setdefault("timeout", settings.timeout)
    return httpx.AsyncClient(base_url=settings.host, headers=headers, **kwargs)


class ResourceClient(Generic[T]):
    """Listing operations for one collection endpoint.

    ``find_page`` is the only method that performs I/O; every other lookup is
    built from it and from the pagination helpers.

    Args:
        http_client: Client the requests are sent with.
        base_path: Path of the collection, e.g. ``"/data/v1"``.
        item_factory: Optional callable turning each JSON record into ``T``.
        on_warning: Callback receiving non-fatal diagnostics from the
            expression builder and ``find_all``.

    Example:
        ```python
        async with create_http_client(ClientSettings.from_env()) as http:
            schemas = ResourceClient(http, "/data/v1")
            active = await schemas.find_all(FindOptions(rql=rql_builder().eq("status", "active").build()))
        ```
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_path: str,
        *,
        item_factory: Callable[[Any], T] | None = None,
        on_warning: WarningSink | None = None,
    ) -> None:
        self._http_client = http_client
        self.base_path = base_path.rstrip("/")
        self._item_factory = item_factory
        self._on_warning = on_warning

    async def find_page(self, options: FindOptions | None = None) -> PagedResult[T]:
        """Fetch one page of the collection.

        Raises:
            APIError: For any non-success response.
        """
        options = options or FindOptions()
        url = f"{self.base_path}/{options.rql or ''}"
        logger.debug(f"GET {url}")
        response = await self._http_client.get(url, headers=options.headers)
        raise_for_status(response)
        return PagedResult.from_dict(response.json(), self._item_factory)

    async def find(self, options: FindOptions | None = None) -> PagedResultWithPager[T]:
        """Fetch one page that can navigate to its neighbours."""
        result = await self.find_page(options)
        return add_pagers(self.find_page, options, result)

    async def find_all(self, options: FindOptions | None = None) -> list[T]:
        """Fetch every record matching ``options``."""
        return await find_all(self.find_page, options, on_warning=self._on_warning)

    def find_all_iterator(self, options: FindOptions | None = None) -> AsyncIterator[PagedResult[T]]:
        """Lazily iterate over the pages matching ``options``."""
        return find_all_iterator(self.find_page, options)

    async def find_first(self, options: FindOptions | None = None) -> T | None:
        """First record matching ``options``, or None."""
        result = await self.find_page(options)
        return result.data[0] if result.data else None

    async def find_by_id(self, id: str, options: FindOptions | None = None) -> T | None:
        """Record with the given id, or None."""
        return await self._find_by("id", id, options)

    async def find_by_name(self, name: str, options: FindOptions | None = None) -> T | None:
        """Record with the given name, or None."""
        return await self._find_by("name", name, options)

    async def _find_by(self, field: str, value: str, options: FindOptions | None) -> T | None:
        options = options or FindOptions()
        rql = rql_builder(options.rql, on_warning=self._on_warning).eq(field, value).build()
        return await self.find_first(replace(options, rql=rql))
