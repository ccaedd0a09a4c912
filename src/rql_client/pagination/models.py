"""Paged result models shared by every listing endpoint."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from rql_client.rql import RQLString, ensure_rql

T = TypeVar("T")


@dataclass(frozen=True)
class PageInfo:
    """Describes one fetched batch of a collection.

    Attributes:
        total: Number of records matching the query.
        offset: Index of the first record in this batch.
        limit: Maximum size of the batch.
    """

    total: int
    offset: int
    limit: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageInfo":
        return cls(total=int(data["total"]), offset=int(data.get("offset", 0)), limit=int(data["limit"]))


@dataclass
class PagedResult(Generic[T]):
    """A page descriptor together with the records it describes."""

    page: PageInfo
    data: list[T]

    @classmethod
    def from_dict(
        cls, body: dict[str, Any], item_factory: Callable[[Any], T] | None = None
    ) -> "PagedResult[T]":
        """Parse a ``{"page": {...}, "data": [...]}`` response body.

        Args:
            body: Decoded JSON body.
            item_factory: Optional callable applied to every record.
        """
        items = body.get("data") or []
        data = [item_factory(item) for item in items] if item_factory else list(items)
        return cls(page=PageInfo.from_dict(body["page"]), data=data)


@dataclass
class FindOptions:
    """Options passed to a ``find`` function.

    Attributes:
        rql: Filter, sort and pagination expression. Only ``RQLString``
            values built by ``rql_builder()`` are accepted.
        headers: Extra headers for the request.
    """

    rql: RQLString | None = None
    headers: dict[str, str] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        ensure_rql(self.rql)
