"""Chainable builder for RQL (Resource Query Language) expressions.

RQL is a set of named operators written into a query string, for example
``?eq(status,active)&sort(-creationTimestamp)&limit(10,20)``. The builder only
serializes operators; it does not check whether fields or values make sense.
The backend is the source of truth for that.

Example:
    ```python
    from rql_client.rql import rql_builder

    rql = rql_builder().select(["id", "name"]).eq("status", "active").limit(10).build()
    # "?select(id,name)&eq(status,active)&limit(10)"

    # Extend an existing expression
    narrowed = rql_builder(rql).sort("-name").build()
    ```
"""

import logging
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]

WHITESPACE_WARNING = "A space has been detected while building the rql, please be aware that problems can arise"


class RQLString(str):
    """A query expression produced by :meth:`RQLBuilder.build`.

    Plain strings are rejected wherever an expression is expected. Any
    string operation on an ``RQLString`` returns a plain ``str``, so an
    expression edited by hand loses its tag and must go through the builder
    again.
    """

    __slots__ = ()


def ensure_rql(value: object) -> RQLString | None:
    """Return ``value`` if it is ``None`` or a built expression.

    Raises:
        TypeError: If ``value`` is anything else, including a plain ``str``.
    """
    if value is None or isinstance(value, RQLString):
        return value
    raise TypeError(
        f"Expected an RQLString built with rql_builder(), got {type(value).__name__}. "
        "Use rql_builder() to construct a valid expression."
    )


def has_operator(rql: RQLString | None, name: str) -> bool:
    """Whether ``rql`` already contains a ``name(...)`` term."""
    return bool(rql) and f"{name}(" in rql


def _join(value: str | Iterable[str]) -> str:
    if isinstance(value, str):
        return value
    return ",".join(str(item) for item in value)


class RQLBuilder:
    """Immutable RQL builder.

    Every operator returns a new builder bound to the extended expression;
    the builder it was called on is left untouched.

    Args:
        rql: Expression to start from. Must be an ``RQLString`` or ``None``.
        on_warning: Callback receiving non-fatal diagnostics. Defaults to
            this module's logger.
    """

    def __init__(self, rql: RQLString | None = None, *, on_warning: WarningSink | None = None) -> None:
        self._rql = str(ensure_rql(rql) or "")
        self._on_warning = on_warning if on_warning is not None else logger.warning

    def __repr__(self) -> str:
        return f"RQLBuilder({self._rql!r})"

    def _derive(self, rql: str) -> "RQLBuilder":
        builder = RQLBuilder(on_warning=self._on_warning)
        builder._rql = rql
        return builder

    def _append(self, operation: str, value: str) -> "RQLBuilder":
        if any(char.isspace() for char in value):
            self._on_warning(WHITESPACE_WARNING)
        separator = "&" if self._rql.startswith("?") else "?"
        return self._derive(f"{self._rql}{separator}{operation}({value})")

    def select(self, value: str | Iterable[str]) -> "RQLBuilder":
        """Only return the given properties: ``select(field1,field2)``."""
        return self._append("select", _join(value))

    def limit(self, limit: int, offset: int = 0) -> "RQLBuilder":
        """Return at most ``limit`` records, skipping the first ``offset``.

        ``limit(1)`` returns one record, ``limit(10, 50)`` returns ten records
        after skipping fifty. An offset of ``0`` is left out of the term.
        """
        return self._append("limit", f"{limit},{offset}" if offset else f"{limit}")

    def sort(self, value: str | Iterable[str]) -> "RQLBuilder":
        """Sort by the given properties.

        Prefix a property with ``+`` for ascending (default) or ``-`` for
        descending order.
        """
        return self._append("sort", _join(value))

    def out(self, field: str, values: Iterable[str]) -> "RQLBuilder":
        """Records where ``field`` is not one of ``values``."""
        return self._append("out", f"{field},{_join(values)}")

    def in_(self, field: str, values: Iterable[str]) -> "RQLBuilder":
        """Records where ``field`` is one of ``values``."""
        return self._append("in", f"{field},{_join(values)}")

    def ge(self, field: str, value: object) -> "RQLBuilder":
        return self._append("ge", f"{field},{value}")

    def eq(self, field: str, value: object) -> "RQLBuilder":
        return self._append("eq", f"{field},{value}")

    def le(self, field: str, value: object) -> "RQLBuilder":
        return self._append("le", f"{field},{value}")

    def ne(self, field: str, value: object) -> "RQLBuilder":
        return self._append("ne", f"{field},{value}")

    def like(self, field: str, value: object) -> "RQLBuilder":
        return self._append("like", f"{field},{value}")

    def lt(self, field: str, value: object) -> "RQLBuilder":
        """Records where ``field`` is less than ``value``.

        Note:
            Existing backends receive a ``gt(...)`` term for this operator and
            clients depend on that wire format, so it is emitted unchanged.
        """
        return self._append("gt", f"{field},{value}")

    def gt(self, field: str, value: object) -> "RQLBuilder":
        return self._append("gt", f"{field},{value}")

    def without(self, name: str) -> "RQLBuilder":
        """Drop every ``name(...)`` term from the expression."""
        terms = [term for term in self._rql.lstrip("?").split("&") if term and not term.startswith(f"{name}(")]
        return self._derive(f"?{'&'.join(terms)}" if terms else "")

    def build(self) -> RQLString:
        """Return the accumulated expression."""
        return RQLString(self._rql)


def rql_builder(rql: RQLString | None = None, *, on_warning: WarningSink | None = None) -> RQLBuilder:
    """Start a builder chain, optionally extending an existing expression."""
    return RQLBuilder(rql, on_warning=on_warning)
