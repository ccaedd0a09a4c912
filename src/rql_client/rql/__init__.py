"""RQL expression building.

Example:
    ```python
    from rql_client.rql import rql_builder

    rql = rql_builder().eq("status", "active").sort("-name").build()
    ```
"""

from rql_client.rql.builder import (
    WHITESPACE_WARNING,
    RQLBuilder,
    RQLString,
    ensure_rql,
    has_operator,
    rql_builder,
)

__all__ = [
    "WHITESPACE_WARNING",
    "RQLBuilder",
    "RQLString",
    "ensure_rql",
    "has_operator",
    "rql_builder",
]
