"""
Query fragments with `?` placeholder interpolation.

A Part is the smallest Statement: a query template plus the values that
replace its placeholders, in order. Every clause of every builder is built
from one or more parts.
"""

from collections.abc import Sequence
from typing import Any, Tuple

from .buffer import Buffer
from .errors import InvalidArgNumberError
from .statement import Statement, write_arg


class Part(Statement):
    """
    Query fragment that satisfies the Statement interface.

    Example:
        >>> Part("email = ? AND age > ?", "john.doe@email.com", 21).render()
        "email = 'john.doe@email.com' AND age > 21"
    """

    def __init__(self, query: str, *values: Any):
        self.query = query
        self.values: Tuple[Any, ...] = values

    def __repr__(self) -> str:
        return f"Part({self.query!r}, values={list(self.values)!r})"

    def build(self, buf: Buffer) -> None:
        self._build(buf, keyword=False)

    def build_keyword(self, buf: Buffer) -> None:
        """Build the part emitting string values unquoted."""
        self._build(buf, keyword=True)

    def _build(self, buf: Buffer, keyword: bool) -> None:
        if self.query.count("?") != len(self.values):
            raise InvalidArgNumberError(self.query, self.values)

        chunks = self.query.split("?")
        buf.write(chunks[0])
        for value, chunk in zip(self.values, chunks[1:]):
            write_arg(buf, value, keyword)
            buf.write(chunk)


def flatten_values(values: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """
    Expand a single list/tuple argument into its items.

    Strings and bytes are sequences too but are kept as one value.
    """
    if len(values) == 1:
        value = values[0]
        if isinstance(value, Sequence) and not isinstance(
            value, (str, bytes, bytearray)
        ):
            return tuple(value)
    return values


def build_where_in(column: str, *values: Any) -> Part:
    """
    Build a `column IN (values)` condition.

    Examples:
        >>> build_where_in("role", "admin", "owner").render()
        "role IN ('admin','owner')"
        >>> build_where_in("role", ["admin", "owner"]).render()
        "role IN ('admin','owner')"
    """
    # a lone subquery is already parenthesized by write_arg
    if len(values) == 1 and isinstance(values[0], Statement):
        return Part(f"{column} IN ?", values[0])

    values = flatten_values(values)
    placeholders = ",".join("?" * len(values))
    return Part(f"{column} IN ({placeholders})", *values)
