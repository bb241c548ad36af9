"""
SQL SELECT statement builder.

Example:
    >>> from norm.sql import select
    >>> select("id", "email").from_("users").where("role = ?", "admin").render()
    "SELECT id,email FROM users WHERE role = 'admin'"
"""

from enum import Enum
from typing import Any, List, Optional, Union as TypingUnion

from ..core.buffer import Buffer
from ..core.part import Part
from ..core.statement import Statement, Union, build_nested
from .base import CommentClause, WhereClause, WithClause


class Join(str, Enum):
    """Join types."""

    INNER = "INNER JOIN"
    LEFT_OUTER = "LEFT OUTER JOIN"
    RIGHT_OUTER = "RIGHT OUTER JOIN"
    FULL_OUTER = "FULL OUTER JOIN"


class Order(str, Enum):
    """Sort direction applied to the whole `ORDER BY` list."""

    ASC = "ASC"
    DESC = "DESC"


Column = TypingUnion[str, Statement]
Source = TypingUnion[str, Statement]


def _check_column(column: Any) -> Column:
    if not isinstance(column, (str, Statement)):
        raise TypeError(
            f"column must be a string or a Statement, got: {type(column).__name__}"
        )
    return column


class SelectStatement(CommentClause, WithClause, WhereClause, Statement):
    """
    Builder for `SELECT` statements.

    Every configuration method mutates the builder and returns it, so calls
    can be chained. Rendering never modifies the builder.
    """

    def __init__(self, *columns: Column):
        super().__init__()
        self._columns: List[Column] = [_check_column(c) for c in columns]
        self._distinct = False
        self._table: Optional[Source] = None
        self._joins: List[Part] = []
        self._group_by: List[str] = []
        self._having: List[Part] = []
        self._order_by: List[str] = []
        self._order = Order.ASC
        self._limit = 0
        self._offset = 0
        self._for_update = False
        self._skip_locked = False
        self._union: Optional[Union] = None

    def columns(self, *columns: Column) -> "SelectStatement":
        """Set the `SELECT` columns, replacing any previously set columns."""
        self._columns = [_check_column(c) for c in columns]
        return self

    def column(self, query: str, *values: Any) -> "SelectStatement":
        """Append a column expression with placeholders to the `SELECT`."""
        self._columns.append(Part(query, *values))
        return self

    def from_(self, table: Source) -> "SelectStatement":
        """Set the table name or subquery for the `FROM` clause."""
        if not isinstance(table, (str, Statement)):
            raise TypeError(
                f"table must be a string or a Statement, got: {type(table).__name__}"
            )
        self._table = table
        return self

    def join(
        self, join: TypingUnion[Join, str], table: str, cond: str, *values: Any
    ) -> "SelectStatement":
        """
        Add a `<join> table ON cond` clause.

        Join members render their keyword; plain strings such as
        "LEFT JOIN LATERAL" are written as given.
        """
        keyword = join.value if isinstance(join, Join) else join
        self._joins.append(Part(f"{keyword} {table} ON {cond}", *values))
        return self

    def join_inner(self, table: str, cond: str, *values: Any) -> "SelectStatement":
        """Add an `INNER JOIN` clause."""
        return self.join(Join.INNER, table, cond, *values)

    def join_left(self, table: str, cond: str, *values: Any) -> "SelectStatement":
        """Add a `LEFT OUTER JOIN` clause."""
        return self.join(Join.LEFT_OUTER, table, cond, *values)

    def join_right(self, table: str, cond: str, *values: Any) -> "SelectStatement":
        """Add a `RIGHT OUTER JOIN` clause."""
        return self.join(Join.RIGHT_OUTER, table, cond, *values)

    def join_full(self, table: str, cond: str, *values: Any) -> "SelectStatement":
        """Add a `FULL OUTER JOIN` clause."""
        return self.join(Join.FULL_OUTER, table, cond, *values)

    def group_by(self, *columns: str) -> "SelectStatement":
        """Add `GROUP BY` columns."""
        self._group_by.extend(columns)
        return self

    def having(self, query: str, *values: Any) -> "SelectStatement":
        """Add a `HAVING` condition, multiple calls are `AND`ed together."""
        self._having.append(Part(query, *values))
        return self

    def order_asc(self, *columns: str) -> "SelectStatement":
        """Set an `ORDER BY columns ASC` clause."""
        self._order_by = list(columns)
        self._order = Order.ASC
        return self

    def order_desc(self, *columns: str) -> "SelectStatement":
        """Set an `ORDER BY columns DESC` clause."""
        self._order_by = list(columns)
        self._order = Order.DESC
        return self

    def limit(self, n: int) -> "SelectStatement":
        """Set a `LIMIT n` clause, zero disables it."""
        if n < 0:
            raise ValueError(f"limit must not be negative, got: {n}")
        self._limit = n
        return self

    def offset(self, n: int) -> "SelectStatement":
        """Set the `OFFSET n`, only rendered together with a limit."""
        if n < 0:
            raise ValueError(f"offset must not be negative, got: {n}")
        self._offset = n
        return self

    def distinct(self) -> "SelectStatement":
        """Add a `DISTINCT` clause."""
        self._distinct = True
        return self

    def for_update(self) -> "SelectStatement":
        """Add a `FOR UPDATE` clause."""
        self._for_update = True
        return self

    def skip_locked(self) -> "SelectStatement":
        """Add a `SKIP LOCKED` clause."""
        self._skip_locked = True
        return self

    def union(self, stmt: Statement) -> "SelectStatement":
        """Add a `UNION` clause."""
        self._union = Union(stmt)
        return self

    def union_all(self, stmt: Statement) -> "SelectStatement":
        """Add a `UNION ALL` clause."""
        self._union = Union(stmt, all=True)
        return self

    def build(self, buf: Buffer) -> None:
        self._build_comments(buf)
        self._build_with(buf)

        buf.write("SELECT ")
        if self._distinct:
            buf.write("DISTINCT ")

        for x, column in enumerate(self._columns):
            if x > 0:
                buf.write(",")
            if isinstance(column, str):
                buf.write(column)
            else:
                build_nested(column, buf)

        if self._table is not None:
            buf.write(" FROM ")
            if isinstance(self._table, Statement):
                buf.write("( ")
                build_nested(self._table, buf)
                buf.write(" )")
            else:
                buf.write(self._table)

        for join in self._joins:
            buf.write(" ")
            join.build(buf)

        self._build_where(buf)

        if self._group_by:
            buf.write(" GROUP BY ")
            buf.write(",".join(self._group_by))

        for x, cond in enumerate(self._having):
            buf.write(" HAVING " if x == 0 else " AND ")
            cond.build(buf)

        if self._order_by:
            buf.write(" ORDER BY ")
            buf.write(",".join(self._order_by))
            buf.write(" ")
            buf.write(self._order.value)

        if self._limit > 0:
            buf.write(f" LIMIT {self._limit} OFFSET {self._offset}")

        if self._for_update:
            buf.write(" FOR UPDATE")

        if self._skip_locked:
            buf.write(" SKIP LOCKED")

        if self._union is not None:
            buf.write(" ")
            self._union.build(buf)


def select(*columns: Column) -> SelectStatement:
    """Create a new `SELECT` statement."""
    return SelectStatement(*columns)
