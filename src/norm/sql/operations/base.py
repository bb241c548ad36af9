"""
Clauses shared by the statement builders.

Builders mix these in and call the matching ``_build_*`` helper at the right
point of their render order.
"""

from typing import Any, List, Optional

from ..core.buffer import Buffer
from ..core.part import Part, build_where_in
from ..core.statement import Statement, With, build_where


class CommentClause:
    """`-- comment` lines rendered before the statement."""

    def __init__(self) -> None:
        super().__init__()
        self._comments: List[Part] = []

    def comment(self, text: str, *values: Any):
        """Add a `-- <text>` line; each call adds a new line."""
        self._comments.append(Part("-- " + text, *values))
        return self

    def _build_comments(self, buf: Buffer) -> None:
        for comment in self._comments:
            comment.build(buf)
            buf.write("\n")


class WithClause:
    """A single `WITH` clause; setting it again replaces the previous one."""

    def __init__(self) -> None:
        super().__init__()
        self._with: Optional[With] = None

    def with_(self, alias: str, stmt: Statement):
        """Add a `WITH alias AS (stmt)` clause."""
        self._with = With(alias, stmt)
        return self

    def with_recursive(self, alias: str, stmt: Statement):
        """Add a `WITH RECURSIVE alias AS (stmt)` clause."""
        self._with = With(alias, stmt, recursive=True)
        return self

    def _build_with(self, buf: Buffer) -> None:
        if self._with is not None:
            self._with.build(buf)
            buf.write(" ")


class WhereClause:
    """`WHERE` conditions, multiple calls are `AND`ed together."""

    def __init__(self) -> None:
        super().__init__()
        self._where: List[Part] = []

    def where(self, query: str, *values: Any):
        """Add a `WHERE` condition."""
        self._where.append(Part(query, *values))
        return self

    def where_in(self, column: str, *values: Any):
        """
        Add a `WHERE column IN (values)` condition.

        A single list or tuple argument is expanded into its items and a
        single statement argument becomes a subquery.
        """
        self._where.append(build_where_in(column, *values))
        return self

    def _build_where(self, buf: Buffer) -> None:
        build_where(buf, self._where)


class ReturningClause:
    """`RETURNING columns` clause."""

    def __init__(self) -> None:
        super().__init__()
        self._returning: List[str] = []

    def returning(self, *columns: str):
        """Set the `RETURNING` columns, replacing previous ones."""
        self._returning = list(columns)
        return self

    def _build_returning(self, buf: Buffer) -> None:
        if self._returning:
            buf.write(" RETURNING ")
            buf.write(",".join(self._returning))
