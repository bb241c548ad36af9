"""
SQL UPDATE statement builder.

Assignments are kept in a dict and rendered in sorted column order, so the
output does not depend on the order of set() calls.
"""

from typing import Any, Dict, Mapping, Optional

from ..core.buffer import Buffer
from ..core.statement import Statement, write_arg
from .base import CommentClause, ReturningClause, WhereClause, WithClause


class UpdateStatement(CommentClause, WithClause, WhereClause, ReturningClause, Statement):
    """
    Builder for `UPDATE` statements.

    Example:
        >>> update("users").set("role", "admin").where("id = ?", 123).render()
        "UPDATE users SET role = 'admin' WHERE id = 123"
    """

    def __init__(self, table: Optional[str] = None):
        super().__init__()
        self._table = table or ""
        self._assignments: Dict[str, Any] = {}

    def table(self, table: str) -> "UpdateStatement":
        """Set the table to update."""
        self._table = table
        return self

    def set(self, column: str, value: Any) -> "UpdateStatement":
        """
        Add a `column = value` assignment.

        Setting the same column again overwrites the previous value. A
        statement value is rendered as a subquery.
        """
        self._assignments[column] = value
        return self

    def set_map(self, assignments: Mapping[str, Any]) -> "UpdateStatement":
        """Add several `column = value` assignments."""
        self._assignments.update(assignments)
        return self

    def build(self, buf: Buffer) -> None:
        self._build_comments(buf)
        self._build_with(buf)

        buf.write("UPDATE ")
        buf.write(self._table)
        buf.write(" SET")

        for x, column in enumerate(sorted(self._assignments)):
            if x > 0:
                buf.write(",")
            buf.write(" ")
            buf.write(column)
            buf.write(" = ")
            write_arg(buf, self._assignments[column])

        self._build_where(buf)
        self._build_returning(buf)


def update(table: Optional[str] = None) -> UpdateStatement:
    """Create a new `UPDATE` statement."""
    return UpdateStatement(table)
