"""SQL DELETE statement builder."""

from typing import Optional

from ..core.buffer import Buffer
from ..core.statement import Statement
from .base import CommentClause, ReturningClause, WhereClause, WithClause


class DeleteStatement(CommentClause, WithClause, WhereClause, ReturningClause, Statement):
    """Builder for `DELETE FROM table` statements."""

    def __init__(self, table: Optional[str] = None):
        super().__init__()
        self._table = table or ""

    def from_(self, table: str) -> "DeleteStatement":
        """Set the table to delete from."""
        self._table = table
        return self

    def build(self, buf: Buffer) -> None:
        self._build_comments(buf)
        self._build_with(buf)

        buf.write("DELETE FROM ")
        buf.write(self._table)

        self._build_where(buf)
        self._build_returning(buf)


def delete(table: Optional[str] = None) -> DeleteStatement:
    """Create a new `DELETE` statement."""
    return DeleteStatement(table)
