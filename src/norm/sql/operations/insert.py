"""
SQL INSERT statement builder.

Builds INSERT statements with multi-row VALUES, INSERT ... SELECT and
upsert (INSERT ... ON CONFLICT) support.

Example:
    >>> from norm.sql import insert
    >>> insert("users").columns("id", "name").values(1, "a").returning("id").render()
    "INSERT INTO users(id,name) VALUES (1,'a') RETURNING id"
"""

from typing import Any, List, Mapping, Optional

from ..core.buffer import Buffer
from ..core.part import Part
from ..core.record import record_columns
from ..core.statement import Statement, build_nested
from .base import CommentClause, ReturningClause, WithClause
from .select import SelectStatement


class InsertStatement(CommentClause, WithClause, ReturningClause, Statement):
    """
    Builder for `INSERT` statements.

    Each values() call adds one row; all rows are rendered comma-separated.
    A values_select() source takes precedence over configured rows.
    """

    def __init__(self, table: Optional[str] = None):
        super().__init__()
        self._table = table or ""
        self._columns: List[str] = []
        self._values: List[Part] = []
        self._values_select: Optional[SelectStatement] = None
        self._on_conflict: Optional[Part] = None

    def into(self, table: str) -> "InsertStatement":
        """Set the table to insert into."""
        self._table = table
        return self

    def columns(self, *columns: str) -> "InsertStatement":
        """Set the insert columns, replacing previous ones."""
        self._columns = list(columns)
        return self

    def values(self, *values: Any) -> "InsertStatement":
        """Add a row of values for the `VALUES` clause."""
        placeholders = ",".join("?" * len(values))
        self._values.append(Part(f"({placeholders})", *values))
        return self

    def record(self, record: Any) -> "InsertStatement":
        """
        Add a row from a mapping, dataclass instance or pydantic model.

        When no columns were set yet, they become the record's column names
        in sorted order. Columns missing from the record are inserted as null.

        Raises:
            TypeError: If the record type is not supported
        """
        fields = record_columns(record)
        if not self._columns:
            self._columns = sorted(fields)

        return self.values(*(fields.get(column) for column in self._columns))

    def values_select(self, stmt: SelectStatement) -> "InsertStatement":
        """Insert the rows produced by a `SELECT` statement."""
        self._values_select = stmt
        return self

    def on_conflict(self, query: str, *values: Any) -> "InsertStatement":
        """Set an `ON CONFLICT <query>` clause."""
        self._on_conflict = Part("ON CONFLICT " + query, *values)
        return self

    def on_conflict_do_nothing(self, *conflict_columns: str) -> "InsertStatement":
        """Set an `ON CONFLICT [(columns)] DO NOTHING` clause."""
        if conflict_columns:
            return self.on_conflict(f"({','.join(conflict_columns)}) DO NOTHING")
        return self.on_conflict("DO NOTHING")

    def on_conflict_update(
        self, constraint: str, actions: Mapping[str, Any]
    ) -> "InsertStatement":
        """
        Set an `ON CONFLICT ON CONSTRAINT constraint DO UPDATE SET` clause.

        Assignments are rendered in sorted column order.
        """
        columns = sorted(actions)
        assignments = ", ".join(f"{column} = ?" for column in columns)
        query = f"ON CONSTRAINT {constraint} DO UPDATE SET"
        if assignments:
            query += " " + assignments
        return self.on_conflict(query, *(actions[column] for column in columns))

    def build(self, buf: Buffer) -> None:
        self._build_comments(buf)
        self._build_with(buf)

        buf.write("INSERT INTO ")
        buf.write(self._table)
        buf.write("(")
        buf.write(",".join(self._columns))
        buf.write(")")

        if self._values_select is not None:
            buf.write(" (")
            build_nested(self._values_select, buf)
            buf.write(")")
        else:
            buf.write(" VALUES ")
            for x, row in enumerate(self._values):
                if x > 0:
                    buf.write(",")
                row.build(buf)

        if self._on_conflict is not None:
            buf.write(" ")
            self._on_conflict.build(buf)

        self._build_returning(buf)


def insert(table: Optional[str] = None) -> InsertStatement:
    """Create a new `INSERT` statement."""
    return InsertStatement(table)
