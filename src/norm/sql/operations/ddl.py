"""
SQL data definition statements.

DDL arguments are usually identifiers and type names, so string values are
interpolated unquoted. Pass a pre-quoted string where a literal is needed.

Examples:
    >>> create("INDEX IF NOT EXISTS ? ON ? (?)", "ix_users_created_at", "users", "created_at").render()
    'CREATE INDEX IF NOT EXISTS ix_users_created_at ON users (created_at)'
    >>> alter("TABLE ? ADD COLUMN ? ?", "users", "address", "text").render()
    'ALTER TABLE users ADD COLUMN address text'
"""

from enum import Enum
from typing import Any

from ..core.buffer import Buffer
from ..core.part import Part
from ..core.statement import Statement
from .base import CommentClause


class DDLKeyword(str, Enum):
    """Leading keyword of a data definition statement."""

    CREATE = "CREATE"
    ALTER = "ALTER"
    DROP = "DROP"
    TRUNCATE = "TRUNCATE"


class DDLStatement(CommentClause, Statement):
    """A keyword-prefixed data definition statement."""

    def __init__(self, keyword: DDLKeyword, query: str, *values: Any):
        super().__init__()
        self.keyword = DDLKeyword(keyword)
        self._part = Part(f"{self.keyword.value} {query}", *values)

    def build(self, buf: Buffer) -> None:
        self._build_comments(buf)
        self._part.build_keyword(buf)


def create(query: str, *values: Any) -> DDLStatement:
    """Create a new `CREATE` statement."""
    return DDLStatement(DDLKeyword.CREATE, query, *values)


def alter(query: str, *values: Any) -> DDLStatement:
    """Create a new `ALTER` statement."""
    return DDLStatement(DDLKeyword.ALTER, query, *values)


def drop(query: str, *values: Any) -> DDLStatement:
    """Create a new `DROP` statement."""
    return DDLStatement(DDLKeyword.DROP, query, *values)


def truncate(query: str, *values: Any) -> DDLStatement:
    """Create a new `TRUNCATE` statement."""
    return DDLStatement(DDLKeyword.TRUNCATE, query, *values)
