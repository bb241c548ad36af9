"""
Statement protocol and shared clauses.

Every fragment and builder implements Statement, which makes them freely
nestable: a statement can be a value argument (rendered as a parenthesized
subquery), a CTE body or the right-hand side of a UNION.
"""

from abc import ABC, abstractmethod
from contextvars import ContextVar
from typing import Any, Sequence

from norm.config import get_settings
from norm.utils.logging import get_logger

from .buffer import Buffer, new_buffer
from .errors import EmptyWithAliasError, NestingTooDeepError, SQLBuildError
from .values import write_value

logger = get_logger(__name__)

_nesting_depth: ContextVar[int] = ContextVar("norm_nesting_depth", default=0)


class Statement(ABC):
    """Base class for everything that renders into SQL text."""

    @abstractmethod
    def build(self, buf: Buffer) -> None:
        """
        Build the statement into the given buffer.

        Raises:
            SQLBuildError: On the first invalid clause; buf content is then
                not valid SQL
        """

    def render(self) -> str:
        """Build the statement and return the resulting query string."""
        buf = new_buffer()
        try:
            self.build(buf)
        except SQLBuildError as e:
            logger.error(
                "sql.render_failed", statement=type(self).__name__, **e.to_dict()
            )
            raise

        query = buf.getvalue()
        if get_settings().log_sql:
            logger.debug(
                "sql.rendered",
                statement=type(self).__name__,
                length=len(query),
                sql=query,
            )
        else:
            logger.debug(
                "sql.rendered", statement=type(self).__name__, length=len(query)
            )
        return query


def build_nested(stmt: Statement, buf: Buffer) -> None:
    """
    Build a statement embedded inside another one.

    Tracks the nesting depth for the current context and fails once it
    exceeds the configured limit, so a statement that (transitively) contains
    itself raises NestingTooDeepError instead of exhausting the stack.
    """
    depth = _nesting_depth.get() + 1
    max_depth = get_settings().max_nesting_depth
    if depth > max_depth:
        raise NestingTooDeepError(max_depth)

    token = _nesting_depth.set(depth)
    try:
        stmt.build(buf)
    finally:
        _nesting_depth.reset(token)


def write_arg(buf: Buffer, arg: Any, keyword: bool = False) -> None:
    """Write a value argument; statements become parenthesized subqueries."""
    if isinstance(arg, Statement):
        buf.write("(")
        build_nested(arg, buf)
        buf.write(")")
    else:
        write_value(buf, arg, keyword)


def build_where(buf: Buffer, where: Sequence[Statement]) -> None:
    """Build a `WHERE` clause, with subsequent conditions `AND`ed."""
    for x, cond in enumerate(where):
        buf.write(" WHERE " if x == 0 else " AND ")
        cond.build(buf)


class With(Statement):
    """A `WITH [RECURSIVE] alias AS (stmt)` clause."""

    def __init__(self, alias: str, stmt: Statement, recursive: bool = False):
        self.alias = alias
        self.stmt = stmt
        self.recursive = recursive

    def build(self, buf: Buffer) -> None:
        if not self.alias:
            raise EmptyWithAliasError()

        buf.write("WITH RECURSIVE " if self.recursive else "WITH ")
        buf.write(self.alias)
        buf.write(" AS (")
        build_nested(self.stmt, buf)
        buf.write(")")


class Union(Statement):
    """A `UNION [ALL] stmt` clause."""

    def __init__(self, stmt: Statement, all: bool = False):
        self.stmt = stmt
        self.all = all

    def build(self, buf: Buffer) -> None:
        buf.write("UNION ALL " if self.all else "UNION ")
        build_nested(self.stmt, buf)
