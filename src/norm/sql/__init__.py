"""
SQL module for composable statement generation.

This module provides chainable builders for SELECT, INSERT, UPDATE, DELETE
and DDL statements. Values are interpolated into `?` placeholders as SQL
literals and statements nest freely as subqueries, CTEs and unions.
"""

from .core.buffer import Buffer
from .core.errors import (
    EmptyWithAliasError,
    ErrorKind,
    InvalidArgNumberError,
    InvalidArgTypeError,
    NestingTooDeepError,
    SQLBuildError,
)
from .core.part import Part
from .core.statement import Statement, Union, With
from .core.values import Valuer, encode_value
from .operations import (
    DDLStatement,
    DeleteStatement,
    InsertStatement,
    Join,
    SelectStatement,
    UpdateStatement,
    alter,
    create,
    delete,
    drop,
    insert,
    select,
    truncate,
    update,
)

__all__ = [
    "Buffer",
    "ErrorKind",
    "SQLBuildError",
    "InvalidArgNumberError",
    "EmptyWithAliasError",
    "InvalidArgTypeError",
    "NestingTooDeepError",
    "Part",
    "Statement",
    "With",
    "Union",
    "Valuer",
    "encode_value",
    "SelectStatement",
    "InsertStatement",
    "UpdateStatement",
    "DeleteStatement",
    "DDLStatement",
    "Join",
    "select",
    "insert",
    "update",
    "delete",
    "create",
    "alter",
    "drop",
    "truncate",
]
