"""Core statement rendering package."""

from .buffer import Buffer, new_buffer
from .errors import (
    EmptyWithAliasError,
    ErrorKind,
    InvalidArgNumberError,
    InvalidArgTypeError,
    NestingTooDeepError,
    SQLBuildError,
)
from .part import Part, build_where_in
from .record import camel_to_snake, record_columns
from .statement import Statement, Union, With, build_nested, build_where, write_arg
from .values import Valuer, encode_value, write_value

__all__ = [
    "Buffer",
    "new_buffer",
    "ErrorKind",
    "SQLBuildError",
    "InvalidArgNumberError",
    "EmptyWithAliasError",
    "InvalidArgTypeError",
    "NestingTooDeepError",
    "Part",
    "build_where_in",
    "camel_to_snake",
    "record_columns",
    "Statement",
    "With",
    "Union",
    "build_nested",
    "build_where",
    "write_arg",
    "Valuer",
    "encode_value",
    "write_value",
]
