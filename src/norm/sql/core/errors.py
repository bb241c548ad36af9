"""Statement build exceptions.

Every failure raised while rendering a statement derives from SQLBuildError
and carries a stable ErrorKind, so callers (transaction wrappers, migration
runners) can treat them as non-retryable configuration bugs.
"""

from enum import Enum
from typing import Any, Dict, Sequence


class ErrorKind(str, Enum):
    """Enum for statement build failure kinds."""

    INVALID_ARG_NUMBER = "invalid_arg_number"
    EMPTY_WITH_ALIAS = "empty_with_alias"
    INVALID_ARG_TYPE = "invalid_arg_type"
    NESTING_TOO_DEEP = "nesting_too_deep"


class SQLBuildError(Exception):
    """Base error for statement rendering failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)

    def __str__(self) -> str:
        return f"statement: {self.args[0]}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "error_kind": self.kind.value,
            "message": str(self),
        }


class InvalidArgNumberError(SQLBuildError):
    """Placeholder count in a query does not match the number of values."""

    kind = ErrorKind.INVALID_ARG_NUMBER

    def __init__(self, query: str, values: Sequence[Any]):
        self.query = query
        self.values = tuple(values)
        super().__init__(
            f"invalid number of arguments: {query}, {list(self.values)!r}"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["query"] = self.query
        data["placeholders"] = self.query.count("?")
        data["value_count"] = len(self.values)
        return data


class EmptyWithAliasError(SQLBuildError):
    """A WITH clause was configured without an alias."""

    kind = ErrorKind.EMPTY_WITH_ALIAS

    def __init__(self) -> None:
        super().__init__("empty with clause alias")


class InvalidArgTypeError(SQLBuildError):
    """A value has no SQL literal representation."""

    kind = ErrorKind.INVALID_ARG_TYPE

    def __init__(self, value: Any):
        self.value = value
        self.value_type = type(value).__name__
        super().__init__(f"invalid arg type: {self.value_type}, value: {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["value_type"] = self.value_type
        return data


class NestingTooDeepError(SQLBuildError):
    """Nested statements exceed the configured depth limit."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"nested statements exceed max depth of {max_depth}, "
            "check for a statement embedding itself"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["max_depth"] = self.max_depth
        return data
