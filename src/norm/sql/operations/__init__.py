"""Statement builders."""

from .ddl import DDLKeyword, DDLStatement, alter, create, drop, truncate
from .delete import DeleteStatement, delete
from .insert import InsertStatement, insert
from .select import Join, Order, SelectStatement, select
from .update import UpdateStatement, update

__all__ = [
    "DDLKeyword",
    "DDLStatement",
    "create",
    "alter",
    "drop",
    "truncate",
    "DeleteStatement",
    "delete",
    "InsertStatement",
    "insert",
    "Join",
    "Order",
    "SelectStatement",
    "select",
    "UpdateStatement",
    "update",
]
