"""
Column mapping for record objects.

Maps a record (mapping, dataclass instance or pydantic model) to a
``{column: value}`` dict used by InsertStatement.record().

Column naming rules:
- Mappings: keys as-is
- Dataclasses: ``field(metadata={"db": "name"})``, ``"-"`` skips the field,
  otherwise the snake_case form of the field name
- Pydantic models: the field alias, otherwise the snake_case field name
- Private fields (leading underscore, pydantic private attributes) are
  never mapped
"""

import dataclasses
import re
from collections.abc import Mapping
from typing import Any, Dict

from pydantic import BaseModel

SKIP_TAG = "-"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def camel_to_snake(name: str) -> str:
    """
    Convert a camelCase or PascalCase name to snake_case.

    Examples:
        >>> camel_to_snake("CreatedAt")
        'created_at'
        >>> camel_to_snake("HTTPServerID")
        'http_server_id'
        >>> camel_to_snake("already_snake")
        'already_snake'
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def record_columns(record: Any) -> Dict[str, Any]:
    """
    Return the column/value mapping for a record.

    Raises:
        TypeError: If the record is not a mapping, dataclass instance or
            pydantic model
    """
    if isinstance(record, Mapping):
        return {str(key): value for key, value in record.items()}

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        columns: Dict[str, Any] = {}
        for field in dataclasses.fields(record):
            if field.name.startswith("_"):
                continue
            tag = field.metadata.get("db") or camel_to_snake(field.name)
            if tag == SKIP_TAG:
                continue
            columns.setdefault(tag, getattr(record, field.name))
        return columns

    if isinstance(record, BaseModel):
        columns = {}
        for name, field in type(record).model_fields.items():
            tag = field.alias or camel_to_snake(name)
            columns.setdefault(tag, getattr(record, name))
        return columns

    raise TypeError(
        f"record must be a mapping, dataclass instance or pydantic model, "
        f"got: {type(record).__name__}"
    )
