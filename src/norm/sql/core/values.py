"""
SQL literal encoding.

Converts Python values into the literal text inlined into statements.
Nested statements are not handled here; see norm.sql.core.statement.write_arg.

Examples:
    >>> encode_value("O'Brien")
    "'O''Brien'"
    >>> encode_value(b"\\x01\\x02")
    "'\\\\x0102'"
    >>> encode_value("users", keyword=True)
    'users'
"""

import math
import numbers
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from .buffer import Buffer, new_buffer
from .errors import InvalidArgTypeError


@runtime_checkable
class Valuer(Protocol):
    """Object that converts itself into a native value before encoding."""

    def sql_value(self) -> Any: ...


def quote_string(value: str) -> str:
    """Quote a string literal, doubling embedded single quotes."""
    return "'" + value.replace("'", "''") + "'"


def quote_bytes(value: bytes) -> str:
    """Quote bytes as a Postgres bytea hex literal."""
    return "'\\x" + value.hex() + "'"


def format_float(value: float) -> str:
    """
    Format a float with the fewest digits that round-trip, never in
    exponent notation.

    Examples:
        >>> format_float(1.0)
        '1'
        >>> format_float(1e16)
        '10000000000000000'
        >>> format_float(1e-7)
        '0.0000001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as a quoted RFC 3339 literal with microseconds.

    The layout is always 'YYYY-MM-DDTHH:MM:SS.ffffff' followed by 'Z' for a
    zero offset or '+HH:MM' / '-HH:MM'. Naive datetimes are rendered as UTC.
    """
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond:06d}"
    )

    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return quote_string(text + "Z")

    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    zone = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        zone += f":{seconds:02d}"
    return quote_string(text + zone)


def _is_stringer(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def write_value(buf: Buffer, value: Any, keyword: bool = False) -> None:
    """
    Write the SQL literal for value into buf.

    Args:
        buf: Target buffer
        value: Value to encode
        keyword: Emit strings verbatim instead of quoting them

    Raises:
        InvalidArgTypeError: If the value has no literal representation
    """
    # unwrap once; a Valuer returning another Valuer is not unwrapped again
    if isinstance(value, Valuer):
        value = value.sql_value()

    if value is None:
        buf.write("null")
    elif isinstance(value, bool):
        buf.write("true" if value else "false")
    elif isinstance(value, numbers.Integral):
        buf.write(str(int(value)))
    elif isinstance(value, float):
        buf.write(format_float(value))
    elif isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        buf.write(format_float(float(value)))
    elif isinstance(value, (bytes, bytearray, memoryview)):
        buf.write(quote_bytes(bytes(value)))
    elif isinstance(value, str):
        buf.write(value if keyword else quote_string(value))
    elif isinstance(value, datetime):
        buf.write(format_timestamp(value))
    elif _is_stringer(value):
        buf.write(quote_string(str(value)))
    else:
        raise InvalidArgTypeError(value)


def encode_value(value: Any, keyword: bool = False) -> str:
    """Return the SQL literal for a single value."""
    buf = new_buffer()
    write_value(buf, value, keyword)
    return buf.getvalue()
