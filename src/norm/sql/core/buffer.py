"""
Write buffer contract for building statements.

Builders only ever append to the buffer and read the accumulated text once
at the end, so io.StringIO fits as-is.
"""

import io
from typing import Protocol, runtime_checkable


@runtime_checkable
class Buffer(Protocol):
    """Append-only text sink consumed by Statement.build()."""

    def write(self, s: str) -> int: ...
    def getvalue(self) -> str: ...


def new_buffer() -> Buffer:
    """Return an empty buffer for a single render."""
    return io.StringIO()
