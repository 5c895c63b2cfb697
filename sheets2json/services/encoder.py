"""Order-preserving JSON serialization for records.

Objects are assembled member by member from each Record's pairs, so the
output follows header order exactly.
"""

from __future__ import annotations

import json
import math
from typing import Sequence

from sheets2json.errors import SerializationError
from sheets2json.models.records import CellValue, Record

# Floats at or above this magnitude render in exponent form
_EXPONENT_THRESHOLD = 1e21

# Characters escaped inside strings so the output can be embedded in HTML
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def format_float(value: float) -> str:
    """Shortest text for a float; integral values drop the trailing ".0"."""
    if math.isfinite(value) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def encode_string(value: str) -> str:
    """JSON string literal with non-ASCII kept and HTML-sensitive characters escaped."""
    text = json.dumps(value, ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def encode_value(value: CellValue) -> str:
    """Return the JSON text for a single cell value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"Cannot encode non-finite number: {value!r}")
        return format_float(value)
    if isinstance(value, str):
        return encode_string(value)
    raise SerializationError(f"Unsupported cell value type: {type(value).__name__}")


def encode_record(record: Record, indent: int | None = None, level: int = 0) -> str:
    """Encode one Record as a JSON object, members in header order.

    With ``indent=None`` the output is compact (``{"a":1,"b":2}``). Otherwise
    each member sits on its own line, nested ``level`` steps deep.
    """
    members = [
        f"{encode_string(key)}:{' ' if indent is not None else ''}{encode_value(value)}"
        for key, value in record.items()
    ]
    if not members:
        return "{}"
    if indent is None:
        return "{" + ",".join(members) + "}"

    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    return "{\n" + ",\n".join(inner + m for m in members) + "\n" + outer + "}"


def encode_record_set(records: Sequence[Record], indent: int | None = 2) -> str:
    """Encode the records as a JSON array of objects."""
    if not records:
        return "[]"
    if indent is None:
        return "[" + ",".join(encode_record(r) for r in records) + "]"

    pad = " " * indent
    objects = [pad + encode_record(r, indent=indent, level=1) for r in records]
    return "[\n" + ",\n".join(objects) + "\n]"

