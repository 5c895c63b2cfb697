"""Convert a raw cell grid into header-ordered records.

The first row of the grid supplies the field names; every later row becomes
one Record whose keys follow the header's left-to-right order.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

from sheets2json.models.records import CellGrid, CellValue, Record, RecordSet

# Shortest %g form switches to an exponent outside 1e-4 <= |x| < 1e6
_MIN_FIXED_EXPONENT = -4
_MAX_FIXED_EXPONENT = 6


def format_header_float(value: float) -> str:
    """Render a float in the shortest %g form used for display.

    ``2024.0`` -> ``"2024"``, ``1000000.0`` -> ``"1e+06"``,
    ``1e-05`` -> ``"1e-05"``, ``0.5`` -> ``"0.5"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    prefix = "-" if sign else ""
    if not any(digits):
        return prefix + "0"

    decimal_exponent = len(digits) + exponent - 1
    if _MIN_FIXED_EXPONENT <= decimal_exponent < _MAX_FIXED_EXPONENT:
        return format(number, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "+" if decimal_exponent >= 0 else "-"
    return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"


def stringify_header_cell(value: CellValue) -> str:
    """Render a header cell the way the sheet displays it.

    Strings pass through, booleans become ``true``/``false`` and floats use
    ``format_header_float``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_header_float(value)
    return str(value)


def build_record(header: Sequence[str], row: Sequence[CellValue]) -> Record:
    """Build one Record from a data row, padding missing trailing cells with ""."""
    positions: dict[str, int] = {}
    pairs: list[tuple[str, CellValue]] = []
    for i, key in enumerate(header):
        value = row[i] if i < len(row) else ""
        if key in positions:
            # Duplicate label: first position, last value
            pairs[positions[key]] = (key, value)
            continue
        positions[key] = len(pairs)
        pairs.append((key, value))
    return Record(pairs=tuple(pairs))


def build_record_set(grid: CellGrid) -> RecordSet:
    """Turn a cell grid into one Record per data row, in source order.

    An empty grid and a header-only grid both yield an empty list.
    """
    if not grid:
        return []

    header = [stringify_header_cell(cell) for cell in grid[0]]
    return [build_record(header, row) for row in grid[1:]]
