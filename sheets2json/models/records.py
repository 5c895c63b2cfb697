"""Pydantic models for spreadsheet rows converted to ordered records."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

# Scalar types a Sheets API cell can carry. None is the empty variant.
CellValue = Optional[Union[str, bool, int, float]]

CellGrid = Sequence[Sequence[CellValue]]


class Record(BaseModel):
    """One data row as an ordered sequence of (header, value) pairs.

    Key order is the header's left-to-right order; it never depends on
    the order of a mapping.
    """

    model_config = ConfigDict(frozen=True)

    pairs: tuple[tuple[str, CellValue], ...] = ()

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def values(self) -> list[CellValue]:
        return [value for _, value in self.pairs]

    def items(self) -> list[tuple[str, CellValue]]:
        return list(self.pairs)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.pairs)

    def __getitem__(self, key: str) -> CellValue:
        for k, value in self.pairs:
            if k == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


RecordSet = list[Record]
