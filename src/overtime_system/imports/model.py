from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..core.enums import RowStatus

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedRow(Generic[T]):
    """One pasted line after validation (preview row)."""

    status: RowStatus
    original_line: str
    data: Optional[T] = None
    error: Optional[str] = None
    employee_name: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == RowStatus.VALID


def valid_rows(rows: list[ParsedRow[T]]) -> list[T]:
    return [r.data for r in rows if r.is_valid and r.data is not None]


def invalid(line: str, error: str) -> ParsedRow:
    return ParsedRow(status=RowStatus.INVALID, original_line=line, error=error)


def split_lines(text: str) -> list[str]:
    """Non-blank lines of a pasted block."""
    return [line for line in (text or "").strip().splitlines() if line.strip()]
