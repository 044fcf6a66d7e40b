"""Opcode tally data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, NonNegativeInt

from . import constants


@dataclass(frozen=True)
class TallyConfig:
    """Groups the fixed-column layout of a trace line."""

    field_start: int = constants.OPCODE_FIELD_START
    field_width: int = constants.OPCODE_FIELD_WIDTH
    sentinel: str = constants.HEADER_SENTINEL

    @property
    def field_end(self) -> int:
        return self.field_start + self.field_width


class OpcodeCount(BaseModel):
    opcode: str
    count: NonNegativeInt

    def __str__(self) -> str:
        return f"{self.opcode} : {self.count}"


class TallyReport(BaseModel):
    """Result of one pass over a trace.

    Short lines are counted under the empty key, so every line that is not
    a sentinel line contributes to ``counts``.
    """

    counts: dict[str, NonNegativeInt] = {}
    skipped_lines: NonNegativeInt = 0
    short_lines: NonNegativeInt = 0
    total_lines: NonNegativeInt = 0

    @property
    def counted_lines(self) -> int:
        return sum(self.counts.values())
