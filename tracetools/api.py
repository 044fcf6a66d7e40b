"""Composable API functions for the trace tools.

Each function corresponds to a CLI workflow (opcode-tally, bit-table)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .bit_ops import (
    BitOperation,
    DecodedInstruction,
    build_extended_table,
    format_table,
    generate_table,
)
from .tally import count_opcodes, format_counts, rank_counts
from .tally_types import TallyConfig, TallyReport
from . import constants

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def tally_file(
    path: PathLike = constants.DEFAULT_TRACE_PATH,
    config: TallyConfig = TallyConfig(),
) -> TallyReport:
    """Read a trace file and count its opcode fields.

    Args:
        path: Trace file written by the emulator's verbose mode.
        config: Column layout and sentinel value.

    Returns:
        A TallyReport for the whole file.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    logger.info("Tallying opcodes in %s", path)
    with open(path, encoding="utf-8", errors="replace", newline="\n") as trace:
        return count_opcodes(trace, config)


def dump_tally(
    path: PathLike = constants.DEFAULT_TRACE_PATH,
    config: TallyConfig = TallyConfig(),
) -> str:
    """Tally a trace file and return the ascending frequency report.

    Returns:
        One ``"<opcode> : <count>"`` line per distinct opcode.
    """
    report = tally_file(path, config)
    return format_counts(rank_counts(report.counts))


def bit_table(
    start: int = constants.BIT_TABLE_START,
    end: int = constants.BIT_TABLE_END,
    operation: BitOperation = BitOperation.BIT,
) -> list[DecodedInstruction]:
    """Decode every opcode in [start, end] as *operation*."""
    return generate_table(start, end, operation)


def dump_bit_table(
    start: int = constants.BIT_TABLE_START,
    end: int = constants.BIT_TABLE_END,
    operation: BitOperation = BitOperation.BIT,
) -> str:
    """Return the mnemonic table as text, one line per opcode."""
    return format_table(bit_table(start, end, operation))


def extended_instruction_table() -> dict[int, DecodedInstruction]:
    """Return the BIT/RES/SET instructions keyed by CB opcode."""
    return build_extended_table()


def dump_extended_table() -> str:
    table = extended_instruction_table()
    return format_table([table[index] for index in sorted(table)])
