"""Pure functions for tallying opcode frequencies over trace lines."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from .tally_types import OpcodeCount, TallyConfig, TallyReport
from . import constants

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = TallyConfig()


def extract_opcode_field(
    line: str, config: TallyConfig = _DEFAULT_CONFIG
) -> Optional[str]:
    """Return the fixed-width opcode field of a trace line.

    NUL bytes and the trailing line terminator are removed first.

    Returns:
        The field text, or None when the line is too short to hold it.
    """
    cleaned = line.replace(constants.NUL_CHAR, "").rstrip("\r\n")
    if len(cleaned) < config.field_end:
        return None
    return cleaned[config.field_start : config.field_end]


def count_opcodes(
    lines: Iterable[str], config: TallyConfig = _DEFAULT_CONFIG
) -> TallyReport:
    """Count opcode fields across *lines*, skipping sentinel lines.

    Args:
        lines: Trace lines, with or without line terminators.
        config: Column layout and sentinel value.

    Returns:
        A TallyReport whose counts plus skipped lines equal the line total.
    """
    counter: Counter[str] = Counter()
    skipped = 0
    short = 0
    total = 0
    for line in lines:
        total += 1
        field = extract_opcode_field(line, config)
        if field is None:
            if short == 0:
                logger.warning(
                    "Line %d shorter than %d characters; counting under empty key",
                    total,
                    config.field_end,
                )
            short += 1
            counter[constants.SHORT_LINE_KEY] += 1
            continue
        if field == config.sentinel:
            skipped += 1
            continue
        counter[field] += 1

    logger.info(
        "Tallied %d lines: %d distinct opcodes, %d skipped, %d short",
        total,
        len(counter),
        skipped,
        short,
    )
    return TallyReport(
        counts=dict(counter),
        skipped_lines=skipped,
        short_lines=short,
        total_lines=total,
    )


def rank_counts(counts: dict[str, int]) -> list[OpcodeCount]:
    """Sort counts ascending by frequency, breaking ties by opcode."""
    return [
        OpcodeCount(opcode=opcode, count=count)
        for opcode, count in sorted(counts.items(), key=lambda item: (item[1], item[0]))
    ]


def format_counts(ranked: list[OpcodeCount]) -> str:
    """Render one ``"<opcode> : <count>"`` line per entry."""
    return "".join(f"{entry}\n" for entry in ranked)
