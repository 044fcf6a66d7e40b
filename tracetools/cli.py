"""Console entry points: opcode-tally and bit-table."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .api import dump_bit_table, dump_tally
from . import constants

logger = logging.getLogger(__name__)


def _parse_args(description: str, argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable info logging on stderr",
    )
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    return args


def tally_main(argv: Optional[Sequence[str]] = None) -> int:
    _parse_args(
        f"Count opcode frequencies in {constants.DEFAULT_TRACE_PATH}", argv
    )
    try:
        report = dump_tally(constants.DEFAULT_TRACE_PATH)
    except OSError as exc:
        logger.error("Cannot read trace: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


def bit_table_main(argv: Optional[Sequence[str]] = None) -> int:
    _parse_args("Print the BIT b,r mnemonic table", argv)
    sys.stdout.write(dump_bit_table())
    return 0

