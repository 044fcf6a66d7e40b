"""Named constants — eliminates magic strings and offsets across the codebase."""

from __future__ import annotations

DEFAULT_TRACE_PATH = "out.txt"

# Trace lines are written as "%04X : %02X ..." so the opcode byte sits at columns 7-8.
OPCODE_FIELD_START = 7
OPCODE_FIELD_WIDTH = 2

# Columns 7-8 of the "ADDR : instruction" header line.
HEADER_SENTINEL = "in"

SHORT_LINE_KEY = ""

NUL_CHAR = "\x00"

REGISTER_MASK = 0x7
BIT_SHIFT = 3
BIT_MASK = 0x7
OPERATION_SHIFT = 6
OPERATION_MASK = 0x3

BIT_TABLE_START = 64
BIT_TABLE_END = 128

OPCODE_MIN = 0x00
OPCODE_MAX = 0xFF

REGISTER_OPERAND_CYCLES = 8
MEMORY_OPERAND_CYCLES = 16
