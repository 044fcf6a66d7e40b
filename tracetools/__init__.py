"""LR35902 trace tools: opcode tally and bit-operation mnemonic tables."""

from .api import (  # noqa: F401
    tally_file,
    dump_tally,
    bit_table,
    dump_bit_table,
    extended_instruction_table,
    dump_extended_table,
)
