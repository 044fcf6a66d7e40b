"""CB-prefixed bit operations — field decoding and mnemonic table generation."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from .registers import Register
from . import constants

logger = logging.getLogger(__name__)


class BitOperation(str, Enum):
    # Bits 6-7 of the CB opcode; group 00 holds rotates and shifts.
    BIT = "BIT"
    RES = "RES"
    SET = "SET"

    @property
    def group(self) -> int:
        return _OPERATION_GROUPS[self]

    @classmethod
    def from_opcode(cls, opcode: int) -> BitOperation:
        """Decode the operation from bits 6-7 of a CB-prefixed opcode.

        Raises:
            ValueError: If the opcode belongs to the rotate/shift group.
        """
        group = (opcode >> constants.OPERATION_SHIFT) & constants.OPERATION_MASK
        for operation, operation_group in _OPERATION_GROUPS.items():
            if operation_group == group:
                return operation
        raise ValueError(f"Opcode {opcode:02X} is not a BIT/RES/SET instruction")

    def __str__(self) -> str:
        return self.value


_OPERATION_GROUPS: dict[BitOperation, int] = {
    BitOperation.BIT: 0b01,
    BitOperation.RES: 0b10,
    BitOperation.SET: 0b11,
}


class DecodedInstruction(BaseModel):
    index: int
    operand: Register
    bit: int
    operation: BitOperation = BitOperation.BIT
    cycles: int = constants.REGISTER_OPERAND_CYCLES

    @property
    def mnemonic(self) -> str:
        return f"{self.operation.value} {self.bit} {self.operand.value}"

    def __str__(self) -> str:
        return f"{self.index:X} {self.mnemonic}"


def decode_register(index: int) -> Register:
    return Register.from_code(index & constants.REGISTER_MASK)


def decode_bit(index: int) -> int:
    return (index >> constants.BIT_SHIFT) & constants.BIT_MASK


def operand_cycles(register: Register) -> int:
    """Cycle cost of a bit operation; the (HL) operand costs twice as much."""
    if register.is_memory:
        return constants.MEMORY_OPERAND_CYCLES
    return constants.REGISTER_OPERAND_CYCLES


def decode(index: int, operation: BitOperation = BitOperation.BIT) -> DecodedInstruction:
    """Decode the register and bit fields of *index* into a record."""
    register = decode_register(index)
    return DecodedInstruction(
        index=index,
        operand=register,
        bit=decode_bit(index),
        operation=operation,
        cycles=operand_cycles(register),
    )


def _validate_range(start: int, end: int) -> None:
    if start > end:
        raise ValueError(f"Table range is empty: start {start} > end {end}")
    if start < constants.OPCODE_MIN or end > constants.OPCODE_MAX:
        raise ValueError(
            f"Table range [{start}, {end}] outside opcode space "
            f"[{constants.OPCODE_MIN}, {constants.OPCODE_MAX}]"
        )


def generate_table(
    start: int = constants.BIT_TABLE_START,
    end: int = constants.BIT_TABLE_END,
    operation: BitOperation = BitOperation.BIT,
) -> list[DecodedInstruction]:
    """Decode every opcode in the closed interval [start, end].

    The operation name is applied as given rather than decoded from the
    opcode, so the default range prints BIT for all 65 entries.

    Raises:
        ValueError: If the range is empty or leaves the 8-bit opcode space.
    """
    _validate_range(start, end)
    logger.info("Generating %s table for [%02X, %02X]", operation.value, start, end)
    return [decode(index, operation) for index in range(start, end + 1)]


def operation_range(operation: BitOperation) -> range:
    """Return the CB opcode range occupied by *operation*."""
    first = operation.group << constants.OPERATION_SHIFT
    return range(first, first + (1 << constants.OPERATION_SHIFT))


def build_extended_table() -> dict[int, DecodedInstruction]:
    """Build the BIT/RES/SET part of the CB-prefixed instruction set."""
    table: dict[int, DecodedInstruction] = {}
    for operation in BitOperation:
        for index in operation_range(operation):
            table[index] = decode(index, operation)
    logger.info("Built extended instruction table with %d entries", len(table))
    return table


def format_table(records: list[DecodedInstruction]) -> str:
    """Render one newline-terminated line per record."""
    return "".join(f"{record}\n" for record in records)
