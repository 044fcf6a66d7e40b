"""CPU register identifiers addressed by the 3-bit register field."""

from __future__ import annotations

from enum import Enum


class Register(str, Enum):
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    H = "H"
    L = "L"
    HL_INDIRECT = "(HL)"
    A = "A"

    @property
    def code(self) -> int:
        return _REGISTER_ORDER.index(self)

    @property
    def is_memory(self) -> bool:
        """True for the memory operand addressed through HL."""
        return self is Register.HL_INDIRECT

    @classmethod
    def from_code(cls, code: int) -> Register:
        """Return the register selected by a 3-bit register field.

        Raises:
            ValueError: If *code* is outside [0, 7].
        """
        if not 0 <= code < len(_REGISTER_ORDER):
            raise ValueError(f"Register code {code} out of range [0, 7]")
        return _REGISTER_ORDER[code]

    def __str__(self) -> str:
        return self.value


# Encoding order of the register field: 000=B ... 110=(HL), 111=A.
_REGISTER_ORDER: tuple[Register, ...] = (
    Register.B,
    Register.C,
    Register.D,
    Register.E,
    Register.H,
    Register.L,
    Register.HL_INDIRECT,
    Register.A,
)
