"""Tests for CB bit-operation decoding and table generation."""

import pytest
from pydantic import BaseModel

from tracetools.bit_ops import (
    BitOperation,
    DecodedInstruction,
    build_extended_table,
    decode,
    decode_bit,
    decode_register,
    format_table,
    generate_table,
    operation_range,
)
from tracetools.registers import Register


class TestDecode:
    def test_first_entry(self):
        record = decode(64)
        assert record.operand == Register.B
        assert record.bit == 0
        assert str(record) == "40 BIT 0 B"

    def test_last_bit_entry(self):
        record = decode(127)
        assert record.operand == Register.A
        assert record.bit == 7
        assert str(record) == "7F BIT 7 A"

    def test_hl_operand(self):
        record = decode(0x46)
        assert record.operand == Register.HL_INDIRECT
        assert str(record) == "46 BIT 0 (HL)"

    def test_fields_in_range_across_opcode_space(self):
        for index in range(256):
            assert 0 <= decode_register(index).code <= 7
            assert 0 <= decode_bit(index) <= 7
            assert decode_register(index).code == index & 7
            assert decode_bit(index) == (index >> 3) & 7

    def test_cycles(self):
        assert decode(0x7C).cycles == 8
        assert decode(0x7E).cycles == 16

    def test_model_fields_do_not_shadow_base_model(self):
        shadowed = [
            name for name in DecodedInstruction.model_fields if hasattr(BaseModel, name)
        ]
        assert shadowed == []

    def test_mnemonic(self):
        assert decode(0x7C).mnemonic == "BIT 7 H"
        assert decode(0x86, BitOperation.RES).mnemonic == "RES 0 (HL)"


class TestGenerateTable:
    def test_default_table_has_65_records(self):
        assert len(generate_table()) == 65

    def test_default_table_covers_inclusive_range(self):
        records = generate_table()
        assert records[0].index == 64
        assert records[-1].index == 128

    def test_upper_bound_keeps_requested_operation(self):
        assert str(generate_table()[-1]) == "80 BIT 0 B"

    def test_all_records_are_decoded_instructions(self):
        assert all(isinstance(r, DecodedInstruction) for r in generate_table())

    def test_custom_range_and_operation(self):
        records = generate_table(0xC0, 0xC1, BitOperation.SET)
        assert [str(r) for r in records] == ["C0 SET 0 B", "C1 SET 0 C"]

    def test_single_entry_range(self):
        assert len(generate_table(0x50, 0x50)) == 1

    def test_empty_range_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            generate_table(10, 5)

    def test_out_of_opcode_space_rejected(self):
        with pytest.raises(ValueError, match="outside"):
            generate_table(0xF0, 0x100)


class TestFormatTable:
    def test_default_table_text(self):
        lines = format_table(generate_table()).splitlines()
        assert len(lines) == 65
        assert lines[0] == "40 BIT 0 B"
        assert lines[63] == "7F BIT 7 A"
        assert "46 BIT 0 (HL)" in lines

    def test_lines_are_newline_terminated(self):
        text = format_table(generate_table(0x40, 0x41))
        assert text == "40 BIT 0 B\n41 BIT 0 C\n"


class TestBitOperation:
    def test_from_opcode(self):
        assert BitOperation.from_opcode(0x40) == BitOperation.BIT
        assert BitOperation.from_opcode(0xBF) == BitOperation.RES
        assert BitOperation.from_opcode(0xFF) == BitOperation.SET

    def test_rotate_group_rejected(self):
        with pytest.raises(ValueError):
            BitOperation.from_opcode(0x1F)

    def test_operation_ranges(self):
        assert operation_range(BitOperation.BIT) == range(0x40, 0x80)
        assert operation_range(BitOperation.RES) == range(0x80, 0xC0)
        assert operation_range(BitOperation.SET) == range(0xC0, 0x100)


class TestExtendedTable:
    def test_covers_bit_res_set(self):
        table = build_extended_table()
        assert len(table) == 192
        assert min(table) == 0x40
        assert max(table) == 0xFF

    def test_operation_matches_opcode_group(self):
        table = build_extended_table()
        for index, record in table.items():
            assert record.index == index
            assert record.operation == BitOperation.from_opcode(index)

    def test_known_entries(self):
        table = build_extended_table()
        assert str(table[0x7C]) == "7C BIT 7 H"
        assert str(table[0x87]) == "87 RES 0 A"
        assert str(table[0xFE]) == "FE SET 7 (HL)"
        assert table[0xFE].cycles == 16
