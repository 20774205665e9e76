"""Tests for ALU operations (8xxx)."""

import pytest
from chip8core import execute, InvalidOpcodeError
from conftest import set_registers


class TestBasicALU:
    """Test basic ALU operations."""

    def test_alu_set_basic(self, fresh_state):
        """8XY0 - Set VX = VY."""
        state = set_registers(fresh_state, V1=0x42, V2=0x99)

        state = execute(state, 0x8120)  # V1 = V2

        assert state.V[1] == 0x99
        assert state.V[2] == 0x99

    def test_alu_or_basic(self, fresh_state):
        """8XY1 - OR operation."""
        state = set_registers(fresh_state, V1=0xF0, V2=0x0F)

        state = execute(state, 0x8121)  # V1 |= V2

        assert state.V[1] == 0xFF
        assert state.V[15] == 0

    def test_alu_and_basic(self, fresh_state):
        """8XY2 - AND operation."""
        state = set_registers(fresh_state, V1=0xF0, V2=0xF1)

        state = execute(state, 0x8122)  # V1 &= V2

        assert state.V[1] == 0xF0

    def test_alu_xor_basic(self, fresh_state):
        """8XY3 - XOR operation."""
        state = set_registers(fresh_state, V1=0xFF, V2=0xF0)

        state = execute(state, 0x8123)  # V1 ^= V2

        assert state.V[1] == 0x0F

    def test_logic_ops_leave_flag_alone(self, fresh_state):
        """8XY1/2/3 - VF is not touched by bitwise operations."""
        for op in (0x1, 0x2, 0x3):
            state = set_registers(fresh_state, V1=0xAA, V2=0x55, VF=0x07)
            state = execute(state, 0x8120 | op)
            assert state.V[15] == 0x07, f"8XY{op:X} modified VF"


class TestALUArithmetic:
    """Test arithmetic ALU operations."""

    def test_alu_add_with_carry(self, fresh_state):
        """8XY4 - 200 + 100 wraps to 44 and sets VF."""
        state = set_registers(fresh_state, V0=0xC8, V1=0x64)

        state = execute(state, 0x8014)  # V0 += V1

        assert state.V[0] == 0x2C
        assert state.V[15] == 1

    def test_alu_add_no_carry_keeps_stale_flag(self, fresh_state):
        """8XY4 - Without carry VF keeps its previous value."""
        state = set_registers(fresh_state, V1=0x10, V2=0x20, VF=0x05)

        state = execute(state, 0x8124)  # V1 += V2

        assert state.V[1] == 0x30
        assert state.V[15] == 0x05

    def test_alu_add_no_carry_from_clear_flag(self, fresh_state):
        """8XY4 - Without carry a clear VF stays clear."""
        state = set_registers(fresh_state, V1=0x10, V2=0x20)

        state = execute(state, 0x8124)

        assert state.V[15] == 0

    def test_alu_sub_xy_with_borrow(self, fresh_state):
        """8XY5 - Subtract VX - VY, with borrow."""
        state = set_registers(fresh_state, V3=0x10, V4=0x30)

        state = execute(state, 0x8345)  # V3 -= V4

        assert state.V[3] == 0xE0  # 16 - 48 = -32 → 224
        assert state.V[15] == 1

    def test_alu_sub_xy_no_borrow_keeps_stale_flag(self, fresh_state):
        """8XY5 - Without borrow VF keeps its previous value."""
        state = set_registers(fresh_state, V1=0x30, V2=0x10, VF=0x09)

        state = execute(state, 0x8125)  # V1 -= V2

        assert state.V[1] == 0x20
        assert state.V[15] == 0x09

    def test_alu_sub_yx_no_borrow(self, fresh_state):
        """8XY7 - V4 = V5 - V4 = 0x20 - 0x11, no borrow clears VF."""
        state = set_registers(fresh_state, V4=0x11, V5=0x20, VF=0x01)

        state = execute(state, 0x8457)

        assert state.V[4] == 0x0F
        assert state.V[15] == 0

    def test_alu_sub_yx_with_borrow(self, fresh_state):
        """8XY7 - V4 = V5 - V4 = 0x11 - 0x20 wraps and sets VF."""
        state = set_registers(fresh_state, V4=0x20, V5=0x11)

        state = execute(state, 0x8457)

        assert state.V[4] == 0xF1
        assert state.V[15] == 1


class TestALUShifts:
    """Test shift operations."""

    def test_shift_right_even(self, fresh_state):
        """8XY6 - Shift right, even number."""
        state = set_registers(fresh_state, V1=0x04, V2=0xFF)  # V2 ignored

        state = execute(state, 0x8126)  # V1 >>= 1

        assert state.V[1] == 0x02
        assert state.V[15] == 0

    def test_shift_right_odd(self, fresh_state):
        """8XY6 - Shift right, odd number."""
        state = set_registers(fresh_state, V3=0x05, V4=0xFF)

        state = execute(state, 0x8346)  # V3 >>= 1

        assert state.V[3] == 0x02
        assert state.V[15] == 1  # LSB was 1

    def test_shift_left_overflow(self, fresh_state):
        """8XYE - Shift left with MSB set."""
        state = set_registers(fresh_state, V3=0x81, V4=0xFF)

        state = execute(state, 0x834E)  # V3 <<= 1

        assert state.V[3] == 0x02  # 129 << 1 = 258 → 2
        assert state.V[15] == 1

    def test_shift_left_no_overflow(self, fresh_state):
        """8XYE - Shift left with MSB clear."""
        state = set_registers(fresh_state, V3=0x41, VF=1)

        state = execute(state, 0x834E)

        assert state.V[3] == 0x82
        assert state.V[15] == 0


class TestALUEdgeCases:
    """Test edge cases and comprehensive scenarios."""

    def test_alu_undefined_operations(self, fresh_state):
        """Undefined 8XYN selectors are invalid opcodes."""
        undefined_ops = [0x8, 0x9, 0xA, 0xB, 0xC, 0xD, 0xF]

        for op in undefined_ops:
            instruction = 0x8120 | op
            with pytest.raises(InvalidOpcodeError) as excinfo:
                execute(fresh_state, instruction)
            assert excinfo.value.opcode == instruction

    def test_alu_self_operations(self, fresh_state):
        """Test operations where VX and VY are the same register."""
        state = set_registers(fresh_state, V5=0xAA)

        state = execute(state, 0x8553)  # V5 ^= V5
        assert state.V[5] == 0x00, "Self XOR should result in 0"

        state = set_registers(state, V5=0x80)
        state = execute(state, 0x8554)  # V5 += V5
        assert state.V[5] == 0x00, "Self ADD should wrap on overflow"
        assert state.V[15] == 1, "Self ADD should set carry flag"

    def test_result_wins_when_destination_is_flag(self, fresh_state):
        """8FY4 - The sum lands in VF after the carry flag is written."""
        state = set_registers(fresh_state, VF=0x10, V1=0x02)

        state = execute(state, 0x8F14)  # VF += V1

        assert state.V[15] == 0x12
