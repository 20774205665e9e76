"""CHIP-8 ALU operations (8xxx).

Every operation maps ``(vx, vy, vf)`` to ``(result, vf)``. The flag is written
before the result, so ``8FY_`` instructions leave the result in VF.
"""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.constants import FLAG_REGISTER
from chip8core.errors import InvalidOpcodeError
from chip8core.peripherals import Devices


def alu_set(vx, vy, vf):
    """8XY0 - Set: VX = VY."""
    return vy, vf


def alu_or(vx, vy, vf):
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, vf


def alu_and(vx, vy, vf):
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, vf


def alu_xor(vx, vy, vf):
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, vf


def alu_add(vx, vy, vf):
    """8XY4 - Add: VX += VY, VF = 1 on carry.

    Without a carry VF keeps whatever it held before.
    """
    result = jnp.astype(vx, jnp.int32) + vy
    carry = result > 0xFF
    return result & 0xFF, jnp.where(carry, 1, vf)


def alu_sub_xy(vx, vy, vf):
    """8XY5 - Subtract: VX -= VY, VF = 1 on borrow.

    Without a borrow VF keeps whatever it held before.
    """
    borrow = vx < vy
    result = (jnp.astype(vx, jnp.int32) - vy) & 0xFF
    return result, jnp.where(borrow, 1, vf)


def alu_shift_right(vx, vy, vf):
    """8XY6 - Shift right: VX >>= 1, VF = shifted out bit."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx, vy, vf):
    """8XY7 - Subtract: VX = VY - VX, VF = 1 on borrow else 0."""
    borrow = vy < vx
    result = (jnp.astype(vy, jnp.int32) - vx) & 0xFF
    return result, jnp.where(borrow, 1, 0)


def alu_shift_left(vx, vy, vf):
    """8XYE - Shift left: VX <<= 1, VF = shifted out bit."""
    shifted_bit = (vx & 0x80) >> 7
    result = (jnp.astype(vx, jnp.int32) << 1) & 0xFF
    return result, shifted_bit


ALU_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction,
                          devices: Optional[Devices] = None) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        raise InvalidOpcodeError(instruction.raw)

    vx = state.V[instruction.x]
    vy = state.V[instruction.y]
    vf = state.V[FLAG_REGISTER]

    result, new_vf = operation(vx, vy, vf)

    new_V = state.V.at[FLAG_REGISTER].set(jnp.astype(new_vf, jnp.uint8))
    new_V = new_V.at[instruction.x].set(jnp.astype(result, jnp.uint8))
    return state.replace(V=new_V)
