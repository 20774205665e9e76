"""CHIP-8 stack operations."""

import jax.numpy as jnp
from chip8core.constants import ADDRESS_MASK, STACK_SIZE
from chip8core.errors import StackOverflowError, StackUnderflowError
from chip8core.state import StackState


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack."""
    if int(stack.pointer) >= STACK_SIZE:
        raise StackOverflowError(STACK_SIZE)
    masked_address = jnp.astype(address & ADDRESS_MASK, jnp.uint16)
    new_data = stack.data.at[stack.pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if int(stack.pointer) <= 0:
        raise StackUnderflowError()
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
