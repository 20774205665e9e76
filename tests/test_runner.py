"""Tests for the bounded host loop."""

import pytest
from chip8core import VM, assemble, InvalidOpcodeError
from chip8core.headless import FrameRecorder, SilentAudio, ScriptedKeyboard, ConstantNumberSource
from chip8core.logging import VMLogger
from chip8core.runner import run


def make_vm(keyboard):
    return VM(FrameRecorder(), SilentAudio(), keyboard, ConstantNumberSource(),
              logger=VMLogger(log_level="CRITICAL"))


def test_run_stops_at_cycle_limit():
    vm = make_vm(ScriptedKeyboard())
    vm.load_program(assemble([0x1200]))  # Jump to self

    summary = run(vm, 25)

    assert summary.cycles == 25
    assert not summary.exit_requested
    assert vm.state.pc == 0x200


def test_run_stops_on_exit_request():
    vm = make_vm(ScriptedKeyboard(exit_after=3))
    vm.load_program(assemble([0x1200]))

    summary = run(vm, 100, progress=True)

    assert summary.cycles == 3
    assert summary.exit_requested


def test_run_counts_down_program():
    """A small loop decrementing V0 until it reaches zero."""
    vm = make_vm(ScriptedKeyboard())
    vm.load_program(assemble([
        0x6005,  # 200: V0 = 5
        0x70FF,  # 202: V0 -= 1
        0x3000,  # 204: skip if V0 == 0
        0x1202,  # 206: loop
        0x1208,  # 208: halt
    ]))

    run(vm, 16)

    assert vm.state.V[0] == 0
    assert vm.state.pc == 0x208


def test_run_propagates_errors():
    vm = make_vm(ScriptedKeyboard())
    vm.load_program(assemble([0x00E0, 0x5121]))

    with pytest.raises(InvalidOpcodeError):
        run(vm, 10, progress=True)
    assert vm.state.pc == 0x202
