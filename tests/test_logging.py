"""Tests for console logging."""

from chip8core.logging import ConsoleLogger, VMLogger


def test_level_filtering(capsys):
    logger = ConsoleLogger("Test", log_level="WARNING", use_colors=False, show_timestamps=False)

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[ WARNING][Test] shown" in out


def test_level_above_error_silences(capsys):
    logger = VMLogger(log_level="CRITICAL", use_colors=False)

    logger.log_fault(0x200, RuntimeError("boom"))
    logger.log_instruction(0x200, 0x00E0)

    assert capsys.readouterr().out == ""
    assert logger.fault_count == 1
    assert not logger.is_enabled_for("ERROR")


def test_instruction_trace(capsys):
    logger = VMLogger(log_level="DEBUG", use_colors=False, show_timestamps=False)

    logger.log_instruction(0x200, 0x00E0)

    assert "pc=0x200 opcode=0x00E0" in capsys.readouterr().out


def test_fault_counter(capsys):
    logger = VMLogger(log_level="ERROR", use_colors=False, show_timestamps=False)

    logger.log_fault(0x2A4, RuntimeError("boom"))

    assert logger.fault_count == 1
    assert "pc=0x2A4" in capsys.readouterr().out
