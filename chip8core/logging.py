"""Console logging utilities for the CHIP-8 interpreter.

This module provides a small levelled console logger, a VM-flavoured logger
that knows how to report programs, instructions and faults, and a tqdm
progress bar for host loops that run many cycles.
"""

import time
import sys
from typing import Any, Callable, Dict, Optional, Tuple

from tqdm import tqdm

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ANSI colour per level, only used on a terminal
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
RESET = "\033[0m"


class ConsoleLogger:
    """Levelled console logger printing ``[time][LEVEL][name] message`` lines.

    Levels above ERROR (e.g. ``"CRITICAL"``) silence the logger entirely.
    """

    def __init__(
        self,
        name: str = "Chip8",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.threshold = LEVELS.index(self.log_level) if self.log_level in LEVELS else len(LEVELS)
        self.use_colors = use_colors and sys.stdout.isatty()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def is_enabled_for(self, level: str) -> bool:
        """Whether a message at ``level`` would be printed."""
        return LEVELS.index(level) >= self.threshold

    def log(self, level: str, message: str):
        if not self.is_enabled_for(level):
            return
        prefix = f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{LEVEL_COLORS[level]}{level_str}{RESET}"
        print(f"{prefix}{level_str}[{self.name}] {message}", flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


class VMLogger(ConsoleLogger):
    """Logger specialised for interpreter runs."""

    def __init__(self, name: str = "Chip8", **kwargs):
        super().__init__(name, **kwargs)
        self.fault_count = 0

    def log_program_loaded(self, size: int, address: int):
        self.info(f"Loaded {size} bytes at 0x{address:03X}")

    def log_instruction(self, pc: int, instruction: int):
        """Trace one fetched instruction at DEBUG level."""
        if self.is_enabled_for("DEBUG"):
            self.debug(f"pc=0x{pc:03X} opcode=0x{instruction:04X}")

    def log_fault(self, pc: int, error: Exception):
        """Report a failed cycle."""
        self.fault_count += 1
        self.error(f"Cycle at pc=0x{pc:03X} aborted: {error}")

    def log_run_start(self, config: Dict[str, Any]):
        """Log run configuration and start message."""
        self.info("=" * 60)
        self.info("Starting run with configuration:")
        for key, value in config.items():
            self.info(f"  {key}: {value}")
        self.info("=" * 60)

    def log_run_end(self, cycles: int, exit_requested: bool):
        """Log run completion summary."""
        elapsed = time.time() - self.start_time
        reason = "exit requested by host" if exit_requested else "cycle limit reached"
        self.info("=" * 60)
        self.info(f"Run finished after {cycles} cycles in {elapsed:.1f}s ({reason})")
        self.info("=" * 60)


def build_tqdm_progress_bar(
    n: int,
    print_rate: Optional[int] = None,
    desc: str = None,
    **kwargs,
) -> Tuple[Callable, Callable]:
    """Build a tqdm progress bar for a host loop of ``n`` cycles.

    Returns:
        Tuple of (update, close) callables. ``update(iter_num)`` is called once
        per cycle; ``close(iter_num)`` flushes the remaining steps.
    """
    if desc is None:
        desc = f"Running ({n:,} cycles)"

    for kwarg in ("total", "mininterval", "maxinterval", "miniters"):
        kwargs.pop(kwarg, None)

    if print_rate is None:
        print_rate = max(1, min(n // 20, 50))
    else:
        print_rate = max(1, min(print_rate, n))

    bar = tqdm(total=n, desc=desc, unit="cycle", **kwargs)
    reported = [0]

    def _update_progress_bar(iter_num: int):
        if iter_num > 0 and iter_num % print_rate == 0:
            bar.update(iter_num - reported[0])
            reported[0] = iter_num

    def close_progress_bar(iter_num: int):
        bar.update(iter_num - reported[0])
        reported[0] = iter_num
        bar.close()

    return _update_progress_bar, close_progress_bar
