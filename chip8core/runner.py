"""Simple host loop driving a VM for a bounded number of cycles."""

from typing import NamedTuple, Optional

from chip8core.logging import build_tqdm_progress_bar
from chip8core.vm import VM, StepResult


class RunSummary(NamedTuple):
    cycles: int
    exit_requested: bool


def run(vm: VM, max_cycles: int, progress: bool = False, desc: Optional[str] = None) -> RunSummary:
    """Step ``vm`` until the host asks to exit or ``max_cycles`` have run.

    Errors raised by a step propagate after the progress bar is closed.
    """
    if progress:
        update_progress, close_progress = build_tqdm_progress_bar(max_cycles, desc=desc)
    else:
        update_progress = close_progress = None

    cycles = 0
    exit_requested = False
    try:
        while cycles < max_cycles:
            result = vm.step()
            cycles += 1
            if update_progress:
                update_progress(cycles)
            if result is StepResult.EXIT:
                exit_requested = True
                break
    finally:
        if close_progress:
            close_progress(cycles)

    vm.logger.log_run_end(cycles, exit_requested)
    return RunSummary(cycles=cycles, exit_requested=exit_requested)
