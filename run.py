"""
Headless CHIP-8 runner: load a ROM, run it for a number of cycles, print the screen.

    python run.py rom=roms/ibm_logo.ch8 cycles=2000
"""

import hydra
from omegaconf import DictConfig, OmegaConf

from chip8core import VM
from chip8core.headless import FrameRecorder, SilentAudio, ScriptedKeyboard, JaxNumberSource
from chip8core.logging import VMLogger
from chip8core.rendering import framebuffer_to_text
from chip8core.runner import run


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    cfg = OmegaConf.to_container(cfg, resolve=True)

    logger = VMLogger(log_level=cfg["log_level"])
    logger.log_run_start(cfg)

    graphics = FrameRecorder(color_scheme=cfg["color_scheme"])
    keys = cfg.get("keys") or {}
    keyboard = ScriptedKeyboard(
        presses=keys.get("presses") or (),
        held=keys.get("held") or (),
        exit_after=keys.get("exit_after"),
    )
    vm = VM(graphics, SilentAudio(), keyboard, JaxNumberSource(seed=cfg["seed"]), logger=logger)

    with open(hydra.utils.to_absolute_path(cfg["rom"]), "rb") as f:
        vm.load_program(f.read())

    summary = run(vm, cfg["cycles"], progress=cfg["progress"], desc=cfg["rom"])

    if cfg["show_frame"] and graphics.last_frame is not None:
        print(framebuffer_to_text(graphics.last_frame))

    print(f"Executed {summary.cycles} cycles")


if __name__ == "__main__":
    main()
