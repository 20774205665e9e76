"""Run a tiny hand-assembled program headlessly and print the screen."""

from chip8core import VM, assemble
from chip8core.headless import FrameRecorder, SilentAudio, ScriptedKeyboard, JaxNumberSource
from chip8core.logging import VMLogger
from chip8core.rendering import framebuffer_to_text
from chip8core.runner import run

if __name__ == "__main__":
    program = assemble([
        0x00E0,  # clear
        0x6000,  # V0 = 0 (x)
        0x6100,  # V1 = 0 (y)
        0x6200,  # V2 = 0 (digit)
        0xF229,  # I = glyph V2
        0xD015,  # draw at (V0, V1)
        0x7006,  # x += 6
        0x7201,  # digit += 1
        0x320A,  # skip once digits 0-9 are drawn
        0x1208,  # loop back to FX29
        0x1214,  # halt
    ])

    graphics = FrameRecorder()
    vm = VM(graphics, SilentAudio(), ScriptedKeyboard(), JaxNumberSource(seed=0),
            logger=VMLogger(log_level="INFO"))
    vm.load_program(program)

    run(vm, 200, progress=True)

    print(framebuffer_to_text(graphics.last_frame))
