# Chip8 - one machine, its CPU and its clock behind a small interface.
# This is what a frontend drives: load a ROM, feed keys and time, read the screen.
import logging

from .clock import Clock
from .config import CPU_HZ, TIMER_HZ, Quirks
from .constants import PROGRAM_START
from .cpu import Cpu, StepResult
from .errors import UnknownInstruction
from .machine import Machine
from .rom import read_rom

logger = logging.getLogger(__name__)


class Chip8:

    def __init__(self, quirks=None, cpu_hz=CPU_HZ, timer_hz=TIMER_HZ, seed=None):
        self.machine = Machine(quirks or Quirks())
        self.cpu = Cpu(self.machine, seed=seed)
        self.clock = Clock(self.cpu, cpu_hz=cpu_hz, timer_hz=timer_hz)
        self.halted = False

    @property
    def quirks(self):
        return self.machine.quirks

    def reset(self):
        """Back to power-on state with the font reloaded. The ROM has to be loaded again."""
        self.machine.reset()
        self.clock.reset()
        self.halted = False

    def load(self, rom, origin=PROGRAM_START):
        self.machine.load(rom, origin)

    def load_rom(self, path):
        logger.info(f"Loading ROM: {path}")
        self.load(read_rom(path))

    def set_key(self, index, pressed):
        self.machine.set_key(index, pressed)

    def step(self):
        return self.cpu.step()

    def tick(self):
        self.clock.tick_timers()

    def advance(self, elapsed):
        """Run the cycles and timer ticks due in ``elapsed`` seconds.

        Any fault other than an unknown instruction halts the CPU until
        reset(); the timers keep counting down so a pending beep still ends.
        """
        if self.halted:
            self.clock.advance_timers(elapsed)
            return StepResult(sound_active=self.sound_active())
        result = self.clock.advance(elapsed)
        if result.fault is not None and not isinstance(result.fault, UnknownInstruction):
            logger.error(f"Machine halted: {result.fault}\n{self}")
            self.halted = True
        return result

    def framebuffer(self):
        return self.machine.framebuffer()

    def sound_active(self):
        return self.machine.sound_active()

    @property
    def waiting_for_key(self):
        return self.cpu.waiting_for_key

    def cancel_wait(self):
        self.cpu.cancel_wait()

    def __str__(self):
        return str(self.machine)
