# The whole CHIP-8 state in one object: memory, registers, stack, timers, display, keypad.
# The CPU and the clock act on a Machine passed to them; nothing here is global.
import logging

from .config import Quirks
from .constants import FONT_START, FONTSET, PROGRAM_START, REGISTER_COUNT
from .display import Display
from .errors import MemoryFault
from .keypad import Keypad
from .memory import Memory, Stack

logger = logging.getLogger(__name__)


class Registers:
    """V0-VF. Values are truncated to 8 bits on write."""

    def __init__(self):
        self.values = bytearray(REGISTER_COUNT)

    def __getitem__(self, index):
        return self.values[index]

    def __setitem__(self, index, value):
        self.values[index] = value & 0xFF

    def __len__(self):
        return REGISTER_COUNT

    def __iter__(self):
        return iter(self.values)

    def clear(self):
        self.values[:] = bytes(REGISTER_COUNT)


class Machine:

    def __init__(self, quirks=None):
        self.quirks = quirks or Quirks()
        self.memory = Memory()
        self.V = Registers()
        self.stack = Stack()
        self.display = Display(wrap=self.quirks.wrap_sprites)
        self.keypad = Keypad()
        self.reset()

    def reset(self):
        self.memory.clear()
        self.memory.write_block(FONT_START, FONTSET)
        self.V.clear()
        self.stack.clear()
        self.display.clear()
        self.keypad.clear()
        self._I = 0
        self._pc = PROGRAM_START
        self._dt = 0
        self._st = 0
        self.awaiting_key = None    # register index FX0A will fill, None when running

    # 16-bit registers
    @property
    def I(self):
        return self._I

    @I.setter
    def I(self, value):
        self._I = value & 0xFFFF

    @property
    def pc(self):
        return self._pc

    @pc.setter
    def pc(self, value):
        self._pc = value & 0xFFFF

    @property
    def sp(self):
        return len(self.stack)

    # 8-bit timers
    @property
    def dt(self):
        return self._dt

    @dt.setter
    def dt(self, value):
        self._dt = value & 0xFF

    @property
    def st(self):
        return self._st

    @st.setter
    def st(self, value):
        self._st = value & 0xFF

    def load(self, rom, origin=PROGRAM_START):
        """Copy raw program bytes into memory, verbatim, starting at ``origin``."""
        rom = bytes(rom)
        if origin + len(rom) > len(self.memory):
            raise MemoryFault(origin, len(rom))
        self.memory.write_block(origin, rom)
        logger.debug(f"Loaded {len(rom)} bytes at 0x{origin:03X}")

    def tick_timers(self):
        """One 60Hz tick: DT and ST count down to 0 and stay there."""
        if self._dt > 0:
            self._dt -= 1
        if self._st > 0:
            self._st -= 1

    def sound_active(self):
        return self._st > 0

    def set_key(self, index, pressed):
        self.keypad.set_key(index, pressed)

    def framebuffer(self):
        return self.display.framebuffer()

    def __str__(self):
        regs = " ".join(f"V{i:X}={v:02X}" for i, v in enumerate(self.V))
        return (f"PC=0x{self.pc:03X} I=0x{self.I:03X} SP={self.sp} "
                f"DT={self.dt} ST={self.st}\n{regs}")
