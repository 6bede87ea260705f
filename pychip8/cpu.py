# CPU - fetch the opcode at PC, decode it, run its handler.
# One step() is exactly one instruction; faults come back in the result, they are never raised.
import logging
import random
from typing import NamedTuple, Optional

from .constants import FONT_GLYPH_SIZE, FONT_START, PROGRAM_START
from .decoder import Op, decode, format_instruction
from .errors import Chip8Error, MemoryFault, UnknownInstruction

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    display_changed: bool = False
    sound_active: bool = False
    fault: Optional[Chip8Error] = None
    waiting: bool = False

    @property
    def ok(self):
        return self.fault is None


class Cpu:

    def __init__(self, machine, seed=None):
        self.machine = machine
        self.rng = random.Random(seed)
        self.display_changed = False

        # dispatch table
        self.handlers = {
            Op.SYS: self.op_SYS,
            Op.CLS: self.op_CLS,
            Op.RET: self.op_RET,
            Op.JP: self.op_JP,
            Op.CALL: self.op_CALL,
            Op.SE_BYTE: self.op_SE_Vx_kk,
            Op.SNE_BYTE: self.op_SNE_Vx_kk,
            Op.SE_REG: self.op_SE_Vx_Vy,
            Op.LD_BYTE: self.op_LD_Vx_kk,
            Op.ADD_BYTE: self.op_ADD_Vx_kk,
            Op.LD_REG: self.op_LD_Vx_Vy,
            Op.OR: self.op_OR,
            Op.AND: self.op_AND,
            Op.XOR: self.op_XOR,
            Op.ADD_REG: self.op_ADD,
            Op.SUB: self.op_SUB,
            Op.SHR: self.op_SHR,
            Op.SUBN: self.op_SUBN,
            Op.SHL: self.op_SHL,
            Op.SNE_REG: self.op_SNE_Vx_Vy,
            Op.LD_I: self.op_LD_I,
            Op.JP_V0: self.op_JP_V0,
            Op.RND: self.op_RND,
            Op.DRW: self.op_DRW,
            Op.SKP: self.op_SKP,
            Op.SKNP: self.op_SKNP,
            Op.LD_VX_DT: self.op_LD_Vx_DT,
            Op.LD_KEY: self.op_WAITKEY,
            Op.LD_DT: self.op_LD_DT_Vx,
            Op.LD_ST: self.op_LD_ST_Vx,
            Op.ADD_I: self.op_ADD_I_Vx,
            Op.LD_FONT: self.op_FONT,
            Op.BCD: self.op_BCD,
            Op.STORE: self.op_STORE,
            Op.LOAD: self.op_LOAD,
            Op.UNKNOWN: self.op_UNKNOWN,
        }

    @property
    def waiting_for_key(self):
        return self.machine.awaiting_key is not None

    def cancel_wait(self):
        """Drop a pending FX0A wait without storing a key (used on shutdown)."""
        self.machine.awaiting_key = None

    def _result(self, fault=None):
        m = self.machine
        return StepResult(
            display_changed=self.display_changed,
            sound_active=m.sound_active(),
            fault=fault,
            waiting=m.awaiting_key is not None,
        )

    def step(self):
        m = self.machine
        self.display_changed = False

        if m.awaiting_key is not None:
            self._poll_key()
            return self._result()

        address = m.pc
        try:
            if address < PROGRAM_START:
                raise MemoryFault(address, 2)
            opcode = m.memory.read_word(address)
            instruction = decode(opcode)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"0x{address:03X}: {opcode:04X}  {format_instruction(instruction)}")
            m.pc = address + 2
            self.handlers[instruction.op](instruction)
        except UnknownInstruction as error:
            # skipped, PC already points at the next instruction
            logger.warning(f"{error}, skipping")
            return self._result(error)
        except Chip8Error as error:
            m.pc = address
            logger.warning(f"Fault at 0x{address:03X}: {error}")
            return self._result(error)
        return self._result()

    def _poll_key(self):
        m = self.machine
        key = m.keypad.take_press()
        if key is None:
            return
        logger.debug(f"Key {key:X} pressed, stored in V{m.awaiting_key:X}")
        m.V[m.awaiting_key] = key
        m.awaiting_key = None

    # opcode handlers
    def op_SYS(self, ins):
        # machine code routines only existed on the original hardware
        pass

    def op_CLS(self, ins):
        self.machine.display.clear()
        self.display_changed = True

    def op_RET(self, ins):
        self.machine.pc = self.machine.stack.pop()

    def op_JP(self, ins):
        self.machine.pc = ins.nnn

    def op_CALL(self, ins):
        m = self.machine
        m.stack.push(m.pc)
        m.pc = ins.nnn

    def op_SE_Vx_kk(self, ins):
        if self.machine.V[ins.x] == ins.nn:
            self.machine.pc += 2

    def op_SNE_Vx_kk(self, ins):
        if self.machine.V[ins.x] != ins.nn:
            self.machine.pc += 2

    def op_SE_Vx_Vy(self, ins):
        V = self.machine.V
        if V[ins.x] == V[ins.y]:
            self.machine.pc += 2

    def op_SNE_Vx_Vy(self, ins):
        V = self.machine.V
        if V[ins.x] != V[ins.y]:
            self.machine.pc += 2

    def op_LD_Vx_kk(self, ins):
        self.machine.V[ins.x] = ins.nn

    def op_ADD_Vx_kk(self, ins):
        # no carry flag for the immediate form
        V = self.machine.V
        V[ins.x] = V[ins.x] + ins.nn

    def op_LD_Vx_Vy(self, ins):
        V = self.machine.V
        V[ins.x] = V[ins.y]

    def op_OR(self, ins):
        V = self.machine.V
        V[ins.x] = V[ins.x] | V[ins.y]

    def op_AND(self, ins):
        V = self.machine.V
        V[ins.x] = V[ins.x] & V[ins.y]

    def op_XOR(self, ins):
        V = self.machine.V
        V[ins.x] = V[ins.x] ^ V[ins.y]

    # The ALU ops below write VF after the result, so VF holds the flag when X is F.
    def op_ADD(self, ins):
        V = self.machine.V
        total = V[ins.x] + V[ins.y]
        V[ins.x] = total
        V[0xF] = 1 if total > 0xFF else 0

    def op_SUB(self, ins):
        V = self.machine.V
        vx, vy = V[ins.x], V[ins.y]
        V[ins.x] = vx - vy
        V[0xF] = 1 if vx >= vy else 0

    def op_SUBN(self, ins):
        V = self.machine.V
        vx, vy = V[ins.x], V[ins.y]
        V[ins.x] = vy - vx
        V[0xF] = 1 if vy >= vx else 0

    def _shift_source(self, ins):
        V = self.machine.V
        return V[ins.y] if self.machine.quirks.shift_uses_vy else V[ins.x]

    def op_SHR(self, ins):
        V = self.machine.V
        value = self._shift_source(ins)
        V[ins.x] = value >> 1
        V[0xF] = value & 0x1

    def op_SHL(self, ins):
        V = self.machine.V
        value = self._shift_source(ins)
        V[ins.x] = value << 1
        V[0xF] = (value >> 7) & 0x1

    def op_LD_I(self, ins):
        self.machine.I = ins.nnn

    def op_JP_V0(self, ins):
        self.machine.pc = ins.nnn + self.machine.V[0]

    def op_RND(self, ins):
        self.machine.V[ins.x] = self.rng.randint(0, 255) & ins.nn

    def op_DRW(self, ins):
        m = self.machine
        sprite = m.memory.read_block(m.I, ins.n)
        collision = m.display.draw_sprite(m.V[ins.x], m.V[ins.y], sprite)
        m.V[0xF] = 1 if collision else 0
        self.display_changed = True

    def op_SKP(self, ins):
        m = self.machine
        if m.keypad.is_pressed(m.V[ins.x]):
            m.pc += 2

    def op_SKNP(self, ins):
        m = self.machine
        if not m.keypad.is_pressed(m.V[ins.x]):
            m.pc += 2

    def op_LD_Vx_DT(self, ins):
        self.machine.V[ins.x] = self.machine.dt

    def op_WAITKEY(self, ins):
        # Only presses that happen from now on count. step() resolves the wait.
        m = self.machine
        m.keypad.take_press()
        m.awaiting_key = ins.x
        logger.debug(f"Waiting for a key press for V{ins.x:X}")

    def op_LD_DT_Vx(self, ins):
        self.machine.dt = self.machine.V[ins.x]

    def op_LD_ST_Vx(self, ins):
        self.machine.st = self.machine.V[ins.x]

    def op_ADD_I_Vx(self, ins):
        self.machine.I = self.machine.I + self.machine.V[ins.x]

    def op_FONT(self, ins):
        digit = self.machine.V[ins.x] & 0xF
        self.machine.I = FONT_START + digit * FONT_GLYPH_SIZE

    def op_BCD(self, ins):
        m = self.machine
        v = m.V[ins.x]
        m.memory.write_block(m.I, [v // 100, (v // 10) % 10, v % 10])

    def op_STORE(self, ins):
        m = self.machine
        m.memory.write_block(m.I, m.V.values[:ins.x + 1])
        if m.quirks.load_store_increments_i:
            m.I += ins.x + 1

    def op_LOAD(self, ins):
        m = self.machine
        values = m.memory.read_block(m.I, ins.x + 1)
        for i, value in enumerate(values):
            m.V[i] = value
        if m.quirks.load_store_increments_i:
            m.I += ins.x + 1

    def op_UNKNOWN(self, ins):
        raise UnknownInstruction(ins.opcode, self.machine.pc - 2)
