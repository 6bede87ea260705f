# Decoder - 16-bit opcode in, tagged instruction out. No machine state is touched.
# CPU reference: Cowgod's CHIP-8 Technical Reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
from enum import Enum
from typing import NamedTuple


class Op(Enum):
    SYS = "SYS"
    CLS = "CLS"
    RET = "RET"
    JP = "JP"
    CALL = "CALL"
    SE_BYTE = "SE_BYTE"
    SNE_BYTE = "SNE_BYTE"
    SE_REG = "SE_REG"
    LD_BYTE = "LD_BYTE"
    ADD_BYTE = "ADD_BYTE"
    LD_REG = "LD_REG"
    OR = "OR"
    AND = "AND"
    XOR = "XOR"
    ADD_REG = "ADD_REG"
    SUB = "SUB"
    SHR = "SHR"
    SUBN = "SUBN"
    SHL = "SHL"
    SNE_REG = "SNE_REG"
    LD_I = "LD_I"
    JP_V0 = "JP_V0"
    RND = "RND"
    DRW = "DRW"
    SKP = "SKP"
    SKNP = "SKNP"
    LD_VX_DT = "LD_VX_DT"
    LD_KEY = "LD_KEY"
    LD_DT = "LD_DT"
    LD_ST = "LD_ST"
    ADD_I = "ADD_I"
    LD_FONT = "LD_FONT"
    BCD = "BCD"
    STORE = "STORE"
    LOAD = "LOAD"
    UNKNOWN = "UNKNOWN"


class Instruction(NamedTuple):
    op: Op
    opcode: int
    x: int
    y: int
    n: int
    nn: int
    nnn: int


# (mask, pattern, op) - first match wins, so the exact words come before 0NNN.
OPCODES = [
    (0xFFFF, 0x00E0, Op.CLS),
    (0xFFFF, 0x00EE, Op.RET),
    (0xF000, 0x0000, Op.SYS),

    (0xF000, 0x1000, Op.JP),
    (0xF000, 0x2000, Op.CALL),
    (0xF000, 0x3000, Op.SE_BYTE),
    (0xF000, 0x4000, Op.SNE_BYTE),
    (0xF00F, 0x5000, Op.SE_REG),
    (0xF000, 0x6000, Op.LD_BYTE),
    (0xF000, 0x7000, Op.ADD_BYTE),

    (0xF00F, 0x8000, Op.LD_REG),
    (0xF00F, 0x8001, Op.OR),
    (0xF00F, 0x8002, Op.AND),
    (0xF00F, 0x8003, Op.XOR),
    (0xF00F, 0x8004, Op.ADD_REG),
    (0xF00F, 0x8005, Op.SUB),
    (0xF00F, 0x8006, Op.SHR),
    (0xF00F, 0x8007, Op.SUBN),
    (0xF00F, 0x800E, Op.SHL),

    (0xF00F, 0x9000, Op.SNE_REG),
    (0xF000, 0xA000, Op.LD_I),
    (0xF000, 0xB000, Op.JP_V0),
    (0xF000, 0xC000, Op.RND),
    (0xF000, 0xD000, Op.DRW),

    (0xF0FF, 0xE09E, Op.SKP),
    (0xF0FF, 0xE0A1, Op.SKNP),

    (0xF0FF, 0xF007, Op.LD_VX_DT),
    (0xF0FF, 0xF00A, Op.LD_KEY),
    (0xF0FF, 0xF015, Op.LD_DT),
    (0xF0FF, 0xF018, Op.LD_ST),
    (0xF0FF, 0xF01E, Op.ADD_I),
    (0xF0FF, 0xF029, Op.LD_FONT),
    (0xF0FF, 0xF033, Op.BCD),
    (0xF0FF, 0xF055, Op.STORE),
    (0xF0FF, 0xF065, Op.LOAD),
]

# the top nibble narrows the search to a handful of rows
_BY_NIBBLE = {nibble: [(mask, pattern, op) for mask, pattern, op in OPCODES
                       if pattern >> 12 == nibble]
              for nibble in range(16)}


def decode(opcode):
    """Decode any 16-bit value. Never raises: unmatched patterns give Op.UNKNOWN."""
    opcode &= 0xFFFF
    op = Op.UNKNOWN
    for mask, pattern, candidate in _BY_NIBBLE[opcode >> 12]:
        if opcode & mask == pattern:
            op = candidate
            break
    return Instruction(
        op=op,
        opcode=opcode,
        x=(opcode >> 8) & 0xF,
        y=(opcode >> 4) & 0xF,
        n=opcode & 0xF,
        nn=opcode & 0xFF,
        nnn=opcode & 0xFFF,
    )


_MNEMONICS = {
    Op.SYS: "SYS 0x{nnn:03X}",
    Op.CLS: "CLS",
    Op.RET: "RET",
    Op.JP: "JP 0x{nnn:03X}",
    Op.CALL: "CALL 0x{nnn:03X}",
    Op.SE_BYTE: "SE V{x:X}, 0x{nn:02X}",
    Op.SNE_BYTE: "SNE V{x:X}, 0x{nn:02X}",
    Op.SE_REG: "SE V{x:X}, V{y:X}",
    Op.LD_BYTE: "LD V{x:X}, 0x{nn:02X}",
    Op.ADD_BYTE: "ADD V{x:X}, 0x{nn:02X}",
    Op.LD_REG: "LD V{x:X}, V{y:X}",
    Op.OR: "OR V{x:X}, V{y:X}",
    Op.AND: "AND V{x:X}, V{y:X}",
    Op.XOR: "XOR V{x:X}, V{y:X}",
    Op.ADD_REG: "ADD V{x:X}, V{y:X}",
    Op.SUB: "SUB V{x:X}, V{y:X}",
    Op.SHR: "SHR V{x:X}, V{y:X}",
    Op.SUBN: "SUBN V{x:X}, V{y:X}",
    Op.SHL: "SHL V{x:X}, V{y:X}",
    Op.SNE_REG: "SNE V{x:X}, V{y:X}",
    Op.LD_I: "LD I, 0x{nnn:03X}",
    Op.JP_V0: "JP V0, 0x{nnn:03X}",
    Op.RND: "RND V{x:X}, 0x{nn:02X}",
    Op.DRW: "DRW V{x:X}, V{y:X}, {n}",
    Op.SKP: "SKP V{x:X}",
    Op.SKNP: "SKNP V{x:X}",
    Op.LD_VX_DT: "LD V{x:X}, DT",
    Op.LD_KEY: "LD V{x:X}, K",
    Op.LD_DT: "LD DT, V{x:X}",
    Op.LD_ST: "LD ST, V{x:X}",
    Op.ADD_I: "ADD I, V{x:X}",
    Op.LD_FONT: "LD F, V{x:X}",
    Op.BCD: "LD B, V{x:X}",
    Op.STORE: "LD [I], V{x:X}",
    Op.LOAD: "LD V{x:X}, [I]",
    Op.UNKNOWN: "DW 0x{opcode:04X}",
}


def format_instruction(instruction):
    return _MNEMONICS[instruction.op].format(**instruction._asdict())


def disassemble(opcode):
    """Assembly text for one opcode, e.g. 0xD125 -> 'DRW V1, V2, 5'."""
    return format_instruction(decode(opcode))
