"""Faults raised by the CHIP-8 core.

All of them derive from Chip8Error so the driving loop can catch one type.
Cpu.step() never lets them escape; it hands them back in the StepResult.
"""


class Chip8Error(Exception):
    pass


class MemoryFault(Chip8Error):
    """Access outside the 4096-byte address space."""

    def __init__(self, address, length=1):
        self.address = address
        self.length = length
        if length == 1:
            msg = f"memory access out of range at 0x{address:04X}"
        else:
            msg = f"memory access out of range: {length} bytes at 0x{address:04X}"
        super().__init__(msg)


class StackOverflow(Chip8Error):
    def __init__(self, address):
        self.address = address
        super().__init__(f"stack overflow pushing return address 0x{address:03X}")


class StackUnderflow(Chip8Error):
    def __init__(self):
        super().__init__("return with an empty stack")


class UnknownInstruction(Chip8Error):
    def __init__(self, opcode, address=None):
        self.opcode = opcode
        self.address = address
        where = "" if address is None else f" at 0x{address:03X}"
        super().__init__(f"unknown opcode 0x{opcode:04X}{where}")


class RomError(Chip8Error):
    """ROM file missing, empty or too large to fit in memory."""
