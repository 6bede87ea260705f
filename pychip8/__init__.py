"""CHIP-8 virtual machine.

The core (everything importable from here) has no graphics or audio
dependency; the pyglet frontend lives in pychip8.window.
"""
from .chip8 import Chip8
from .clock import Clock
from .config import Quirks
from .cpu import Cpu, StepResult
from .decoder import Instruction, Op, decode, disassemble
from .display import Display
from .errors import (Chip8Error, MemoryFault, RomError, StackOverflow,
                     StackUnderflow, UnknownInstruction)
from .keypad import Keypad
from .machine import Machine, Registers
from .memory import Memory, Stack
from .rom import read_rom

__version__ = "0.1.0"
