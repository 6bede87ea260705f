# Memory - 4096 bytes, big-endian words. Stack - at most 16 return addresses.
import numpy as np

from .constants import MEMORY_SIZE, STACK_SIZE
from .errors import MemoryFault, StackOverflow, StackUnderflow


class Memory:
    """Byte-addressable RAM. Out-of-range access raises MemoryFault, it never wraps."""

    def __init__(self, size=MEMORY_SIZE):
        self.size = size
        self.data = bytearray(size)

    def __len__(self):
        return self.size

    def __getitem__(self, address):
        return self.read_byte(address)

    def __setitem__(self, address, value):
        self.write_byte(address, value)

    def _check(self, address, length=1):
        if address < 0 or length < 0 or address + length > self.size:
            raise MemoryFault(address, length)

    def read_byte(self, address):
        self._check(address)
        return self.data[address]

    def write_byte(self, address, value):
        self._check(address)
        self.data[address] = value & 0xFF

    def read_word(self, address):
        self._check(address, 2)
        return (self.data[address] << 8) | self.data[address + 1]

    def read_block(self, address, length):
        self._check(address, length)
        return bytes(self.data[address:address + length])

    def write_block(self, address, values):
        values = bytes(values)
        self._check(address, len(values))
        self.data[address:address + len(values)] = values

    def clear(self):
        self.data[:] = bytes(self.size)


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.size = size
        self.addresses = np.zeros(size, dtype=np.uint16)
        self.sp = 0

    def __len__(self):
        return self.sp

    def push(self, address):
        if self.sp >= self.size:
            raise StackOverflow(address)
        self.addresses[self.sp] = address & 0xFFFF
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflow()
        self.sp -= 1
        return int(self.addresses[self.sp])

    def peek(self):
        if self.sp == 0:
            return None
        return int(self.addresses[self.sp - 1])

    def clear(self):
        self.addresses[:] = 0
        self.sp = 0
