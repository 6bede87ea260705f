import pytest

from pychip8 import Chip8, Cpu, Machine


def program(*words):
    """Assemble 16-bit opcodes into ROM bytes."""
    return b"".join(word.to_bytes(2, "big") for word in words)


@pytest.fixture
def machine():
    return Machine()


@pytest.fixture
def cpu(machine):
    return Cpu(machine, seed=1234)


@pytest.fixture
def chip8():
    return Chip8(seed=1234)


@pytest.fixture
def execute(machine, cpu):
    """Load opcodes at 0x200 and run them; one step per opcode unless ``steps`` is given."""
    def _execute(*words, steps=None):
        machine.load(program(*words))
        result = None
        for _ in range(len(words) if steps is None else steps):
            result = cpu.step()
        return result
    return _execute
