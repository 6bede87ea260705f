"""Cycle and timer cadences are paid from elapsed time, independently."""
import pytest

from pychip8 import Chip8, StackUnderflow, UnknownInstruction
from pychip8.clock import Clock

from conftest import program

LOOP = program(0x1200)    # JP 0x200


def looping(cpu_hz=500):
    chip8 = Chip8(cpu_hz=cpu_hz)
    chip8.load(LOOP)
    return chip8


class TestTimerTicks:

    def test_delay_reaches_zero_and_stays(self):
        chip8 = looping()
        chip8.machine.dt = 10
        for _ in range(10):
            chip8.tick()
        assert chip8.machine.dt == 0
        chip8.tick()
        assert chip8.machine.dt == 0

    def test_advance_pays_out_sixty_hz(self):
        chip8 = looping()
        chip8.machine.dt = 10
        chip8.advance(10 / 60)
        assert chip8.machine.dt == 0
        assert chip8.clock.tick_count == 10

    def test_one_second(self):
        chip8 = looping(cpu_hz=500)
        chip8.advance(1.0)
        assert chip8.clock.tick_count == 60
        assert chip8.clock.cycle_count == 500

    @pytest.mark.parametrize("cpu_hz", [100, 500, 1000])
    def test_timers_ignore_cpu_speed(self, cpu_hz):
        chip8 = looping(cpu_hz=cpu_hz)
        chip8.advance(0.5)
        assert chip8.clock.tick_count == 30
        assert chip8.clock.cycle_count == cpu_hz // 2

    def test_small_steps_accumulate(self):
        chip8 = looping()
        chip8.machine.st = 5
        for _ in range(4):
            chip8.advance(1 / 240)
        assert chip8.clock.tick_count == 1
        assert chip8.machine.st == 4

    def test_sound_flag(self):
        chip8 = looping()
        chip8.machine.st = 1
        assert chip8.advance(0.0).sound_active
        assert not chip8.advance(1 / 60).sound_active


class TestCycles:

    def test_speed_knob(self):
        chip8 = looping(cpu_hz=500)
        chip8.clock.cpu_hz = 1000
        chip8.advance(0.1)
        assert chip8.clock.cycle_count == 100

    def test_fault_stops_cycles_but_not_timers(self):
        chip8 = Chip8(cpu_hz=500)
        chip8.load(program(0x00EE))
        result = chip8.advance(0.1)
        assert isinstance(result.fault, StackUnderflow)
        assert chip8.clock.cycle_count == 1
        assert chip8.clock.tick_count == 6

    def test_advance_timers_runs_no_cycles(self):
        chip8 = looping()
        chip8.machine.st = 5
        chip8.clock.advance_timers(3 / 60)
        assert chip8.machine.st == 2
        assert chip8.clock.cycle_count == 0
        assert chip8.machine.pc == 0x200

    def test_unknown_instruction_does_not_stop(self):
        chip8 = Chip8(cpu_hz=500)
        chip8.load(program(0xFFFF, 0xFFFF, 0x1204))
        result = chip8.advance(0.01)
        assert isinstance(result.fault, UnknownInstruction)
        assert chip8.clock.cycle_count == 5
        assert chip8.machine.pc == 0x204

    def test_display_change_is_aggregated(self):
        chip8 = Chip8(cpu_hz=500)
        chip8.load(program(0x00E0, 0x1202))
        assert chip8.advance(0.01).display_changed
        assert not chip8.advance(0.01).display_changed

    def test_waiting_reported(self):
        chip8 = Chip8(cpu_hz=500)
        chip8.load(program(0xF00A))
        assert chip8.advance(0.01).waiting
        chip8.set_key(1, True)
        assert not chip8.advance(0.002).waiting
        assert chip8.machine.V[0] == 1

    def test_reset(self):
        chip8 = looping()
        chip8.advance(0.1)
        chip8.clock.reset()
        assert chip8.clock.cycle_count == 0
        assert chip8.clock.tick_count == 0


class TestValidation:

    def test_negative_elapsed(self):
        with pytest.raises(ValueError):
            looping().advance(-0.1)

    def test_cpu_hz_must_be_positive(self):
        chip8 = looping()
        with pytest.raises(ValueError):
            Clock(chip8.cpu, cpu_hz=0)
