# Clock - two separate cadences: instruction cycles at cpu_hz (a speed knob)
# and the 60Hz timer decrement. Both are paid out of elapsed wall-clock time,
# never from an instruction count.
import logging

from .config import CPU_HZ, TIMER_HZ
from .cpu import StepResult
from .errors import UnknownInstruction

logger = logging.getLogger(__name__)


class Clock:

    def __init__(self, cpu, cpu_hz=CPU_HZ, timer_hz=TIMER_HZ):
        self.cpu = cpu
        self.cpu_hz = cpu_hz
        self.timer_hz = timer_hz
        self.cycle_count = 0
        self.tick_count = 0
        self._cycle_time = 0.0
        self._timer_time = 0.0

    @property
    def cpu_hz(self):
        return self._cpu_hz

    @cpu_hz.setter
    def cpu_hz(self, value):
        if value <= 0:
            raise ValueError(f"cpu_hz must be positive, got {value}")
        self._cpu_hz = value

    def reset(self):
        self.cycle_count = 0
        self.tick_count = 0
        self._cycle_time = 0.0
        self._timer_time = 0.0

    def tick_timers(self):
        self.cpu.machine.tick_timers()
        self.tick_count += 1

    def cycle(self):
        result = self.cpu.step()
        self.cycle_count += 1
        return result

    def advance_timers(self, elapsed):
        """Pay out the 60Hz ticks due in ``elapsed`` seconds, without running the CPU."""
        if elapsed < 0:
            raise ValueError(f"elapsed time cannot be negative: {elapsed}")
        self._timer_time += elapsed
        ticks = _due(self._timer_time, self.timer_hz)
        self._timer_time -= ticks / self.timer_hz
        for _ in range(ticks):
            self.tick_timers()

    def advance(self, elapsed):
        """Account for ``elapsed`` seconds: run the cycles and timer ticks now due.

        Cycles stop at the first fault (an unknown instruction only gets
        reported and skipped); timer ticks are owed regardless.
        """
        self.advance_timers(elapsed)

        self._cycle_time += elapsed
        cycles = _due(self._cycle_time, self.cpu_hz)
        self._cycle_time -= cycles / self.cpu_hz
        display_changed = False
        fault = None
        waiting = self.cpu.waiting_for_key
        for _ in range(cycles):
            result = self.cycle()
            display_changed = display_changed or result.display_changed
            waiting = result.waiting
            if result.fault is not None:
                fault = result.fault
                if not isinstance(result.fault, UnknownInstruction):
                    self._cycle_time = 0.0
                    break

        return StepResult(
            display_changed=display_changed,
            sound_active=self.cpu.machine.sound_active(),
            fault=fault,
            waiting=waiting,
        )


def _due(seconds, hz):
    # whole periods in ``seconds``; the epsilon absorbs float error from summing dt's
    return max(0, int(seconds * hz + 1e-9))
