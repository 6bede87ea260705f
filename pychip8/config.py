# Configuration defaults. The command line overrides these (see __main__.py).
from dataclasses import dataclass

SCALE = 10
CPU_HZ = 500
TIMER_HZ = 60

# longest frame handed to the emulator, so a stalled window does not replay seconds at once
MAX_FRAME_TIME = 0.1

BEEP_FREQUENCY = 440
BEEP_DURATION = 0.2
SAMPLE_RATE = 44100

LOG_FORMAT = "[%(levelname)s]:  %(message)s"


@dataclass(frozen=True)
class Quirks:
    """Behaviour that differs between CHIP-8 interpreters.

    shift_uses_vy: 8XY6/8XYE copy VY into VX before shifting (COSMAC VIP)
        instead of shifting VX in place (CHIP-48).
    wrap_sprites: sprite pixels past the right/bottom edge wrap around
        instead of being clipped. The start coordinate always wraps.
    load_store_increments_i: FX55/FX65 leave I pointing past the last
        register transferred.
    """
    shift_uses_vy: bool = False
    wrap_sprites: bool = False
    load_store_increments_i: bool = False
