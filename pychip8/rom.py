# ROM files are flat binaries, no header: the bytes go to 0x200 as they are.
import logging
from pathlib import Path

from .constants import MAX_ROM_SIZE
from .errors import RomError

logger = logging.getLogger(__name__)


def read_rom(path):
    path = Path(path)
    try:
        rom = path.read_bytes()
    except OSError as error:
        raise RomError(f"cannot read ROM {path}: {error}") from error
    if not rom:
        raise RomError(f"ROM {path} is empty")
    if len(rom) > MAX_ROM_SIZE:
        raise RomError(f"ROM {path} is {len(rom)} bytes, at most {MAX_ROM_SIZE} fit in memory")
    logger.debug(f"Read ROM {path} ({len(rom)} bytes)")
    return rom
