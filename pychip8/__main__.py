# Entry point: pychip8 ROM [options]
import argparse
import logging
import sys
from pathlib import Path

from .chip8 import Chip8
from .config import CPU_HZ, LOG_FORMAT, SCALE, Quirks
from .errors import RomError


def build_parser():
    parser = argparse.ArgumentParser(prog="pychip8", description="CHIP-8 emulator")
    parser.add_argument("rom", help="ROM file to run")
    parser.add_argument("--hz", type=int, default=CPU_HZ,
                        help=f"instructions per second (default {CPU_HZ})")
    parser.add_argument("--scale", type=int, default=SCALE,
                        help=f"window pixels per CHIP-8 pixel (default {SCALE})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the CXNN random number generator")
    parser.add_argument("--shift-vy", action="store_true",
                        help="8XY6/8XYE shift VY into VX")
    parser.add_argument("--wrap", action="store_true",
                        help="wrap sprites around the screen edges instead of clipping")
    parser.add_argument("--increment-i", action="store_true",
                        help="FX55/FX65 advance I past the registers transferred")
    parser.add_argument("--log", action="store_true",
                        help="print a debug trace of every instruction")
    return parser


def quirks_from_args(args):
    return Quirks(
        shift_uses_vy=args.shift_vy,
        wrap_sprites=args.wrap,
        load_store_increments_i=args.increment_i,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.hz <= 0 or args.scale <= 0:
        sys.exit("--hz and --scale must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.log else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

    chip8 = Chip8(quirks=quirks_from_args(args), cpu_hz=args.hz, seed=args.seed)
    try:
        chip8.load_rom(args.rom)
    except RomError as error:
        sys.exit(str(error))

    # pyglet opens a display on import, so only pull it in once a ROM is loaded
    from .window import run
    run(chip8, scale=args.scale, caption=Path(args.rom).name)


if __name__ == "__main__":
    main()
