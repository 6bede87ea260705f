"""Argument handling only; the pyglet window is not opened here."""
import pytest

from pychip8.__main__ import build_parser, main, quirks_from_args
from pychip8.config import CPU_HZ, SCALE


class TestCli:

    def test_defaults(self):
        args = build_parser().parse_args(["pong.ch8"])
        assert args.rom == "pong.ch8"
        assert args.hz == CPU_HZ
        assert args.scale == SCALE
        assert args.seed is None
        assert not args.log
        quirks = quirks_from_args(args)
        assert not quirks.shift_uses_vy
        assert not quirks.wrap_sprites
        assert not quirks.load_store_increments_i

    def test_options(self):
        args = build_parser().parse_args(
            ["tetris.ch8", "--hz", "700", "--scale", "5", "--seed", "3",
             "--shift-vy", "--wrap", "--increment-i", "--log"])
        assert args.hz == 700
        assert args.scale == 5
        assert args.seed == 3
        assert args.log
        quirks = quirks_from_args(args)
        assert quirks.shift_uses_vy
        assert quirks.wrap_sprites
        assert quirks.load_store_increments_i

    def test_rom_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_missing_rom_exits(self, tmp_path):
        with pytest.raises(SystemExit) as info:
            main([str(tmp_path / "missing.ch8")])
        assert "cannot read ROM" in str(info.value.code)

    def test_bad_speed_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "x.ch8"), "--hz", "0"])
