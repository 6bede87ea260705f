import numpy as np
import pytest

from pychip8 import Display


class TestDisplay:

    def test_blank(self):
        fb = Display().framebuffer()
        assert fb.shape == (32, 64)
        assert fb.dtype == bool
        assert not fb.any()

    def test_draw_and_collision(self):
        display = Display()
        assert display.draw_sprite(0, 0, b"\xF0") is False
        assert display.draw_sprite(0, 0, b"\x80") is True
        assert not display.is_set(0, 0)
        assert display.is_set(1, 0)

    def test_no_collision_when_turning_pixels_on(self):
        display = Display()
        display.draw_sprite(0, 0, b"\xF0")
        assert display.draw_sprite(0, 0, b"\x0F") is False
        assert display.framebuffer()[0, :8].all()

    def test_start_position_wraps(self):
        display = Display()
        display.draw_sprite(64 + 3, 32 + 2, b"\x80")
        assert display.is_set(3, 2)

    def test_clips_at_right_and_bottom_edges(self):
        display = Display()
        display.draw_sprite(62, 30, b"\xFF\xFF\xFF")
        fb = display.framebuffer()
        assert fb.sum() == 4
        assert fb[30:32, 62:64].all()
        assert not fb[0, :].any()
        assert not fb[:, 0].any()

    def test_wraps_when_asked(self):
        display = Display(wrap=True)
        display.draw_sprite(62, 31, b"\xFF\xFF")
        fb = display.framebuffer()
        assert fb.sum() == 16
        assert fb[31, 62] and fb[31, 5]
        assert fb[0, 62] and fb[0, 5]
        assert not fb[31, 6]

    def test_wrapped_collision(self):
        display = Display(wrap=True)
        display.draw_sprite(0, 0, b"\x80")
        assert display.draw_sprite(57, 0, b"\x01") is True
        assert not display.is_set(0, 0)

    def test_empty_sprite(self):
        display = Display()
        assert display.draw_sprite(5, 5, b"") is False
        assert not display.framebuffer().any()

    def test_fifteen_rows(self):
        display = Display()
        display.draw_sprite(0, 0, b"\x80" * 15)
        assert display.framebuffer()[:, 0].sum() == 15

    def test_clear(self):
        display = Display()
        display.draw_sprite(0, 0, b"\xFF")
        display.clear()
        assert not display.framebuffer().any()

    def test_framebuffer_is_read_only_snapshot(self):
        display = Display()
        fb = display.framebuffer()
        with pytest.raises(ValueError):
            fb[0, 0] = True
        display.draw_sprite(0, 0, b"\x80")
        assert not fb[0, 0]
        assert display.framebuffer()[0, 0]

    def test_rows_match_sprite_bits(self):
        sprite = bytes([0b10100101, 0b01011010])
        display = Display()
        display.draw_sprite(8, 4, sprite)
        expected = np.unpackbits(np.frombuffer(sprite, dtype=np.uint8)).reshape(2, 8).astype(bool)
        assert (display.framebuffer()[4:6, 8:16] == expected).all()
