# pyglet frontend: draws the framebuffer, plays the sound-timer beep and maps the keyboard.
# One pyglet.clock schedule per frame hands the elapsed time to Chip8.advance,
# which owes the CPU cycles and the 60Hz timer ticks separately.
import logging

import numpy as np
import pyglet
from pyglet.media import synthesis
from pyglet.window import key

from .config import (BEEP_DURATION, BEEP_FREQUENCY, MAX_FRAME_TIME,
                     SAMPLE_RATE, SCALE)
from .constants import HEIGHT, WIDTH

logger = logging.getLogger(__name__)

#map binding keys
KEYMAP = {
    key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
    key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
    key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
    key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
}


class Chip8Window(pyglet.window.Window):

    def __init__(self, chip8, scale=SCALE, caption="CHIP-8 Emulator"):
        super().__init__(
            width=WIDTH * scale,
            height=HEIGHT * scale,
            caption=caption,
            vsync=False
        )
        self.chip8 = chip8
        self.scale = scale
        self.should_draw = True
        self.sound_playing = False

        # 64x32 RGBA, upscaled with numpy.repeat before upload
        self._small_framebuf = np.zeros((HEIGHT, WIDTH, 4), dtype=np.uint8)
        self._small_framebuf[..., 3] = 255
        self.image = pyglet.image.ImageData(
            self.width,
            self.height,
            'RGBA',
            self._scaled().tobytes()
        )

        pyglet.clock.schedule(self._run)

    # cpu + timers, both paid out of the frame time by Chip8.advance
    def _run(self, dt):
        result = self.chip8.advance(min(dt, MAX_FRAME_TIME))
        if result.display_changed:
            self.should_draw = True
        if result.sound_active:
            if not self.sound_playing:
                self._play_beep()
        else:
            self.sound_playing = False

    # sound
    def _play_beep(self, duration=BEEP_DURATION, frequency=BEEP_FREQUENCY):
        wave = synthesis.Sine(duration=duration, frequency=frequency, sample_rate=SAMPLE_RATE)
        player = pyglet.media.Player()
        player.queue(wave)
        player.play()
        self.sound_playing = True

        def on_eos():
            self.sound_playing = False
            player.delete()

        player.on_eos = on_eos

    # draw
    def _scaled(self):
        if self.scale == 1:
            return self._small_framebuf
        return np.repeat(np.repeat(self._small_framebuf, self.scale, axis=0), self.scale, axis=1)

    def on_draw(self):
        if not self.should_draw:
            return
        self.clear()
        # pyglet images start at the bottom row
        pixels = self.chip8.framebuffer()[::-1]
        self._small_framebuf[..., :3] = pixels[..., np.newaxis] * np.uint8(255)
        self.image.set_data('RGBA', self.width * 4, self._scaled().tobytes())
        self.image.blit(0, 0)
        self.should_draw = False

    # keyboard
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol in KEYMAP:
            self.chip8.set_key(KEYMAP[symbol], True)

    def on_key_release(self, symbol, modifiers):
        if symbol in KEYMAP:
            self.chip8.set_key(KEYMAP[symbol], False)

    def on_close(self):
        pyglet.clock.unschedule(self._run)
        self.chip8.cancel_wait()
        super().on_close()


def run(chip8, scale=SCALE, caption="CHIP-8 Emulator"):
    window = Chip8Window(chip8, scale=scale, caption=caption)
    pyglet.app.run()
    return window
