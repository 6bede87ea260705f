# Output - 64x32 display, each pixel on or off. Sprites are XORed onto it.
import numpy as np

from .constants import HEIGHT, SPRITE_WIDTH, WIDTH


class Display:

    def __init__(self, width=WIDTH, height=HEIGHT, wrap=False):
        self.width = width
        self.height = height
        self.wrap = wrap
        self.vram = np.zeros((height, width), dtype=bool)

    def clear(self):
        self.vram[:] = False

    def is_set(self, x, y):
        return bool(self.vram[y % self.height, x % self.width])

    def draw_sprite(self, x, y, sprite):
        """XOR an 8-pixel-wide sprite onto the screen at (x, y).

        Each byte of ``sprite`` is one row, most significant bit on the left.
        The start position wraps; pixels running off the edge are clipped
        unless ``wrap`` is set. Returns True if any lit pixel was turned off.
        """
        x %= self.width
        y %= self.height
        rows = np.unpackbits(np.frombuffer(bytes(sprite), dtype=np.uint8))
        rows = rows.reshape(-1, SPRITE_WIDTH).astype(bool)

        if self.wrap:
            ys = (y + np.arange(rows.shape[0])) % self.height
            xs = (x + np.arange(SPRITE_WIDTH)) % self.width
            region = self.vram[np.ix_(ys, xs)]
            collision = bool(np.any(region & rows))
            self.vram[np.ix_(ys, xs)] = region ^ rows
            return collision

        h = min(rows.shape[0], self.height - y)
        w = min(SPRITE_WIDTH, self.width - x)
        rows = rows[:h, :w]
        region = self.vram[y:y + h, x:x + w]    # view, updated in place
        collision = bool(np.any(region & rows))
        region ^= rows
        return collision

    def framebuffer(self):
        """Read-only copy of the screen, indexed [y, x]."""
        snapshot = self.vram.copy()
        snapshot.flags.writeable = False
        return snapshot
