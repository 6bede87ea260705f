# Input - 16 hex keys (0x0-0xF). The frontend writes them, the CPU reads them.
import logging

import numpy as np

from .constants import KEY_COUNT

logger = logging.getLogger(__name__)


class Keypad:

    def __init__(self):
        self.keys = np.zeros(KEY_COUNT, dtype=bool)
        self.last_press = None     # most recent up->down transition, consumed by FX0A

    def set_key(self, index, pressed):
        if not 0 <= index < KEY_COUNT:
            raise ValueError(f"key index out of range: {index}")
        pressed = bool(pressed)
        if pressed and not self.keys[index]:
            self.last_press = index
        self.keys[index] = pressed
        logger.debug(f"Key state changed. Key: {index:X}, pressed: {pressed}")

    def is_pressed(self, index):
        # register values past 0xF name no key
        if not 0 <= index < KEY_COUNT:
            return False
        return bool(self.keys[index])

    def take_press(self):
        """Return and forget the last key that went down, or None."""
        key, self.last_press = self.last_press, None
        return key

    def clear(self):
        self.keys[:] = False
        self.last_press = None
