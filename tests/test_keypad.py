import pytest

from pychip8 import Keypad


class TestKeypad:

    def test_all_up_initially(self):
        keypad = Keypad()
        assert not any(keypad.is_pressed(i) for i in range(16))

    def test_set_and_release(self):
        keypad = Keypad()
        keypad.set_key(0xC, True)
        assert keypad.is_pressed(0xC)
        keypad.set_key(0xC, False)
        assert not keypad.is_pressed(0xC)

    @pytest.mark.parametrize("index", [-1, 16, 99])
    def test_index_out_of_range(self, index):
        with pytest.raises(ValueError):
            Keypad().set_key(index, True)

    def test_index_past_0xf_is_never_pressed(self):
        keypad = Keypad()
        keypad.set_key(0xA, True)
        assert not keypad.is_pressed(0x1A)
        assert not keypad.is_pressed(0xFF)

    def test_take_press_consumes_edge(self):
        keypad = Keypad()
        assert keypad.take_press() is None
        keypad.set_key(4, True)
        assert keypad.take_press() == 4
        assert keypad.take_press() is None

    def test_holding_a_key_is_one_press(self):
        keypad = Keypad()
        keypad.set_key(4, True)
        keypad.take_press()
        keypad.set_key(4, True)
        assert keypad.take_press() is None

    def test_release_is_not_a_press(self):
        keypad = Keypad()
        keypad.set_key(2, False)
        assert keypad.take_press() is None

    def test_clear(self):
        keypad = Keypad()
        keypad.set_key(1, True)
        keypad.clear()
        assert not keypad.is_pressed(1)
        assert keypad.take_press() is None
