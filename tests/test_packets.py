import struct

import pytest

from qkvm.packets import (
    Command,
    Modifiers,
    checksum,
    key_down_packet,
    key_up_packet,
    mouse_click_absolute_packet,
    mouse_click_packet,
    mouse_move_packet,
)

FLAG_NAMES = [
    "left_ctrl",
    "left_shift",
    "left_alt",
    "left_win",
    "right_ctrl",
    "right_shift",
    "right_alt",
    "right_win",
]


def test_key_up_wire_bytes():
    assert key_up_packet() == bytes.fromhex("57ab00020800000000000000000c")


def test_checksum_wraps():
    assert checksum(b"") == 0
    assert checksum(b"\xff\x01") == 0
    assert checksum(b"\x57\xab") == checksum(b"\xab\x57")


def test_modifiers_default_is_zero():
    assert Modifiers().to_byte() == 0


def test_each_modifier_is_a_distinct_bit():
    bytes_ = [Modifiers(**{name: True}).to_byte() for name in FLAG_NAMES]
    assert bytes_ == sorted(bytes_)
    assert all(b & (b - 1) == 0 and b for b in bytes_)
    assert bytes_[0] == 0b1
    assert bytes_[-1] == 0b10000000


def test_all_modifiers_fill_the_byte():
    assert Modifiers(**{name: True for name in FLAG_NAMES}).to_byte() == 0xFF


def test_key_down_layout():
    mods = Modifiers(left_shift=True, right_alt=True)
    packet = key_down_packet(0x04, mods)
    assert len(packet) == 14
    assert packet[:2] == b"\x57\xab"
    assert packet[2] == 0
    assert packet[3] == Command.KEYBOARD
    assert packet[4] == 8
    assert packet[5] == mods.to_byte()
    assert packet[6] == 0
    assert packet[7] == 0x04
    assert packet[8:13] == bytes(5)
    assert packet[13] == checksum(packet[:13])


def test_key_down_without_modifiers_equals_default():
    assert key_down_packet(0x28) == key_down_packet(0x28, Modifiers())


def test_key_up_is_key_down_of_zero():
    assert key_up_packet() == key_down_packet(0, Modifiers())


@pytest.mark.parametrize("code", [-1, 0x100])
def test_key_code_out_of_range(code):
    with pytest.raises(ValueError):
        key_down_packet(code)


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (1.0, 1.0), (0.5, 0.25)])
def test_mouse_move_layout(x, y):
    packet = mouse_move_packet(x, y)
    assert len(packet) == 13
    assert packet[:2] == b"\x57\xab"
    assert packet[3] == Command.MOUSE_ABS
    assert packet[4] == 7
    assert packet[5] == 0x02
    assert packet[6] == 0
    assert packet[11] == 0
    assert packet[12] == checksum(packet[:12])


def test_mouse_move_full_scale():
    packet = mouse_move_packet(1.0, 0.0)
    assert struct.unpack_from("<HH", packet, 7) == (4096, 0)


@pytest.mark.parametrize("x, y", [(-0.5, 0.0), (0.0, 20.0)])
def test_mouse_move_out_of_range(x, y):
    with pytest.raises(ValueError):
        mouse_move_packet(x, y)


def test_absolute_click_matches_move_except_buttons():
    move = mouse_move_packet(0.3, 0.7)
    click = mouse_click_absolute_packet(0.3, 0.7, True, False, True)
    assert click[:6] == move[:6]
    assert click[7:12] == move[7:12]
    assert click[6] == 0b101
    assert click[12] == checksum(click[:12])


def test_absolute_click_without_buttons_is_move():
    assert mouse_click_absolute_packet(0.2, 0.9, False, False, False) == (
        mouse_move_packet(0.2, 0.9)
    )


def test_relative_click_layout():
    packet = mouse_click_packet(True, True, False)
    assert len(packet) == 11
    assert packet[:2] == b"\x57\xab"
    assert packet[3] == Command.MOUSE_REL
    assert packet[4] == 5
    assert packet[5] == 0x01
    assert packet[6] == 0b11
    assert packet[7:10] == bytes(3)
    assert packet[10] == checksum(packet[:10])


@pytest.mark.parametrize(
    "left, right, middle, bits",
    [
        (True, False, False, 0b1),
        (False, True, False, 0b10),
        (False, False, True, 0b100),
        (False, False, False, 0),
    ],
)
def test_relative_click_buttons(left, right, middle, bits):
    assert mouse_click_packet(left, right, middle)[6] == bits


def test_command_values():
    assert Command(0x02) is Command.KEYBOARD
    assert Command(0x03) is Command.KEYBOARD_MULTI
    assert Command(0x04) is Command.MOUSE_ABS
    assert Command(0x05) is Command.MOUSE_REL