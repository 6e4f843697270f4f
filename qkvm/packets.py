"""Builders for CH9329 serial protocol packets."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Command",
    "Modifiers",
    "checksum",
    "key_down_packet",
    "key_up_packet",
    "mouse_move_packet",
    "mouse_click_absolute_packet",
    "mouse_click_packet",
]

HEADER = b"\x57\xab"
ADDRESS = 0x00
ABSOLUTE_RANGE = 4096

_KEYBOARD_LEN = 8
_MOUSE_ABS_LEN = 7
_MOUSE_REL_LEN = 5


class Command(IntEnum):
    """Command bytes of the CH9329 protocol."""

    KEYBOARD = 0x02
    KEYBOARD_MULTI = 0x03
    MOUSE_ABS = 0x04
    MOUSE_REL = 0x05


@dataclass(frozen=True)
class Modifiers:
    """State of the eight keyboard modifier keys."""

    left_ctrl: bool = False
    left_shift: bool = False
    left_alt: bool = False
    left_win: bool = False
    right_ctrl: bool = False
    right_shift: bool = False
    right_alt: bool = False
    right_win: bool = False

    def to_byte(self) -> int:
        """Pack the flags into the HID modifier byte, left ctrl in bit 0."""
        flags = (
            self.left_ctrl,
            self.left_shift,
            self.left_alt,
            self.left_win,
            self.right_ctrl,
            self.right_shift,
            self.right_alt,
            self.right_win,
        )
        return sum(1 << bit for bit, flag in enumerate(flags) if flag)


def checksum(data: bytes) -> int:
    """Sum of all bytes modulo 256."""
    return sum(data) & 0xFF


def _frame(command: Command, length: int, payload: bytes) -> bytes:
    body = HEADER + bytes((ADDRESS, command, length)) + payload
    return body + bytes((checksum(body),))


def _buttons(left: bool, right: bool, middle: bool) -> int:
    return (0b1 if left else 0) | (0b10 if right else 0) | (0b100 if middle else 0)


def _absolute(value: float) -> int:
    scaled = int(ABSOLUTE_RANGE * value)
    if not 0 <= scaled <= 0xFFFF:
        raise ValueError(f"coordinate {value!r} is out of range")
    return scaled


def key_down_packet(code: int, modifiers: Modifiers | None = None) -> bytes:
    """Keyboard report with one key held and the given modifiers."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"key code {code!r} does not fit in a byte")
    mods = modifiers if modifiers is not None else Modifiers()
    payload = bytes((mods.to_byte(), 0, code)) + bytes(5)
    return _frame(Command.KEYBOARD, _KEYBOARD_LEN, payload)


def key_up_packet() -> bytes:
    """Keyboard report with every key released."""
    return key_down_packet(0, Modifiers())


def _mouse_absolute(x: float, y: float, buttons: int) -> bytes:
    payload = struct.pack("<BBHHB", 0x02, buttons, _absolute(x), _absolute(y), 0)
    return _frame(Command.MOUSE_ABS, _MOUSE_ABS_LEN, payload)


def mouse_move_packet(x: float, y: float) -> bytes:
    """Absolute mouse move to (x, y), each a fraction of the screen from 0 to 1."""
    return _mouse_absolute(x, y, 0)


def mouse_click_absolute_packet(
    x: float, y: float, left: bool, right: bool, middle: bool
) -> bytes:
    """Absolute mouse report at (x, y) with the given buttons held."""
    return _mouse_absolute(x, y, _buttons(left, right, middle))


def mouse_click_packet(left: bool, right: bool, middle: bool) -> bytes:
    """Relative mouse report with no movement and the given buttons held."""
    payload = bytes((0x01, _buttons(left, right, middle), 0, 0, 0))
    return _frame(Command.MOUSE_REL, _MOUSE_REL_LEN, payload)