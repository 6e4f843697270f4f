"""Translation of macOS virtual key codes to CH9329 usage codes."""

from __future__ import annotations

from enum import IntEnum, unique
from types import MappingProxyType

from .keycodes import KeyCode

__all__ = ["MacVirtualKey", "key_to_scancode"]


@unique
class MacVirtualKey(IntEnum):
    """macOS hardware-independent virtual key codes for the mapped keys."""

    ANSI_A = 0x00
    ANSI_S = 0x01
    ANSI_D = 0x02
    ANSI_F = 0x03
    ANSI_H = 0x04
    ANSI_G = 0x05
    ANSI_Z = 0x06
    ANSI_X = 0x07
    ANSI_C = 0x08
    ANSI_V = 0x09
    ANSI_B = 0x0B
    ANSI_Q = 0x0C
    ANSI_W = 0x0D
    ANSI_E = 0x0E
    ANSI_R = 0x0F
    ANSI_Y = 0x10
    ANSI_T = 0x11
    ANSI_1 = 0x12
    ANSI_2 = 0x13
    ANSI_3 = 0x14
    ANSI_4 = 0x15
    ANSI_6 = 0x16
    ANSI_5 = 0x17
    ANSI_9 = 0x19
    ANSI_7 = 0x1A
    ANSI_MINUS = 0x1B
    ANSI_8 = 0x1C
    ANSI_0 = 0x1D
    ANSI_RIGHT_BRACKET = 0x1E
    ANSI_O = 0x1F
    ANSI_U = 0x20
    ANSI_LEFT_BRACKET = 0x21
    ANSI_I = 0x22
    ANSI_P = 0x23
    RETURN = 0x24
    ANSI_L = 0x25
    ANSI_J = 0x26
    ANSI_QUOTE = 0x27
    ANSI_K = 0x28
    ANSI_SEMICOLON = 0x29
    ANSI_BACKSLASH = 0x2A
    ANSI_COMMA = 0x2B
    ANSI_SLASH = 0x2C
    ANSI_N = 0x2D
    ANSI_M = 0x2E
    ANSI_PERIOD = 0x2F
    TAB = 0x30
    SPACE = 0x31
    ANSI_GRAVE = 0x32
    DELETE = 0x33
    ESCAPE = 0x35
    RIGHT_COMMAND = 0x36
    COMMAND = 0x37
    SHIFT = 0x38
    CAPS_LOCK = 0x39
    OPTION = 0x3A
    CONTROL = 0x3B
    RIGHT_SHIFT = 0x3C
    RIGHT_OPTION = 0x3D
    RIGHT_CONTROL = 0x3E
    ANSI_KEYPAD_DECIMAL = 0x41
    ANSI_KEYPAD_MULTIPLY = 0x43
    ANSI_KEYPAD_PLUS = 0x45
    ANSI_KEYPAD_CLEAR = 0x47
    ANSI_KEYPAD_DIVIDE = 0x4B
    ANSI_KEYPAD_ENTER = 0x4C
    ANSI_KEYPAD_MINUS = 0x4E
    ANSI_KEYPAD_0 = 0x52
    ANSI_KEYPAD_1 = 0x53
    ANSI_KEYPAD_2 = 0x54
    ANSI_KEYPAD_3 = 0x55
    ANSI_KEYPAD_4 = 0x56
    ANSI_KEYPAD_5 = 0x57
    ANSI_KEYPAD_6 = 0x58
    ANSI_KEYPAD_7 = 0x59
    ANSI_KEYPAD_8 = 0x5B
    ANSI_KEYPAD_9 = 0x5C
    F5 = 0x60
    F6 = 0x61
    F7 = 0x62
    F3 = 0x63
    F8 = 0x64
    F9 = 0x65
    F11 = 0x67
    F10 = 0x6D
    F12 = 0x6F
    HELP = 0x72
    HOME = 0x73
    PAGE_UP = 0x74
    FORWARD_DELETE = 0x75
    F4 = 0x76
    END = 0x77
    F2 = 0x78
    PAGE_DOWN = 0x79
    F1 = 0x7A
    LEFT_ARROW = 0x7B
    RIGHT_ARROW = 0x7C
    DOWN_ARROW = 0x7D
    UP_ARROW = 0x7E


def _build_table() -> dict[int, KeyCode]:
    vk = MacVirtualKey
    table: dict[int, KeyCode] = {}
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        table[vk[f"ANSI_{letter}"]] = KeyCode[letter]
    for digit in "0123456789":
        table[vk[f"ANSI_{digit}"]] = KeyCode[f"DIGIT_{digit}"]
        table[vk[f"ANSI_KEYPAD_{digit}"]] = KeyCode[f"KEYPAD_{digit}"]
    for number in range(1, 13):
        table[vk[f"F{number}"]] = KeyCode[f"F{number}"]
    table.update(
        {
            vk.RETURN: KeyCode.ENTER,
            vk.ESCAPE: KeyCode.ESCAPE,
            vk.DELETE: KeyCode.BACKSPACE,
            vk.TAB: KeyCode.TAB,
            vk.SPACE: KeyCode.SPACE,
            vk.ANSI_MINUS: KeyCode.MINUS,
            vk.ANSI_LEFT_BRACKET: KeyCode.LEFT_BRACKET,
            vk.ANSI_RIGHT_BRACKET: KeyCode.RIGHT_BRACKET,
            vk.ANSI_BACKSLASH: KeyCode.BACKSLASH,
            vk.ANSI_SEMICOLON: KeyCode.SEMICOLON,
            vk.ANSI_QUOTE: KeyCode.QUOTE,
            vk.ANSI_GRAVE: KeyCode.BACK_QUOTE,
            vk.ANSI_COMMA: KeyCode.COMMA,
            vk.ANSI_PERIOD: KeyCode.PERIOD,
            vk.ANSI_SLASH: KeyCode.SLASH,
            vk.CAPS_LOCK: KeyCode.CAPS_LOCK,
            vk.HELP: KeyCode.INSERT,
            vk.HOME: KeyCode.HOME,
            vk.PAGE_UP: KeyCode.PAGE_UP,
            vk.FORWARD_DELETE: KeyCode.FORWARD_DELETE,
            vk.END: KeyCode.END,
            vk.PAGE_DOWN: KeyCode.PAGE_DOWN,
            vk.RIGHT_ARROW: KeyCode.RIGHT_ARROW,
            vk.LEFT_ARROW: KeyCode.LEFT_ARROW,
            vk.DOWN_ARROW: KeyCode.DOWN_ARROW,
            vk.UP_ARROW: KeyCode.UP_ARROW,
            vk.ANSI_KEYPAD_CLEAR: KeyCode.KEYPAD_NUM_LOCK,
            vk.ANSI_KEYPAD_DIVIDE: KeyCode.KEYPAD_DIVIDE,
            vk.ANSI_KEYPAD_MULTIPLY: KeyCode.KEYPAD_MULTIPLY,
            vk.ANSI_KEYPAD_MINUS: KeyCode.KEYPAD_MINUS,
            vk.ANSI_KEYPAD_PLUS: KeyCode.KEYPAD_PLUS,
            vk.ANSI_KEYPAD_ENTER: KeyCode.KEYPAD_ENTER,
            vk.ANSI_KEYPAD_DECIMAL: KeyCode.KEYPAD_PERIOD,
            vk.CONTROL: KeyCode.CONTROL,
            vk.SHIFT: KeyCode.SHIFT,
            vk.OPTION: KeyCode.ALT,
            vk.COMMAND: KeyCode.WIN,
            vk.RIGHT_CONTROL: KeyCode.RIGHT_CONTROL,
            vk.RIGHT_SHIFT: KeyCode.RIGHT_SHIFT,
            vk.RIGHT_OPTION: KeyCode.RIGHT_ALT,
            vk.RIGHT_COMMAND: KeyCode.RIGHT_WIN,
        }
    )
    return table


_TABLE = MappingProxyType(_build_table())


def key_to_scancode(key: int) -> KeyCode | None:
    """Return the usage code for a macOS virtual key, or None if it is unmapped."""
    return _TABLE.get(key)