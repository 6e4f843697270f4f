"""Forwarding of keyboard and mouse input to a CH9329 over a serial port."""

from __future__ import annotations

import logging
from enum import IntFlag
from typing import Protocol

from .keycodes import KeyCode
from .keymap import key_to_scancode
from .packets import (
    Modifiers,
    key_down_packet,
    key_up_packet,
    mouse_click_packet,
    mouse_move_packet,
)

__all__ = ["Buttons", "map_to_video", "KvmSession"]

log = logging.getLogger(__name__)

_MODIFIER_FIELDS = {
    KeyCode.CONTROL: "left_ctrl",
    KeyCode.SHIFT: "left_shift",
    KeyCode.ALT: "left_alt",
    KeyCode.WIN: "left_win",
    KeyCode.RIGHT_CONTROL: "right_ctrl",
    KeyCode.RIGHT_SHIFT: "right_shift",
    KeyCode.RIGHT_ALT: "right_alt",
    KeyCode.RIGHT_WIN: "right_win",
}


class Buttons(IntFlag):
    """Mouse buttons held during a press."""

    NONE = 0
    LEFT = 0b1
    RIGHT = 0b10
    MIDDLE = 0b100


class _Port(Protocol):
    def write(self, data: bytes) -> object: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


def map_to_video(
    widget_size: tuple[int, int],
    video_size: tuple[int, int],
    position: tuple[float, float],
) -> tuple[float, float] | None:
    """Map a widget position to a fraction of the letterboxed video frame.

    Returns None when the position falls on a letterbox bar.
    """
    w_widget, h_widget = widget_size
    w_cam, h_cam = video_size
    if min(w_widget, h_widget, w_cam, h_cam) <= 0:
        raise ValueError("widget and video sizes must be positive")

    h_widget_calc = w_widget * h_cam // w_cam
    w_widget_calc = h_widget * w_cam // h_cam
    w_press, h_press = (int(coord) for coord in position)

    if h_widget > h_widget_calc:
        letter_size = (h_widget - h_widget_calc) // 2
        if h_press < letter_size or h_press > h_widget - letter_size:
            return None
        return w_press / w_widget, (h_press - letter_size) / h_widget_calc

    letter_size = (w_widget - w_widget_calc) // 2
    if w_press < letter_size or w_press > w_widget - letter_size:
        return None
    return (w_press - letter_size) / w_widget_calc, h_press / h_widget


class KvmSession:
    """Turns local key and mouse events into packets written to a port."""

    def __init__(self, port: _Port) -> None:
        self._port = port
        self._held: set[KeyCode] = set()

    @property
    def modifiers(self) -> Modifiers:
        """Modifier keys currently held down."""
        return Modifiers(**{_MODIFIER_FIELDS[code]: True for code in self._held})

    def _send(self, packet: bytes) -> None:
        try:
            self._port.write(packet)
            self._port.flush()
        except OSError as exc:
            log.warning("error writing data: %s", exc)
        else:
            log.debug("data written successfully")

    def key_press(self, native_key: int) -> KeyCode | None:
        """Send a press and release of the key; remember held modifiers."""
        code = key_to_scancode(native_key)
        if code is None:
            return None
        self._send(key_down_packet(code, self.modifiers))
        self._send(key_up_packet())
        if code.is_modifier():
            self._held.add(code)
        return code

    def key_release(self, native_key: int) -> KeyCode | None:
        """Forget a modifier once it is released; nothing is sent."""
        code = key_to_scancode(native_key)
        if code is not None and code.is_modifier():
            self._held.discard(code)
        return code

    def mouse_press(
        self,
        position: tuple[float, float],
        widget_size: tuple[int, int],
        video_size: tuple[int, int],
        buttons: Buttons,
    ) -> tuple[float, float] | None:
        """Move to the pressed point and click; return the point used, if any."""
        point = map_to_video(widget_size, video_size, position)
        if point is None:
            return None
        log.debug("buttons: %r at %r", buttons, point)
        self._send(mouse_move_packet(*point))
        self._send(
            mouse_click_packet(
                bool(buttons & Buttons.LEFT),
                bool(buttons & Buttons.RIGHT),
                bool(buttons & Buttons.MIDDLE),
            )
        )
        self._send(mouse_click_packet(False, False, False))
        return point

    def close(self) -> None:
        """Close the underlying port."""
        self._port.close()

    def __enter__(self) -> KvmSession:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()