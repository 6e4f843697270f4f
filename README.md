# qkvm

qkvm turns a computer into a console for another machine. The other
machine's screen comes in through a video capture device and is shown in a
window. Key presses and mouse clicks go out through a CH9329
serial-to-USB-HID adapter, which the other machine sees as an ordinary USB
keyboard and mouse.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Usage

Plug in the capture device and the CH9329 adapter, then run:

```
qkvm
```

qkvm lists the serial ports whose name begins with `tty.usbserial-`, uses
the first of them, and opens it at 9600 baud, 8N1, with no flow control and
a write timeout of 0.4 seconds. If it finds no such port, or the port cannot
be opened, it logs the problem and exits with status 1.

It then opens a resizable 640x480 window and shows the first camera that
`pygame.camera` reports, scaled to fit with black bars around it. If no
camera can be started, a warning is logged and the window stays black.

While the window is open:

- Each key press is sent as a key-down report followed by a key-up report.
  The key-down report carries whichever modifier keys (Control, Shift,
  Option/Alt, Command/Win, left or right) were held before this key was
  pressed. Releasing a key sends nothing; it only clears a held modifier.
- A left, middle or right mouse click moves the remote pointer to the
  matching point on the captured picture, in absolute coordinates, then
  sends a button press and a release. Clicks on the letterbox bars around
  the picture are ignored.

Key mapping is based on macOS virtual key codes. The Help key maps to
Insert, and the keypad Clear key maps to Num Lock.

## Library use

The packet builders in `qkvm.packets` work without any hardware attached:

```python
from qkvm.keycodes import KeyCode
from qkvm.packets import Modifiers, key_down_packet, key_up_packet, mouse_move_packet

frame = key_down_packet(KeyCode.A, Modifiers(left_shift=True))
release = key_up_packet()
move = mouse_move_packet(0.5, 0.5)
```

Each frame starts with `57 AB`, an address byte, a `Command` byte and a
length, and ends with `checksum` (the byte sum modulo 256).
`mouse_move_packet` and `mouse_click_absolute_packet` take coordinates as
fractions of the screen and scale them by 4096; `mouse_click_packet` sends
a relative report with no movement. Out-of-range key codes or coordinates
raise `ValueError`.

- `qkvm.keycodes.KeyCode` holds the CH9329 key codes; `is_modifier()` is
  true for the eight modifier keys.
- `qkvm.keymap.key_to_scancode` converts a macOS virtual key code
  (`MacVirtualKey`) into a `KeyCode`, and returns `None` for keys it does
  not know.
- `qkvm.session.map_to_video` maps a click in a window onto the
  letterboxed video frame, returning `None` on the bars.
- `qkvm.session.KvmSession` wraps any object with `write`, `flush` and
  `close` (such as an open `serial.Serial`), tracks held modifiers, and
  sends the frames for `key_press`, `key_release` and `mouse_press`. It is
  a context manager that closes the port on exit. Write errors are logged,
  not raised.
- `qkvm.app.find_usb_ports` and `qkvm.app.open_serial` are the port
  discovery and setup used by the `qkvm` command.

## What it does not do

- Mouse movement without a click, dragging and the scroll wheel are not
  forwarded.
- Keys are sent as an immediate press-and-release; holding a key does not
  hold it on the remote machine (key repeat comes from the local window).
- There is no option to choose the serial port or the camera; the first
  one found is used.