"""Command-line entry: find the CH9329 adapter and run the capture viewer."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Iterable, Sequence
from typing import Any

import serial
from serial.tools import list_ports

from .keymap import MacVirtualKey, key_to_scancode
from .session import Buttons, KvmSession

__all__ = ["find_usb_ports", "open_serial", "main"]

log = logging.getLogger(__name__)

USB_PORT_PREFIX = "tty.usbserial-"
BAUD_RATE = 9600
WRITE_TIMEOUT = 0.4
WINDOW_SIZE = (640, 480)

# SDL scancodes are USB HID usage ids, so they invert through the macOS table.
_NATIVE_BY_USAGE = {
    int(code): vk for vk in MacVirtualKey if (code := key_to_scancode(vk)) is not None
}

_BUTTON_BY_PYGAME = {1: Buttons.LEFT, 2: Buttons.MIDDLE, 3: Buttons.RIGHT}


def find_usb_ports(ports: Iterable[Any]) -> list[Any]:
    """Keep the ports whose name marks a USB serial adapter, in order."""
    return [port for port in ports if port.name.startswith(USB_PORT_PREFIX)]


def open_serial(port_name: str) -> serial.Serial:
    """Open the port at 9600 8N1 without flow control."""
    device = port_name
    if "/" not in port_name and "\\" not in port_name and os.name != "nt":
        device = f"/dev/{port_name}"
    return serial.Serial(
        port=device,
        baudrate=BAUD_RATE,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        xonxoff=False,
        rtscts=False,
        dsrdtr=False,
        write_timeout=WRITE_TIMEOUT,
    )


def _start_camera(pygame: Any) -> Any:
    import pygame.camera

    try:
        pygame.camera.init()
        names = pygame.camera.list_cameras()
        if not names:
            log.warning("no camera is available")
            return None
        camera = pygame.camera.Camera(names[0])
        camera.start()
    except (pygame.error, RuntimeError, OSError, ImportError) as exc:
        log.warning("camera could not be started: %s", exc)
        return None
    log.debug("camera connected")
    return camera


def _pressed_buttons(pygame: Any, button: int) -> Buttons:
    left, middle, right = pygame.mouse.get_pressed()[:3]
    held = _BUTTON_BY_PYGAME.get(button, Buttons.NONE)
    if left:
        held |= Buttons.LEFT
    if middle:
        held |= Buttons.MIDDLE
    if right:
        held |= Buttons.RIGHT
    return held


def _draw(pygame: Any, screen: Any, frame: Any) -> None:
    screen.fill((0, 0, 0))
    if frame is None:
        return
    sw, sh = screen.get_size()
    fw, fh = frame.get_size()
    scale = min(sw / fw, sh / fh)
    size = (max(1, int(fw * scale)), max(1, int(fh * scale)))
    scaled = pygame.transform.scale(frame, size)
    screen.blit(scaled, ((sw - size[0]) // 2, (sh - size[1]) // 2))


def _run_viewer(session: KvmSession) -> None:
    import pygame

    pygame.init()
    pygame.display.set_caption("qKVM")
    screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    pygame.key.set_repeat(500, 30)
    camera = _start_camera(pygame)
    clock = pygame.time.Clock()
    frame = None
    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    native = _NATIVE_BY_USAGE.get(event.scancode)
                    if native is not None:
                        session.key_press(native)
                elif event.type == pygame.KEYUP:
                    native = _NATIVE_BY_USAGE.get(event.scancode)
                    if native is not None:
                        session.key_release(native)
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button in _BUTTON_BY_PYGAME
                ):
                    widget_size = screen.get_size()
                    video_size = camera.get_size() if camera is not None else widget_size
                    session.mouse_press(
                        event.pos,
                        widget_size,
                        video_size,
                        _pressed_buttons(pygame, event.button),
                    )
            if camera is not None and camera.query_image():
                frame = camera.get_image()
            _draw(pygame, screen, frame)
            pygame.display.flip()
            clock.tick(60)
    finally:
        if camera is not None:
            camera.stop()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the first USB serial adapter found."""
    parser = argparse.ArgumentParser(
        prog="qkvm",
        description="View a capture device and forward keyboard and mouse "
        "input through a CH9329 serial adapter.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    usb_ports = find_usb_ports(list_ports.comports())
    log.info("available serial ports:")
    for port in usb_ports:
        log.info("port: %s description: %s", port.name, port.description)
    if not usb_ports:
        log.error("no USB serial port found")
        return 1

    try:
        connection = open_serial(usb_ports[0].name)
    except serial.SerialException as exc:
        log.error("failed to open port: %s", exc)
        return 1

    with KvmSession(connection) as session:
        _run_viewer(session)
    return 0