from types import SimpleNamespace
from unittest import mock

import serial

from qkvm.app import find_usb_ports, main, open_serial


def _port(name):
    return SimpleNamespace(name=name, device=f"/dev/{name}", description="adapter")


def test_find_usb_ports_filters_and_keeps_order():
    ports = [
        _port("tty.Bluetooth-Incoming-Port"),
        _port("tty.usbserial-B"),
        _port("cu.usbserial-A"),
        _port("tty.usbserial-A"),
    ]
    found = find_usb_ports(ports)
    assert [p.name for p in found] == ["tty.usbserial-B", "tty.usbserial-A"]


def test_find_usb_ports_empty():
    assert find_usb_ports([_port("ttyS0")]) == []


def test_open_serial_uses_9600_8n1():
    with mock.patch("serial.Serial") as serial_cls:
        result = open_serial("/dev/tty.usbserial-TEST")
    assert result is serial_cls.return_value
    kwargs = serial_cls.call_args.kwargs
    assert kwargs["port"] == "/dev/tty.usbserial-TEST"
    assert kwargs["baudrate"] == 9600
    assert kwargs["bytesize"] == serial.EIGHTBITS
    assert kwargs["parity"] == serial.PARITY_NONE
    assert kwargs["stopbits"] == serial.STOPBITS_ONE
    assert kwargs["xonxoff"] is False
    assert kwargs["rtscts"] is False


def test_open_serial_propagates_failure():
    with mock.patch("serial.Serial", side_effect=serial.SerialException("busy")):
        try:
            open_serial("/dev/tty.usbserial-TEST")
        except serial.SerialException as exc:
            assert "busy" in str(exc)
        else:
            raise AssertionError("expected SerialException")


def test_main_without_usb_port_returns_1():
    with mock.patch("serial.tools.list_ports.comports", return_value=[_port("ttyS0")]):
        assert main([]) == 1


def test_main_returns_1_when_port_cannot_open():
    ports = [_port("tty.usbserial-TEST")]
    with mock.patch("serial.tools.list_ports.comports", return_value=ports), mock.patch(
        "serial.Serial", side_effect=serial.SerialException("denied")
    ) as serial_cls:
        assert main([]) == 1
    assert serial_cls.call_args.kwargs["baudrate"] == 9600