"""Software KVM driving a remote machine through a CH9329 USB HID serial bridge."""

__version__ = "1.0.0"
__all__ = ["__version__"]