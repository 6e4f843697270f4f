[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qkvm"
version = "1.0.0"
description = "Software KVM: view a capture device and drive a remote machine through a CH9329 USB HID serial bridge"
requires-python = ">=3.10"
keywords = ["kvm", "ch9329", "hid", "serial", "keyboard", "mouse", "capture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Intended Audience :: System Administrators",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
]
dependencies = [
    "pyserial",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
qkvm = "qkvm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["qkvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
