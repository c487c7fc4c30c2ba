"""Queries and administration of CUPS print queues through its command-line tools."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field


class CupsError(RuntimeError):
    """Raised when a CUPS command cannot be run or its output cannot be read."""


@dataclass(frozen=True)
class Device:
    """A device URI reported by ``lpinfo -v``."""

    value: str


@dataclass(frozen=True)
class Driver:
    """A driver line reported by ``lpinfo -m``."""

    value: str


@dataclass
class Printer:
    """An enabled print queue and its options."""

    name: str = ""
    options: list[str] = field(default_factory=list)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_devices(text: str) -> list[Device]:
    """Take the URI, the second word, of every non-empty line."""
    devices = []
    for raw in _lines(text):
        line = raw.strip()
        if not line:
            continue
        words = line.split(" ")
        if len(words) >= 2:
            devices.append(Device(words[1]))
    return devices


def parse_drivers(text: str) -> list[Driver]:
    """Make one driver of every line, trimmed."""
    return [Driver(line.strip()) for line in _lines(text)]


def parse_printer_names(text: str) -> list[str]:
    """Return the non-empty, trimmed lines of a printer listing."""
    return [name.strip() for name in text.split("\n") if name.strip()]


def parse_options(text: str) -> list[str]:
    """Split an option listing on single spaces."""
    return text.split(" ")


def _run(*args: str) -> str:
    try:
        completed = subprocess.run(list(args), capture_output=True, check=False)
    except OSError as exc:
        raise CupsError(
            f"failed to execute {args[0]}; check that CUPS is installed"
        ) from exc
    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CupsError(f"output of {args[0]} is not valid UTF-8") from exc


def get_all_devices() -> list[Device]:
    """List the devices CUPS can reach."""
    return parse_devices(_run("lpinfo", "-v"))


def get_all_drivers() -> list[Driver]:
    """List the drivers CUPS knows."""
    return parse_drivers(_run("lpinfo", "-m"))


def get_all_printers() -> list[Printer]:
    """List the enabled printers together with their options."""
    return [
        Printer(name, parse_options(_run("lpoptions", "-d", name)))
        for name in parse_printer_names(_run("lpstat", "-e"))
    ]


def create_printer(name: str, device: str, driver: str) -> None:
    """Add and enable a printer on the given device with the given driver."""
    _run("lpadmin", "-p", name, "-E", "-v", device, "-m", driver)


def remove_printer(name: str) -> None:
    """Delete a printer."""
    _run("lpadmin", "-x", name)