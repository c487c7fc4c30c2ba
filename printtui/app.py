"""Entry point and main loop of the printer interface."""

from __future__ import annotations

import argparse
import curses
import os
import sys

from printtui import new_printer_view, printers_view
from printtui.cups import CupsError
from printtui.modes import TUIMode
from printtui.state import AppState

_ESCAPE_CODES = {"\x1b", 27}
_BACKSPACE_CODES = {"\x7f", "\b", 127, 8, curses.KEY_BACKSPACE}


def normalize_key(code: str | int) -> str | None:
    """Turn a key read from curses into the name the screens understand.

    Printable characters stay themselves, Escape becomes ``"esc"`` and
    Backspace ``"backspace"``; any other key gives ``None``.
    """
    if code in _ESCAPE_CODES:
        return new_printer_view.ESCAPE
    if code in _BACKSPACE_CODES:
        return new_printer_view.BACKSPACE
    if isinstance(code, str) and len(code) == 1 and code.isprintable():
        return code
    return None


def handle_key(state: AppState, key: str | None) -> None:
    """Pass a key to the screen that is shown."""
    if key is None:
        return
    if state.mode is TUIMode.VIEW:
        printers_view.handle_key(state, key)
    else:
        new_printer_view.handle_key(state, key)


def draw(state: AppState, window) -> None:
    """Redraw the whole window for the current screen."""
    window.erase()
    if state.mode is TUIMode.VIEW:
        printers_view.render(state, window)
    else:
        new_printer_view.render(state, window)
    window.refresh()


def run(window, state: AppState | None = None) -> AppState:
    """Load the printers and process keys until the user quits."""
    if state is None:
        state = AppState()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    window.keypad(True)
    state.load_printers()
    while not state.exited:
        draw(state, window)
        handle_key(state, normalize_key(window.get_wch()))
    return state


def main(argv: list[str] | None = None) -> int:
    """Start the interface in the terminal."""
    parser = argparse.ArgumentParser(
        prog="printtui",
        description="Manage CUPS printers from the terminal.",
    )
    parser.parse_args(argv)
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(run, AppState())
    except CupsError as exc:
        print(f"printtui: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())