"""The main screen: the list of enabled printers and the options of the selected one."""

from __future__ import annotations

import curses
from collections.abc import Sequence

from printtui import cups
from printtui.cups import Printer
from printtui.modes import EditBlock, EditMode, TUIMode
from printtui.state import AppState

_HIGHLIGHT_SYMBOL = "  "

_INSTRUCTIONS: tuple[tuple[str, str], ...] = (
    (" Up ", "<k> "),
    (" Down ", "<j> "),
    (" Add new printer ", "<a> "),
    (" Remove printer ", "<d> "),
    (" Quit ", "<q> "),
)


def handle_key(state: AppState, key: str) -> None:
    """React to a key pressed on the printer list."""
    actions = {
        "k": previous_printer,
        "j": next_printer,
        "a": add_printer,
        "d": delete_printer,
        "q": AppState.exit,
    }
    action = actions.get(key)
    if action is not None:
        action(state)


def _sync_name(state: AppState) -> None:
    if 0 <= state.selected_printer < len(state.printers):
        state.selected_printer_name = state.printers[state.selected_printer].name
    else:
        state.selected_printer_name = "No Printer"


def next_printer(state: AppState) -> None:
    """Select the next printer, wrapping to the first."""
    if not state.printers:
        return
    if state.selected_printer >= len(state.printers) - 1:
        state.selected_printer = 0
    else:
        state.selected_printer += 1
    _sync_name(state)


def previous_printer(state: AppState) -> None:
    """Select the previous printer, wrapping to the last."""
    if not state.printers:
        return
    if state.selected_printer == 0:
        state.selected_printer = len(state.printers) - 1
    else:
        state.selected_printer -= 1
    _sync_name(state)


def add_printer(state: AppState) -> None:
    """Open the new-printer form with fresh lists of devices and drivers."""
    state.selected_printer = 0
    state.selected_printer_name = "New Printer"
    state.selected_device = 0
    state.selected_driver = 0
    state.selected_edit_block = EditBlock.TITLE
    state.selected_edit_mode = EditMode.VIEW
    state.devices = cups.get_all_devices()
    state.drivers = cups.get_all_drivers()
    state.change_mode(TUIMode.EDIT)


def delete_printer(state: AppState) -> None:
    """Remove the selected printer and reload the list."""
    if 0 <= state.selected_printer < len(state.printers):
        target = state.printers[state.selected_printer]
    else:
        target = Printer()
    cups.remove_printer(target.name)
    state.printers = cups.get_all_printers()
    state.selected_printer = 0


def instructions() -> list[tuple[str, str]]:
    """Return the key help as (label, key) pairs."""
    return list(_INSTRUCTIONS)


def title(printers: Sequence[Printer]) -> str:
    """Title of the printer list, plural when more than one printer is shown."""
    return " Printers " if len(printers) > 1 else " Printer "


def printer_rows(printers: Sequence[Printer]) -> list[str]:
    """One row per printer: its name."""
    return [printer.name for printer in printers]


def option_rows(printers: Sequence[Printer], selected: int) -> list[str]:
    """The options of the selected printer, clamping the selection to the list."""
    if not printers:
        return []
    selected = min(selected, len(printers) - 1)
    return list(printers[selected].options)


def _put(window, y: int, x: int, text: str, limit: int, attr: int = curses.A_NORMAL) -> None:
    text = text[: max(0, limit)]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _frame(window, top: int, left: int, height: int, width: int) -> None:
    inner = width - 2
    _put(window, top, left, "┏" + "━" * inner + "┓", width)
    for y in range(top + 1, top + height - 1):
        _put(window, y, left, "┃", 1)
        _put(window, y, left + width - 1, "┃", 1)
    _put(window, top + height - 1, left, "┗" + "━" * inner + "┛", width)


def _centered(window, y: int, left: int, width: int, pieces: list[tuple[str, int]]) -> None:
    available = width - 2
    if available <= 0:
        return
    total = sum(len(text) for text, _ in pieces)
    x = left + 1 + max(0, (available - total) // 2)
    end = left + width - 1
    for text, attr in pieces:
        if x >= end:
            break
        _put(window, y, x, text, end - x, attr)
        x += len(text)


def _table(window, top: int, left: int, height: int, width: int,
           rows: list[str], selected: int | None) -> None:
    if height <= 0 or width <= 0:
        return
    offset = 0
    if selected is not None:
        offset = max(0, selected - height + 1)
    prefix = _HIGHLIGHT_SYMBOL if selected is not None else ""
    for line, (index, row) in enumerate(
        list(enumerate(rows))[offset:offset + height]
    ):
        attr = curses.A_REVERSE if index == selected else curses.A_NORMAL
        _put(window, top + line, left, (prefix + row).ljust(width), width, attr)


def render(state: AppState, window) -> None:
    """Draw the printer list and the options of the selected printer."""
    height, width = window.getmaxyx()
    if height < 2 or width < 2:
        return

    _frame(window, 0, 0, height, width)
    _centered(window, 0, 0, width, [(" Printer TUI ", curses.A_BOLD)])
    pieces: list[tuple[str, int]] = []
    for label, key in instructions():
        pieces.append((label, curses.A_NORMAL))
        pieces.append((key, curses.A_BOLD))
    _centered(window, height - 1, 0, width, pieces)

    inner_height, inner_width = height - 2, width - 2
    if inner_height <= 0 or inner_width <= 0:
        return
    left_width = inner_width // 2
    right_width = inner_width - left_width

    if left_width > 0:
        _put(window, 1, 1, title(state.printers), left_width, curses.A_BOLD)
        _table(
            window, 2, 1, inner_height - 1, left_width,
            printer_rows(state.printers), state.selected_printer,
        )

    if right_width >= 2 and inner_height >= 2:
        box_left = 1 + left_width
        _frame(window, 1, box_left, inner_height, right_width)
        _centered(window, 1, box_left, right_width, [(" Options ", curses.A_BOLD)])
        _table(
            window, 2, box_left + 1, inner_height - 2, right_width - 2,
            option_rows(state.printers, state.selected_printer), None,
        )