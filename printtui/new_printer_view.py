"""The new-printer form: a name, a device and a driver for a queue to create."""

from __future__ import annotations

import curses
from collections.abc import Sequence

from printtui import cups
from printtui.cups import Device, Driver
from printtui.modes import EditBlock, EditMode, TUIMode
from printtui.state import AppState

ESCAPE = "esc"
BACKSPACE = "backspace"

_HIGHLIGHT_SYMBOL = "  "
_BOX_HEIGHT = 3

_VIEW_INSTRUCTIONS: tuple[tuple[str, str], ...] = (
    (" Up ", "<k> "),
    (" Down ", "<j> "),
    (" Edit Mode ", "<e> "),
    (" Quit Add Mode ", "<Esc> "),
    (" Quit ", "<q> "),
)

_TITLE_INSTRUCTIONS: tuple[tuple[str, str], ...] = (
    (" Quit Edit Mode ", "<Esc> "),
)

_LIST_INSTRUCTIONS: tuple[tuple[str, str], ...] = (
    (" Up ", "<k> "),
    (" Down ", "<j> "),
    (" Quit Edit Mode ", "<Esc> "),
)

_BLOCK_ORDER = (EditBlock.TITLE, EditBlock.DEVICES, EditBlock.DRIVERS)


def handle_key(state: AppState, key: str) -> None:
    """React to a key pressed on the form.

    Printable keys are single characters; Escape and Backspace arrive as
    ``"esc"`` and ``"backspace"``.
    """
    if state.selected_edit_mode is EditMode.VIEW:
        _handle_view_key(state, key)
    elif state.selected_edit_block is EditBlock.TITLE:
        _handle_title_key(state, key)
    elif state.selected_edit_block is EditBlock.DEVICES:
        _handle_list_key(state, key, previous_device, next_device)
    else:
        _handle_list_key(state, key, previous_driver, next_driver)


def _handle_view_key(state: AppState, key: str) -> None:
    if key == "k":
        previous_block(state)
    elif key == "j":
        next_block(state)
    elif key == "e":
        state.selected_edit_mode = EditMode.EDIT
    elif key == "w":
        write_printer(state)
        state.printers = cups.get_all_printers()
        state.change_mode(TUIMode.VIEW)
    elif key == ESCAPE:
        state.printers = cups.get_all_printers()
        state.change_mode(TUIMode.VIEW)
    elif key == "q":
        state.exit()


def _is_name_char(key: str) -> bool:
    return len(key) == 1 and ((key.isascii() and key.isalnum()) or key in "_-")


def _handle_title_key(state: AppState, key: str) -> None:
    if _is_name_char(key):
        state.selected_printer_name += key
    elif key == BACKSPACE:
        state.selected_printer_name = state.selected_printer_name[:-1]
    elif key == ESCAPE:
        state.selected_edit_mode = EditMode.VIEW


def _handle_list_key(state: AppState, key: str, up, down) -> None:
    if key == "k":
        up(state)
    elif key == "j":
        down(state)
    elif key == ESCAPE:
        state.selected_edit_mode = EditMode.VIEW


def next_block(state: AppState) -> None:
    """Move the focus to the next field, wrapping to the first."""
    index = _BLOCK_ORDER.index(state.selected_edit_block)
    state.selected_edit_block = _BLOCK_ORDER[(index + 1) % len(_BLOCK_ORDER)]


def previous_block(state: AppState) -> None:
    """Move the focus to the previous field, wrapping to the last."""
    index = _BLOCK_ORDER.index(state.selected_edit_block)
    state.selected_edit_block = _BLOCK_ORDER[(index - 1) % len(_BLOCK_ORDER)]


def _step_forward(selected: int, count: int) -> int:
    return 0 if selected >= count - 1 else selected + 1


def _step_back(selected: int, count: int) -> int:
    return count - 1 if selected == 0 else selected - 1


def next_device(state: AppState) -> None:
    """Select the next device, wrapping to the first."""
    if state.devices:
        state.selected_device = _step_forward(state.selected_device, len(state.devices))


def previous_device(state: AppState) -> None:
    """Select the previous device, wrapping to the last."""
    if state.devices:
        state.selected_device = _step_back(state.selected_device, len(state.devices))


def next_driver(state: AppState) -> None:
    """Select the next driver, wrapping to the first."""
    if state.drivers:
        state.selected_driver = _step_forward(state.selected_driver, len(state.drivers))


def previous_driver(state: AppState) -> None:
    """Select the previous driver, wrapping to the last."""
    if state.drivers:
        state.selected_driver = _step_back(state.selected_driver, len(state.drivers))


def driver_name(value: str) -> str:
    """The driver's model name: the first space-separated word of its line."""
    return value.split(" ")[0]


def write_printer(state: AppState) -> None:
    """Create the printer described by the form."""
    if 0 <= state.selected_device < len(state.devices):
        device = state.devices[state.selected_device].value
    else:
        device = "No URI"
    if 0 <= state.selected_driver < len(state.drivers):
        driver = driver_name(state.drivers[state.selected_driver].value)
    else:
        driver = "No Driver"
    cups.create_printer(state.selected_printer_name, device, driver)


def instructions(edit_mode: EditMode, block: EditBlock) -> list[tuple[str, str]]:
    """Return the key help for the form as (label, key) pairs."""
    if edit_mode is EditMode.VIEW:
        return list(_VIEW_INSTRUCTIONS)
    if block is EditBlock.TITLE:
        return list(_TITLE_INSTRUCTIONS)
    return list(_LIST_INSTRUCTIONS)


def _label(items: Sequence[Device] | Sequence[Driver], selected: int | None, missing: str) -> str:
    index = 0 if selected is None else selected
    if 0 <= index < len(items):
        return items[index].value
    return missing


def device_label(devices: Sequence[Device], selected: int | None) -> str:
    """Text of the device field: the selected device, the first when none is."""
    return _label(devices, selected, "No Device")


def driver_label(drivers: Sequence[Driver], selected: int | None) -> str:
    """Text of the driver field: the selected driver, the first when none is."""
    return _label(drivers, selected, "No Driver")


def _put(window, y: int, x: int, text: str, limit: int, attr: int = curses.A_NORMAL) -> None:
    text = text[: max(0, limit)]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _frame(window, top: int, left: int, height: int, width: int,
           attr: int = curses.A_NORMAL) -> None:
    inner = width - 2
    _put(window, top, left, "┏" + "━" * inner + "┓", width, attr)
    for y in range(top + 1, top + height - 1):
        _put(window, y, left, "┃", 1, attr)
        _put(window, y, left + width - 1, "┃", 1, attr)
    _put(window, top + height - 1, left, "┗" + "━" * inner + "┛", width, attr)


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
           rows: list[str], selected: int) -> None:
    if height <= 0 or width <= 0:
        return
    offset = max(0, selected - height + 1)
    visible = list(enumerate(rows))[offset:offset + height]
    for line, (index, row) in enumerate(visible):
        attr = curses.A_REVERSE if index == selected else curses.A_NORMAL
        text = (_HIGHLIGHT_SYMBOL + row).ljust(width)
        _put(window, top + line, left, text, width, attr)


def _field(window, top: int, left: int, width: int, title: str, text: str,
           focused: bool) -> None:
    attr = curses.A_BOLD if focused else curses.A_NORMAL
    _frame(window, top, left, _BOX_HEIGHT, width, attr)
    _put(window, top, left + 1, title, width - 2, curses.A_BOLD)
    _put(window, top + 1, left + 1, text, width - 2)


def render(state: AppState, window) -> None:
    """Draw the form, and the list of choices when a list field is being edited."""
    height, width = window.getmaxyx()
    if height < 2 or width < 2:
        return

    block = state.selected_edit_block
    editing = state.selected_edit_mode is EditMode.EDIT

    _frame(window, 0, 0, height, width)
    _centered(window, 0, 0, width, [(" Edit ", curses.A_BOLD)])
    pieces: list[tuple[str, int]] = []
    for label, key in instructions(state.selected_edit_mode, block):
        pieces.append((label, curses.A_NORMAL))
        pieces.append((key, curses.A_BOLD))
    _centered(window, height - 1, 0, width, pieces)

    inner_height, inner_width = height - 2, width - 2
    if inner_height <= 0 or inner_width <= 0:
        return

    split = editing and block in (EditBlock.DEVICES, EditBlock.DRIVERS)
    left_width = inner_width // 2 if split else inner_width

    fields = (
        (" Printer Name ", state.selected_printer_name, EditBlock.TITLE),
        (" Device ", device_label(state.devices, state.selected_device), EditBlock.DEVICES),
        (" Driver ", driver_label(state.drivers, state.selected_driver), EditBlock.DRIVERS),
    )
    if left_width >= 2:
        for position, (field_title, text, field_block) in enumerate(fields):
            top = 1 + position * _BOX_HEIGHT
            if top + _BOX_HEIGHT > 1 + inner_height:
                break
            _field(window, top, 1, left_width, field_title, text, field_block is block)

    if not split:
        return
    right_left = 1 + left_width
    right_width = inner_width - left_width
    if right_width <= 0:
        return
    if block is EditBlock.DEVICES:
        list_title = " Available Devices "
        rows = [device.value for device in state.devices]
        selected = state.selected_device
    else:
        list_title = " Available Drivers "
        rows = [driver.value for driver in state.drivers]
        selected = state.selected_driver
    _put(window, 1, right_left, list_title, right_width, curses.A_BOLD)
    _table(window, 2, right_left, inner_height - 1, right_width, rows, selected)