import copy
import curses
import subprocess

import pytest

from printtui import printers_view
from printtui.cups import Device, Driver, Printer
from printtui.modes import EditBlock, EditMode, TUIMode
from printtui.state import AppState


class FakeWindow:
    def __init__(self, height, width):
        self.cells = [[" "] * width for _ in range(height)]
        self.attrs = {}

    def getmaxyx(self):
        return len(self.cells), len(self.cells[0])

    def addstr(self, y, x, text, attr=0):
        for offset, char in enumerate(text):
            self.cells[y][x + offset] = char
            self.attrs[(y, x + offset)] = attr

    def line(self, y):
        return "".join(self.cells[y])

    def text(self):
        return "\n".join(self.line(y) for y in range(len(self.cells)))


OUTPUTS = {
    ("lpinfo", "-v"): b"network ipp://printer.example.com/ipp\ndirect usb://Fake/Model\n",
    ("lpinfo", "-m"): b"drv:///sample.ppd Generic Sample\n",
    ("lpstat", "-e"): b"alpha\nbeta\n",
}


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_run(args, capture_output=True, check=False):
        recorded.append(tuple(args))
        key = tuple(args)
        if key in OUTPUTS:
            out = OUTPUTS[key]
        elif key[0] == "lpoptions":
            out = b"copies=1 sides=one-sided"
        else:
            out = b""
        return subprocess.CompletedProcess(args, 0, stdout=out, stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    return recorded


def make_state(count=3):
    printers = [Printer(f"p{i}", [f"opt{i}=yes"]) for i in range(count)]
    return AppState(
        printers=printers,
        selected_printer=0,
        selected_printer_name=printers[0].name if printers else "No Printer",
    )


def test_next_printer_advances_and_wraps():
    state = make_state()
    printers_view.next_printer(state)
    assert state.selected_printer == 1
    assert state.selected_printer_name == "p1"
    state.selected_printer = 2
    printers_view.next_printer(state)
    assert state.selected_printer == 0
    assert state.selected_printer_name == "p0"


def test_next_printer_on_empty_list_changes_nothing():
    state = make_state(0)
    before = copy.deepcopy(state)
    printers_view.next_printer(state)
    assert state == before


def test_previous_printer_wraps_to_last():
    state = make_state()
    printers_view.previous_printer(state)
    assert state.selected_printer == 2
    assert state.selected_printer_name == "p2"
    printers_view.previous_printer(state)
    assert state.selected_printer == 1


def test_next_then_previous_returns_to_start():
    state = make_state(4)
    for _ in range(4):
        printers_view.next_printer(state)
        printers_view.previous_printer(state)
        assert state.selected_printer == 0


def test_handle_key_moves_selection():
    state = make_state()
    printers_view.handle_key(state, "j")
    assert state.selected_printer == 1
    printers_view.handle_key(state, "k")
    assert state.selected_printer == 0


def test_handle_key_q_exits():
    state = make_state()
    printers_view.handle_key(state, "q")
    assert state.exited is True


def test_handle_key_ignores_unknown_keys():
    state = make_state()
    before = copy.deepcopy(state)
    printers_view.handle_key(state, "x")
    assert state == before


def test_add_printer_opens_form(calls):
    state = make_state()
    state.selected_printer = 2
    state.selected_edit_block = EditBlock.DRIVERS
    state.selected_edit_mode = EditMode.EDIT
    printers_view.handle_key(state, "a")
    assert state.mode == TUIMode.EDIT
    assert state.selected_printer == 0
    assert state.selected_printer_name == "New Printer"
    assert state.selected_edit_block == EditBlock.TITLE
    assert state.selected_edit_mode == EditMode.VIEW
    assert state.devices == [
        Device("ipp://printer.example.com/ipp"),
        Device("usb://Fake/Model"),
    ]
    assert state.drivers == [Driver("drv:///sample.ppd Generic Sample")]
    assert ("lpinfo", "-v") in calls and ("lpinfo", "-m") in calls


def test_delete_printer_removes_selected_and_reloads(calls):
    state = make_state()
    state.selected_printer = 1
    printers_view.handle_key(state, "d")
    assert calls[0] == ("lpadmin", "-x", "p1")
    assert [p.name for p in state.printers] == ["alpha", "beta"]
    assert state.selected_printer == 0


def test_delete_printer_with_no_printers_uses_empty_name(calls):
    state = make_state(0)
    printers_view.delete_printer(state)
    assert calls[0] == ("lpadmin", "-x", "")
    assert [p.name for p in state.printers] == ["alpha", "beta"]
    assert state.selected_printer == 0


def test_instruction_keys_in_order():
    keys = [key for _, key in printers_view.instructions()]
    assert keys == ["<k> ", "<j> ", "<a> ", "<d> ", "<q> "]
    labels = [label for label, _ in printers_view.instructions()]
    assert labels[0] == " Up " and labels[-1] == " Quit "


def test_title_singular_and_plural():
    assert printers_view.title([]) == " Printer "
    assert printers_view.title([Printer("a")]) == " Printer "
    assert printers_view.title([Printer("a"), Printer("b")]) == " Printers "


def test_printer_rows_are_names_in_order():
    printers = [Printer("a"), Printer("b")]
    assert printers_view.printer_rows(printers) == ["a", "b"]


def test_option_rows_for_selected_printer():
    printers = [Printer("a", ["x=1"]), Printer("b", ["y=2", "z=3"])]
    assert printers_view.option_rows(printers, 1) == ["y=2", "z=3"]
    assert printers_view.option_rows(printers, 0) == ["x=1"]


def test_option_rows_clamps_selection_and_handles_empty():
    printers = [Printer("a", ["x=1"]), Printer("b", ["y=2"])]
    assert printers_view.option_rows(printers, 7) == ["y=2"]
    assert printers_view.option_rows([], 0) == []


def test_render_draws_frame_title_and_lists():
    state = make_state(2)
    window = FakeWindow(8, 80)
    printers_view.render(state, window)
    top = window.line(0)
    assert top[0] == "┏" and top[-1] == "┓"
    assert " Printer TUI " in top
    bottom = window.line(7)
    assert bottom[0] == "┗" and bottom[-1] == "┛"
    assert "<q> " in bottom
    assert " Printers " in window.line(1)
    assert window.line(2)[1:].startswith("  p0")
    assert window.line(3)[1:].startswith("  p1")
    assert " Options " in window.line(1)
    assert "opt0=yes" in window.text()


def test_render_highlights_selected_printer():
    state = make_state(2)
    state.selected_printer = 1
    window = FakeWindow(8, 80)
    printers_view.render(state, window)
    assert window.attrs[(3, 1)] == curses.A_REVERSE
    assert window.attrs[(2, 1)] == curses.A_NORMAL
    assert "opt1=yes" in window.text()


def test_render_scrolls_to_keep_selection_visible():
    state = make_state(10)
    state.selected_printer = 9
    window = FakeWindow(6, 60)
    printers_view.render(state, window)
    assert "p9" in window.text()
    assert "p0" not in window.text()


def test_render_clips_in_small_windows():
    state = make_state(2)
    window = FakeWindow(4, 10)
    printers_view.render(state, window)
    assert window.line(0)[0] == "┏"
    assert window.line(3)[-1] == "┛"
    tiny = FakeWindow(1, 1)
    printers_view.render(state, tiny)
    assert tiny.line(0) == " "