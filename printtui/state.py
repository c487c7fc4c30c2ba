"""The state shared by every screen of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field

from printtui import cups
from printtui.cups import Device, Driver, Printer
from printtui.modes import EditBlock, EditMode, TUIMode


@dataclass
class AppState:
    """Everything the screens read and change."""

    exited: bool = False
    printers: list[Printer] = field(default_factory=list)
    devices: list[Device] = field(default_factory=list)
    drivers: list[Driver] = field(default_factory=list)
    selected_printer: int = 0
    selected_device: int = 0
    selected_driver: int = 0
    selected_edit_block: EditBlock = EditBlock.TITLE
    selected_edit_mode: EditMode = EditMode.VIEW
    selected_printer_name: str = ""
    mode: TUIMode = TUIMode.VIEW

    def exit(self) -> None:
        """Ask the main loop to stop."""
        self.exited = True

    def change_mode(self, mode: TUIMode) -> None:
        """Switch to another screen."""
        self.mode = mode

    def load_printers(self) -> None:
        """Fetch the printers and reset the selection to the first one."""
        self.printers = cups.get_all_printers()
        self.selected_printer = 0
        self.selected_printer_name = (
            self.printers[0].name if self.printers else "No Printer"
        )
        self.mode = TUIMode.VIEW
        self.selected_edit_block = EditBlock.TITLE
        self.selected_edit_mode = EditMode.VIEW