"""Interface modes and the blocks of the new-printer form."""

from __future__ import annotations

from enum import Enum


class TUIMode(Enum):
    """Which screen the interface shows."""

    VIEW = "view"
    EDIT = "edit"


class EditBlock(Enum):
    """The field of the new-printer form that has the focus, in form order."""

    TITLE = "title"
    DEVICES = "devices"
    DRIVERS = "drivers"


class EditMode(Enum):
    """Whether the form is being browsed or a field is being edited."""

    VIEW = "view"
    EDIT = "edit"