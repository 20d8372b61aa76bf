from __future__ import annotations

from enum import Enum, IntEnum


class MenuState(str, Enum):
    """States of the interactive menu loop."""

    MAIN_MENU = "MAIN_MENU"
    EXIT = "EXIT"


class MenuChoice(IntEnum):
    """Entries of the main menu."""

    EXIT = 0
    ADD_WORK_TYPE = 1
    LIST_WORK_TYPES = 2
    AVERAGE_PAY = 3
