"""
Title: Plane State and Command Definitions (PlaneState / PlaneCommand Enums)
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.0

Purpose:
Defines the authoritative set of aircraft ground/air states and the pilot
commands used by the plane state machine. States carry the short location
label used in transition messages; commands carry the menu selector and
label used by the CLI driver.

Targeted Requirements:
- Exactly one of HANGARED, ON_RUNWAY, AIRBORNE holds at any time.
- Four commands: exit hangar, enter hangar, take off, land.

Scope and Limitations:
- Logical states only; no position, speed, or timing attributes are modelled.
- No hierarchy or substates are modelled.
- The state set is fixed; states cannot be added at runtime.

Dependencies:
- Python 3.10+
- enum (standard library)
"""

from enum import Enum


class PlaneState(Enum):
    HANGARED = "Hangar"
    ON_RUNWAY = "Runway"
    AIRBORNE = "Air"

    @property
    def label(self) -> str:
        return self.value


class PlaneCommand(Enum):
    EXIT_HANGAR = (1, "Exit Hangar")
    ENTER_HANGAR = (2, "Enter Hangar")
    TAKE_OFF = (3, "Take Off")
    LAND = (4, "Land")

    def __init__(self, selector: int, label: str):
        self.selector = selector
        self.label = label

    @classmethod
    def from_selector(cls, selector: int) -> "PlaneCommand | None":
        # Menu selector 1..4 -> command; anything else is not a command
        for command in cls:
            if command.selector == selector:
                return command
        return None
