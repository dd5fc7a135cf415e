"""
Title: Application Context Container for the Plane State Machine
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.0

Purpose:
Defines a central application context object aggregating the controller,
configuration, clock, optional command recorder, and the shutdown primitive
into a single explicit container shared by main.py and the CLI driver.

Scope and Limitations:
- Acts purely as a dependency container; contains no transition logic.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- threading (standard library)
- typing (standard library)
- plane_configuration.py
- plane_controller.py
- command_recorder.py
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from command_recorder import CommandRecorder
from plane_configuration import PlaneConfiguration
from plane_controller import PlaneController


@dataclass
class AppContext:
    controller: PlaneController
    config: PlaneConfiguration
    clock: Callable[[], float]
    shutdown_event: Event
    recorder: CommandRecorder | None = None

    def shutdown(self) -> None:
        self.shutdown_event.set()
