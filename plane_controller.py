"""
Title: Plane State Machine Controller
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.1

Purpose:
Owns the single current state of the aircraft and applies pilot commands to
it through the transition table. Each command performs zero or one state
change, emits exactly one message, and returns a TransitionResult so callers
can tell an accepted transition from a rejected one.

Targeted Requirements:
- Initial state is HANGARED.
- Exit hangar, enter hangar, take off, and land behave as defined by the
  transition table for every state.
- Rejected commands never change the state, however often they are repeated.
- Command execution is serialised so exactly one transition is applied per
  command.

Scope and Limitations:
- No persistence; state lives for the lifetime of the controller.
- No timing or duration modelling; the clock only timestamps state entry.
- Optional command audit via CommandRecorder (append-only, never replayed).

Dependencies:
- Python 3.10+
- logging (standard library)
- threading (standard library)
- time (standard library)
- plane_states.py
- plane_transitions.py
- plane_configuration.py
"""

# Change Log:
#
# 1.1 (2026-10-19)
#   - Added lock around execute() so concurrent callers cannot interleave
#     a read of the current state with another caller's transition.
#   - Attached optional CommandRecorder for command audit.
#
# 1.0 (2026-10-19)
#   - Initial controller with four commands backed by the transition table.


import logging
import threading
import time

from plane_configuration import PlaneConfiguration
from plane_states import PlaneCommand, PlaneState
from plane_transitions import TransitionResult, transition

logger = logging.getLogger(__name__)


class PlaneController:
    def __init__(
        self,
        config: PlaneConfiguration | None = None,
        clock=time.monotonic,
        command_recorder=None,
    ):
        self._config = config if config is not None else PlaneConfiguration()
        self._clock = clock
        self._command_recorder = command_recorder
        self._lock = threading.Lock()

        self._state = PlaneState.HANGARED
        self._state_entered_at = self._clock()

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def state(self) -> PlaneState:
        return self._state

    @property
    def state_entered_at(self) -> float:
        return self._state_entered_at

    @property
    def command_recorder(self):
        return self._command_recorder

    @command_recorder.setter
    def command_recorder(self, recorder) -> None:
        self._command_recorder = recorder

    def log(self, msg: str) -> None:
        logger.info("[%s] %s", self.name, msg)

    def enter_state(self, new_state: PlaneState) -> None:
        self._state = new_state
        self._state_entered_at = self._clock()

    # -------------------------
    # Commands
    # -------------------------

    def execute(self, command: PlaneCommand) -> TransitionResult:
        with self._lock:
            result = transition(self._state, command)

            if result.accepted:
                self.enter_state(result.new_state)
            else:
                logger.debug(
                    "%s rejected in state=%s", command.name, result.previous_state.name
                )

            self.log(result.message)

            if self._command_recorder is not None:
                self._command_recorder.record(result)

        return result

    def exit_hangar(self) -> TransitionResult:
        return self.execute(PlaneCommand.EXIT_HANGAR)

    def enter_hangar(self) -> TransitionResult:
        return self.execute(PlaneCommand.ENTER_HANGAR)

    def take_off(self) -> TransitionResult:
        return self.execute(PlaneCommand.TAKE_OFF)

    def land(self) -> TransitionResult:
        return self.execute(PlaneCommand.LAND)
