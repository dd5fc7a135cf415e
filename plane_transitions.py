"""
Title: Plane Transition Table
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.0

Purpose:
Implements the complete (state, command) transition table for the plane state
machine as a pure function. Every one of the 12 cells is defined: a cell either
moves the plane to its single legal successor state or rejects the command,
leaving the state unchanged. Both outcomes carry exactly one message.

Targeted Requirements:
- Hangared -> OnRunway (exit hangar), OnRunway -> Hangared (enter hangar),
  OnRunway -> Airborne (take off), Airborne -> OnRunway (land).
- All other pairs are self-loops with a rejection message.
- Rejections are results, never exceptions.

Scope and Limitations:
- No side effects; the controller owns the current state.
- Raises ValueError only when given objects that are not states/commands.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- plane_states.py
"""

from dataclasses import dataclass

from plane_states import PlaneCommand, PlaneState


@dataclass(frozen=True)
class TransitionResult:
    command: PlaneCommand
    previous_state: PlaneState
    new_state: PlaneState
    message: str

    @property
    def accepted(self) -> bool:
        return self.new_state != self.previous_state

    @property
    def rejected(self) -> bool:
        return not self.accepted


def _moved(source: PlaneState, target: PlaneState) -> tuple[PlaneState, str]:
    return target, f"transition from {source.label} to {target.label}."


# (state, command) -> (new_state, message)
TRANSITION_TABLE: dict[tuple[PlaneState, PlaneCommand], tuple[PlaneState, str]] = {
    # Hangared
    (PlaneState.HANGARED, PlaneCommand.EXIT_HANGAR): _moved(PlaneState.HANGARED, PlaneState.ON_RUNWAY),
    (PlaneState.HANGARED, PlaneCommand.ENTER_HANGAR): (PlaneState.HANGARED, "already in hangar."),
    (PlaneState.HANGARED, PlaneCommand.TAKE_OFF): (PlaneState.HANGARED, "impossible to take off while in hangar"),
    (PlaneState.HANGARED, PlaneCommand.LAND): (PlaneState.HANGARED, "impossible to land while in hangar"),
    # OnRunway
    (PlaneState.ON_RUNWAY, PlaneCommand.EXIT_HANGAR): (PlaneState.ON_RUNWAY, "already on runway"),
    (PlaneState.ON_RUNWAY, PlaneCommand.ENTER_HANGAR): _moved(PlaneState.ON_RUNWAY, PlaneState.HANGARED),
    (PlaneState.ON_RUNWAY, PlaneCommand.TAKE_OFF): _moved(PlaneState.ON_RUNWAY, PlaneState.AIRBORNE),
    (PlaneState.ON_RUNWAY, PlaneCommand.LAND): (PlaneState.ON_RUNWAY, "already on runway."),
    # Airborne
    (PlaneState.AIRBORNE, PlaneCommand.EXIT_HANGAR): (PlaneState.AIRBORNE, "already airborne."),
    (PlaneState.AIRBORNE, PlaneCommand.ENTER_HANGAR): (PlaneState.AIRBORNE, "impossible to enter hangar while airborne"),
    (PlaneState.AIRBORNE, PlaneCommand.TAKE_OFF): (PlaneState.AIRBORNE, "already airborne."),
    (PlaneState.AIRBORNE, PlaneCommand.LAND): _moved(PlaneState.AIRBORNE, PlaneState.ON_RUNWAY),
}


def transition(state: PlaneState, command: PlaneCommand) -> TransitionResult:
    if not isinstance(state, PlaneState):
        raise ValueError(f"Unknown plane state: {state!r}")
    if not isinstance(command, PlaneCommand):
        raise ValueError(f"Unknown plane command: {command!r}")

    new_state, message = TRANSITION_TABLE[(state, command)]
    return TransitionResult(
        command=command,
        previous_state=state,
        new_state=new_state,
        message=message,
    )
