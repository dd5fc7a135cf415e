"""
Title: Plane Controller Unit Tests
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.0

Purpose:
Provides unit-level verification of the PlaneController: initial state,
accepted transitions, rejection idempotence, cycle closure of the startup demo
sequence, forward/reverse round trips, message emission, and serialised
command execution.

Scope and Limitations:
- Uses a deterministic fake clock and a spy controller capturing log lines.
- No CLI or stdin interaction; see test_cli.py.

Dependencies:
- Python 3.10+
- pytest
- plane_controller.py
- plane_states.py
"""

import threading

import pytest

from plane_configuration import PlaneConfiguration
from plane_controller import PlaneController
from plane_states import PlaneCommand, PlaneState


class FakeClock:
    # Deterministic clock manually advanced by tests
    def __init__(self, start: float = 0.0):
        self.t: float = float(start)

    def __call__(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += float(dt)


class SpyPlaneController(PlaneController):
    # Controller capturing emitted messages
    def __init__(self, clock, **kwargs):
        super().__init__(clock=clock, **kwargs)
        self.logs: list[str] = []

    def log(self, msg: str) -> None:
        self.logs.append(msg)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(clock) -> SpyPlaneController:
    return SpyPlaneController(clock=clock)


def test_initial_state_is_hangared(controller):
    assert controller.state == PlaneState.HANGARED
    assert controller.logs == []


def test_default_name_comes_from_configuration(clock):
    assert PlaneController(clock=clock).name == "PLANE-1"
    assert PlaneController(config=PlaneConfiguration(name="G-ABCD"), clock=clock).name == "G-ABCD"


def test_scenario_exit_hangar_moves_to_runway(controller):
    result = controller.exit_hangar()

    assert controller.state == PlaneState.ON_RUNWAY
    assert "Hangar to Runway" in result.message
    assert result.accepted is True


def test_scenario_take_off_from_runway(controller):
    controller.enter_state(PlaneState.ON_RUNWAY)

    result = controller.take_off()

    assert controller.state == PlaneState.AIRBORNE
    assert "Runway to Air" in result.message


def test_scenario_take_off_while_airborne_is_rejected(controller):
    controller.enter_state(PlaneState.AIRBORNE)

    result = controller.take_off()

    assert controller.state == PlaneState.AIRBORNE
    assert "already" in result.message
    assert result.accepted is False


def test_scenario_land_while_hangared_is_rejected(controller):
    result = controller.land()

    assert controller.state == PlaneState.HANGARED
    assert "impossible" in result.message
    assert result.rejected is True


@pytest.mark.parametrize(
    "state, command",
    [
        (PlaneState.HANGARED, PlaneCommand.ENTER_HANGAR),
        (PlaneState.HANGARED, PlaneCommand.TAKE_OFF),
        (PlaneState.HANGARED, PlaneCommand.LAND),
        (PlaneState.ON_RUNWAY, PlaneCommand.EXIT_HANGAR),
        (PlaneState.ON_RUNWAY, PlaneCommand.LAND),
        (PlaneState.AIRBORNE, PlaneCommand.EXIT_HANGAR),
        (PlaneState.AIRBORNE, PlaneCommand.ENTER_HANGAR),
        (PlaneState.AIRBORNE, PlaneCommand.TAKE_OFF),
    ],
)
def test_rejection_spam_never_changes_state(controller, state, command):
    controller.enter_state(state)

    for _ in range(10):
        result = controller.execute(command)
        assert result.accepted is False
        assert controller.state == state

    assert len(controller.logs) == 10


def test_demo_sequence_returns_to_hangar(controller):
    results = [
        controller.exit_hangar(),
        controller.take_off(),
        controller.land(),
        controller.enter_hangar(),
    ]

    assert controller.state == PlaneState.HANGARED
    assert all(r.accepted for r in results)
    assert controller.logs == [
        "transition from Hangar to Runway.",
        "transition from Runway to Air.",
        "transition from Air to Runway.",
        "transition from Runway to Hangar.",
    ]


@pytest.mark.parametrize(
    "start, forward, reverse",
    [
        (PlaneState.HANGARED, PlaneCommand.EXIT_HANGAR, PlaneCommand.ENTER_HANGAR),
        (PlaneState.ON_RUNWAY, PlaneCommand.TAKE_OFF, PlaneCommand.LAND),
        (PlaneState.ON_RUNWAY, PlaneCommand.ENTER_HANGAR, PlaneCommand.EXIT_HANGAR),
        (PlaneState.AIRBORNE, PlaneCommand.LAND, PlaneCommand.TAKE_OFF),
    ],
)
def test_forward_then_reverse_round_trip(controller, start, forward, reverse):
    controller.enter_state(start)

    assert controller.execute(forward).accepted is True
    assert controller.state != start
    assert controller.execute(reverse).accepted is True
    assert controller.state == start


@pytest.mark.parametrize("command", list(PlaneCommand))
@pytest.mark.parametrize("state", list(PlaneState))
def test_every_command_emits_exactly_one_message(controller, state, command):
    controller.enter_state(state)

    result = controller.execute(command)

    assert controller.logs == [result.message]
    assert controller.state == result.new_state


def test_state_entry_is_timestamped_only_on_accepted_transition(controller, clock):
    assert controller.state_entered_at == 0.0

    clock.advance(1.5)
    controller.land()
    assert controller.state_entered_at == 0.0

    clock.advance(1.0)
    controller.exit_hangar()
    assert controller.state_entered_at == 2.5


def test_default_log_goes_through_logging(clock, caplog):
    controller = PlaneController(clock=clock)

    with caplog.at_level("INFO", logger="plane_controller"):
        controller.exit_hangar()

    assert "transition from Hangar to Runway." in caplog.text
    assert "PLANE-1" in caplog.text


def test_recorder_receives_every_result(controller):
    recorded = []

    class ListRecorder:
        def record(self, result):
            recorded.append(result)

    controller.command_recorder = ListRecorder()
    controller.land()
    controller.exit_hangar()

    assert [r.command for r in recorded] == [PlaneCommand.LAND, PlaneCommand.EXIT_HANGAR]
    assert [r.accepted for r in recorded] == [False, True]


def test_concurrent_commands_apply_exactly_one_transition(clock):
    controller = PlaneController(clock=clock)
    barrier = threading.Barrier(8)
    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        r = controller.exit_hangar()
        with results_lock:
            results.append(r)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=2.0)

    assert controller.state == PlaneState.ON_RUNWAY
    assert sum(1 for r in results if r.accepted) == 1
    assert len(results) == 8
