#!/usr/bin/env python3

import logging
from typing import Callable

from app_context import AppContext
from plane_controller import PlaneController
from plane_states import PlaneCommand, PlaneState

logger = logging.getLogger(__name__)

DEMO_SEQUENCE = (
    PlaneCommand.EXIT_HANGAR,
    PlaneCommand.TAKE_OFF,
    PlaneCommand.LAND,
    PlaneCommand.ENTER_HANGAR,
)

QUIT_SELECTOR = 5
PROMPT = "Choose an action: "


class StateAnnunciator:
    # Prints the plane state only when it differs from the last one seen
    def __init__(self, initial: PlaneState | None = None):
        self._last = initial

    def __call__(self, controller: PlaneController) -> None:
        state = controller.state
        if state != self._last:
            print(f"STATE: {state.name}")
            self._last = state


def run_demo(controller: PlaneController) -> None:
    print("=== Plane State Machine Demo ===")
    for command in DEMO_SEQUENCE:
        print(controller.execute(command).message)
    print("=== Demo Complete ===")


def print_menu() -> None:
    print("\n--- Plane Control Menu ---")
    for command in PlaneCommand:
        print(f"{command.selector}. {command.label}")
    print(f"{QUIT_SELECTOR}. Quit")


def parse_choice(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def command_loop(
    ctx: AppContext,
    input_fn: Callable[[str], str] | None = None,
    annunciator: StateAnnunciator | None = None,
) -> None:
    if input_fn is None:
        input_fn = input

    while True:
        # A shutdown signal may interrupt any step of an iteration, not just input()
        try:
            if ctx.shutdown_event.is_set():
                break

            print_menu()
            raw = input_fn(PROMPT)

            choice = parse_choice(raw)

            if choice == QUIT_SELECTOR:
                ctx.shutdown()
                break

            command = PlaneCommand.from_selector(choice) if choice is not None else None
            if command is None:
                logger.debug("Invalid menu selector: %r", raw)
                print("invalid choice.")
                continue

            result = ctx.controller.execute(command)
            print(result.message)

            if annunciator is not None:
                annunciator(ctx.controller)
        except (EOFError, KeyboardInterrupt):
            print()
            ctx.shutdown()
            break

    print("Shutting down.")
    logger.info("Command loop terminated")
