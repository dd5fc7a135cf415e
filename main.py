#!/usr/bin/env python3
import logging
import signal
import time
from threading import Event

from app_context import AppContext
from cli import StateAnnunciator, command_loop, run_demo
from command_recorder import CommandRecorder
from plane_configuration import PlaneConfiguration
from plane_controller import PlaneController


def setup_logging(config: PlaneConfiguration):
    logging.basicConfig(
        level=config.resolved_log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()
        # Interrupt the current command loop step so the loop can exit
        raise KeyboardInterrupt

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def initialize(config: PlaneConfiguration) -> AppContext:
    config.validate()

    logging.info("Initializing plane %s", config.name)

    clock = time.monotonic

    recorder = None
    if config.command_log_path is not None:
        recorder = CommandRecorder(filepath=config.command_log_path, clock=clock)

    controller = PlaneController(
        config=config,
        clock=clock,
        command_recorder=recorder,
    )

    return AppContext(
        controller=controller,
        config=config,
        clock=clock,
        shutdown_event=Event(),
        recorder=recorder,
    )


def main(config: PlaneConfiguration | None = None) -> int:
    config = config if config is not None else PlaneConfiguration()
    setup_logging(config)
    ctx = initialize(config)
    setup_signal_handlers(ctx)

    if config.run_demo_on_startup:
        try:
            run_demo(ctx.controller)
        except KeyboardInterrupt:
            # Shutdown already requested by the signal handler; the loop below exits at once
            logging.info("Demo interrupted")

    command_loop(ctx, annunciator=StateAnnunciator(initial=ctx.controller.state))

    logging.info("Main loop terminated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
