"""
Title: Plane Application Configuration Model (PlaneConfiguration)
Author: Alex Cooke
Date Created: 2026-10-19
Last Modified: 2026-10-19
Version: 1.0

Purpose:
Defines an immutable data model holding the wiring options of the plane state
machine application: the aircraft name used in log lines, the logging level,
whether the scripted demo runs at startup, and an optional command audit file.

Scope and Limitations:
- Code-level configuration only; no flags, environment variables, or files
  are read to build it.
- Values are static and immutable once instantiated.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- logging (standard library)
- pathlib (standard library)
"""

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PlaneConfiguration:
    # Immutable application configuration.
    name: str = "PLANE-1"
    log_level: str = "WARNING"
    run_demo_on_startup: bool = True
    command_log_path: Path | None = None

    def resolved_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return level

    def validate(self) -> None:
        if not self.name.strip():
            raise ValueError("Plane name must not be empty")
        self.resolved_log_level()
