# command_recorder.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable
import threading

from plane_transitions import TransitionResult


@dataclass
class CommandRecorder:
    filepath: Path
    clock: Callable[[], float]

    def __post_init__(self) -> None:
        self.filepath = Path(self.filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        # Header written once per file; later runs append below it
        if not self.filepath.exists():
            with self.filepath.open("w", encoding="utf-8") as f:
                f.write("timestamp,command,from_state,to_state,accepted\n")

    def record(self, result: TransitionResult) -> None:
        ts = self.clock()
        line = (
            f"{ts:.6f},{result.command.name},{result.previous_state.name},"
            f"{result.new_state.name},{result.accepted}\n"
        )

        with self._lock:
            with self.filepath.open("a", encoding="utf-8") as f:
                f.write(line)
                f.flush()
