"""Progress reporting for the pipeline."""

import sys
from typing import Protocol


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleReporter:
    """Print progress to stdout and errors to stderr."""

    def info(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message, file=sys.stderr)


class RecordingReporter:
    """Keep every line in memory instead of printing it."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)
