"""Filesystem access used by the pipeline.

Stages never touch the disk directly; they go through a ``FileSystem`` so the
host filesystem can be swapped out (or made to fail) in tests. Every method
raises ``OSError`` on failure.
"""

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, text: str) -> None: ...

    def remove_file(self, path: Path) -> None: ...

    def remove_dir(self, path: Path) -> None: ...


class LocalFileSystem:
    """The host filesystem, via pathlib."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def list_dir(self, path: Path) -> list[str]:
        """Entry names of a directory, sorted so runs are reproducible."""
        return sorted(p.name for p in path.iterdir())

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_dir(self, path: Path) -> None:
        path.rmdir()  # fails unless empty
