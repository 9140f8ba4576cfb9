from pathlib import Path


class NamespaceMergeError(Exception):
    """Base class for errors raised by the namespace merger."""


class RootDirectoryError(NamespaceMergeError):
    """The i18n root is missing or cannot be listed; nothing can be merged."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Directory '{root}' {reason}")
        self.root = root
        self.reason = reason
