from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_DIR = "i18n"


class MergeConfig(BaseModel):
    """Settings for one merge run."""

    model_config = ConfigDict(frozen=True)

    root_dir: Path
    indent: int = 2  # cosmetic; only affects the written root files

    @classmethod
    def from_cli(cls, directory: str, cwd: Path | None = None) -> "MergeConfig":
        """Resolve --dir against the working directory (absolute paths win)."""
        base = cwd if cwd is not None else Path.cwd()
        return cls(root_dir=base / directory)
