"""Outcomes of the merge pipeline, per unit of work and per run."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from nsmerge.data_models.translation import TranslationDocument


class Operation(str, Enum):
    list_dir = "list_dir"
    read = "read"
    parse = "parse"
    write = "write"
    remove_file = "remove_file"
    remove_dir = "remove_dir"


class PipelineState(str, Enum):
    idle = "idle"
    discovering = "discovering"
    merging = "merging"
    cleaning_up = "cleaning_up"
    done = "done"
    failed = "failed"


class Issue(BaseModel):
    """A recoverable failure: processing moved on to the next file/dir/language."""

    model_config = ConfigDict(frozen=True)

    operation: Operation
    path: Path
    message: str


class MergeOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    document: TranslationDocument
    namespaces: list[str] = []  # namespaces that contributed, in merge order
    from_root: bool = False  # the existing root file contributed
    written: bool = False
    issues: list[Issue] = []


class CleanupOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    namespace: str
    removed_files: list[Path] = []
    removed_dir: bool = False
    kept_dir: bool = False  # left in place because other files remain
    already_gone: bool = False
    issues: list[Issue] = []


class RunReport(BaseModel):
    state: PipelineState = PipelineState.idle
    root: Path
    languages: list[str] = []
    namespaces: list[str] = []
    written: list[Path] = []
    removed_files: list[Path] = []
    removed_dirs: list[Path] = []
    kept_dirs: list[Path] = []
    issues: list[Issue] = []

    @property
    def ok(self) -> bool:
        return self.state == PipelineState.done and not self.issues
