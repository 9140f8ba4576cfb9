from pathlib import Path

from pydantic import BaseModel, ConfigDict

from nsmerge.data_models.report import Issue


class Layout(BaseModel):
    """What discovery found under the i18n root."""

    model_config = ConfigDict(frozen=True)

    root: Path
    languages: list[str] = []  # distinct, first-seen order
    namespaces: list[str] = []  # readable namespace dirs, listing order
    unreadable_namespaces: list[str] = []
    issues: list[Issue] = []

    def root_file(self, language: str) -> Path:
        return self.root / f"{language}.json"

    def namespace_file(self, namespace: str, language: str) -> Path:
        return self.root / namespace / f"{language}.json"
