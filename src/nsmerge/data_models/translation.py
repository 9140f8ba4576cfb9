from typing import Any

from pydantic import ConfigDict, RootModel


class TranslationDocument(RootModel[dict[str, Any]]):
    """One `<lang>.json` file: translation key → value.

    Values are usually strings, but nested objects are carried through as-is
    and never merged key by key.
    """

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.root)

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(indent=indent)


def empty_document() -> TranslationDocument:
    return TranslationDocument({})


def shallow_merge(
    base: TranslationDocument, override: TranslationDocument
) -> TranslationDocument:
    """Return base with every key of override written over it.

    shallow_merge({"a": "1", "b": "2"}, {"b": "3"})  -> {"a": "1", "b": "3"}
    shallow_merge({"n": {"x": "1"}}, {"n": {"y": "2"}})  -> {"n": {"y": "2"}}
    """
    return TranslationDocument({**base.root, **override.root})
