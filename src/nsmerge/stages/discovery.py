"""Find language codes and namespace directories under an i18n root.

    <root>/<lang>.json
    <root>/<namespace>/<lang>.json
"""

from pathlib import Path

from nsmerge.data_models.layout import Layout
from nsmerge.data_models.report import Issue, Operation
from nsmerge.errors import RootDirectoryError
from nsmerge.fs import FileSystem
from nsmerge.reporter import Reporter

SUFFIX = ".json"


def language_of(name: str) -> str | None:
    """Language code for a translation file name, or None if it isn't one.

    language_of("en.json")  -> "en"
    language_of("README")   -> None
    """
    if not name.endswith(SUFFIX) or name == SUFFIX:
        return None
    return name.removesuffix(SUFFIX)


def _languages_in(fs: FileSystem, directory: Path, names: list[str]) -> list[str]:
    langs = []
    for name in names:
        lang = language_of(name)
        if lang is not None and fs.is_file(directory / name):
            langs.append(lang)
    return langs


def discover(fs: FileSystem, root: Path, reporter: Reporter) -> Layout:
    """Scan root and its immediate subdirectories.

    Raises RootDirectoryError if root is missing or cannot be listed. A
    namespace directory that cannot be listed is reported and left out.
    """
    if not fs.exists(root):
        raise RootDirectoryError(root, "does not exist.")
    if not fs.is_dir(root):
        raise RootDirectoryError(root, "is not a directory.")
    try:
        entries = fs.list_dir(root)
    except OSError as exc:
        raise RootDirectoryError(root, f"could not be read: {exc}") from exc

    languages: dict[str, None] = dict.fromkeys(_languages_in(fs, root, entries))
    namespaces: list[str] = []
    unreadable: list[str] = []
    issues: list[Issue] = []

    for name in entries:
        ns_path = root / name
        if not fs.is_dir(ns_path):
            continue
        try:
            ns_entries = fs.list_dir(ns_path)
        except OSError as exc:
            issue = Issue(
                operation=Operation.list_dir,
                path=ns_path,
                message=f"Error reading namespace directory {ns_path}: {exc}",
            )
            reporter.error(issue.message)
            issues.append(issue)
            unreadable.append(name)
            continue
        namespaces.append(name)
        languages.update(dict.fromkeys(_languages_in(fs, ns_path, ns_entries)))

    return Layout(
        root=root,
        languages=list(languages),
        namespaces=namespaces,
        unreadable_namespaces=unreadable,
        issues=issues,
    )
