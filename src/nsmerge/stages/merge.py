"""Merge every namespace file of one language into the root file.

Namespaces are applied in discovery order (a later namespace overwrites an
earlier one on a shared key) and the existing root file is applied last, so
its values always survive.
"""

from pathlib import Path

from pydantic import ValidationError

from nsmerge.data_models.layout import Layout
from nsmerge.data_models.report import Issue, MergeOutcome, Operation
from nsmerge.data_models.translation import (
    TranslationDocument,
    empty_document,
    shallow_merge,
)
from nsmerge.fs import FileSystem
from nsmerge.reporter import Reporter


def load_document(
    fs: FileSystem, path: Path, label: str, reporter: Reporter, issues: list[Issue]
) -> TranslationDocument | None:
    """Read and parse path; None if it is missing, unreadable or malformed.

    Failures other than a missing file are reported and appended to issues.
    A file that is not valid UTF-8 counts as malformed.
    """
    if not fs.exists(path):
        return None
    try:
        text = fs.read_text(path)
    except UnicodeDecodeError as exc:
        issue = Issue(
            operation=Operation.parse,
            path=path,
            message=f"  Error parsing {label} {path}: not valid UTF-8: {exc}",
        )
    except OSError as exc:
        issue = Issue(
            operation=Operation.read,
            path=path,
            message=f"  Error reading {label} {path}: {exc}",
        )
    else:
        try:
            return TranslationDocument.model_validate_json(text)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
            issue = Issue(
                operation=Operation.parse,
                path=path,
                message=f"  Error parsing {label} {path}: {reason}",
            )
    reporter.error(issue.message)
    issues.append(issue)
    return None


def merge_language(
    fs: FileSystem,
    layout: Layout,
    language: str,
    reporter: Reporter,
    indent: int = 2,
) -> MergeOutcome:
    reporter.info(f"Processing language: {language}")
    issues: list[Issue] = []
    namespaces: list[str] = []
    merged = empty_document()
    from_root = False

    for namespace in layout.namespaces:
        path = layout.namespace_file(namespace, language)
        doc = load_document(fs, path, "namespace file", reporter, issues)
        if doc is None:
            continue
        merged = shallow_merge(merged, doc)
        namespaces.append(namespace)
        reporter.info(f"  Added translations from namespace: {namespace}")

    root_path = layout.root_file(language)
    root_doc = load_document(fs, root_path, "root file", reporter, issues)
    if root_doc is not None:
        merged = shallow_merge(merged, root_doc)
        from_root = True
        reporter.info("  Added translations from root file")

    written = False
    try:
        fs.write_text(root_path, merged.to_json(indent=indent))
        written = True
        reporter.info(f"  Merged translations written to {root_path}")
    except OSError as exc:
        issue = Issue(
            operation=Operation.write,
            path=root_path,
            message=f"  Error writing to root file {root_path}: {exc}",
        )
        reporter.error(issue.message)
        issues.append(issue)

    return MergeOutcome(
        language=language,
        document=merged,
        namespaces=namespaces,
        from_root=from_root,
        written=written,
        issues=issues,
    )
