"""Delete merged namespace files and drop namespace dirs left empty."""

from nsmerge.data_models.layout import Layout
from nsmerge.data_models.report import CleanupOutcome, Issue, Operation
from nsmerge.fs import FileSystem
from nsmerge.reporter import Reporter
from nsmerge.stages.discovery import language_of


def cleanup_namespace(
    fs: FileSystem, layout: Layout, namespace: str, reporter: Reporter
) -> CleanupOutcome:
    ns_path = layout.root / namespace
    if not fs.exists(ns_path):
        reporter.info(f"  Namespace directory {ns_path} no longer exists, skipping.")
        return CleanupOutcome(namespace=namespace, already_gone=True)

    issues: list[Issue] = []

    def fail(operation: Operation, message: str) -> None:
        issue = Issue(operation=operation, path=ns_path, message=message)
        reporter.error(issue.message)
        issues.append(issue)

    try:
        names = fs.list_dir(ns_path)
    except OSError as exc:
        fail(
            Operation.list_dir,
            f"  Error reading namespace directory {ns_path}: {exc}",
        )
        return CleanupOutcome(namespace=namespace, issues=issues)

    removed = []
    for name in names:
        file_path = ns_path / name
        if language_of(name) is None or not fs.is_file(file_path):
            continue
        try:
            fs.remove_file(file_path)
        except OSError as exc:
            issue = Issue(
                operation=Operation.remove_file,
                path=file_path,
                message=f"  Error removing file {file_path}: {exc}",
            )
            reporter.error(issue.message)
            issues.append(issue)
            continue
        removed.append(file_path)
        reporter.info(f"  Removed file: {file_path}")

    try:
        remaining = fs.list_dir(ns_path)
    except OSError as exc:
        fail(
            Operation.list_dir,
            f"  Error checking directory contents {ns_path}: {exc}",
        )
        return CleanupOutcome(namespace=namespace, removed_files=removed, issues=issues)

    if remaining:
        reporter.info(f"  Directory not empty, skipping removal: {ns_path}")
        return CleanupOutcome(
            namespace=namespace, removed_files=removed, kept_dir=True, issues=issues
        )

    try:
        fs.remove_dir(ns_path)
    except OSError as exc:
        fail(Operation.remove_dir, f"  Error removing directory {ns_path}: {exc}")
        return CleanupOutcome(namespace=namespace, removed_files=removed, issues=issues)
    reporter.info(f"  Removed empty directory: {ns_path}")
    return CleanupOutcome(
        namespace=namespace, removed_files=removed, removed_dir=True, issues=issues
    )
