"""Discovery → merge → cleanup over one i18n root.

Only a missing or unlistable root stops a run. Everything else is recorded in
the RunReport and processing carries on with the next file, namespace or
language. Cleanup starts only once every language has been merged.
"""

from nsmerge.config import MergeConfig
from nsmerge.data_models.layout import Layout
from nsmerge.data_models.report import PipelineState, RunReport
from nsmerge.errors import RootDirectoryError
from nsmerge.fs import FileSystem, LocalFileSystem
from nsmerge.reporter import ConsoleReporter, Reporter
from nsmerge.stages.cleanup import cleanup_namespace
from nsmerge.stages.discovery import discover
from nsmerge.stages.merge import merge_language


class Pipeline:
    def __init__(
        self,
        config: MergeConfig,
        fs: FileSystem | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.reporter: Reporter = (
            reporter if reporter is not None else ConsoleReporter()
        )
        self.state = PipelineState.idle

    def run(self) -> RunReport:
        root = self.config.root_dir
        report = RunReport(root=root)

        self._enter(PipelineState.discovering, report)
        try:
            layout = discover(self.fs, root, self.reporter)
        except RootDirectoryError as exc:
            self._enter(PipelineState.failed, report)
            self.reporter.error(f"Error: {exc}")
            raise
        self.reporter.info(f"Using i18n directory: {root}")
        report.namespaces = layout.namespaces
        report.issues.extend(layout.issues)

        if not layout.languages:
            self.reporter.info("No language files found. Nothing to merge.")
            self._enter(PipelineState.done, report)
            return report

        report.languages = layout.languages
        self.reporter.info(
            f"Found {len(layout.languages)} language(s): {', '.join(layout.languages)}"
        )

        self._enter(PipelineState.merging, report)
        self._merge(layout, report)

        self._enter(PipelineState.cleaning_up, report)
        self._cleanup(layout, report)

        self.reporter.info("Translation merging completed!")
        self._enter(PipelineState.done, report)
        return report

    def _enter(self, state: PipelineState, report: RunReport) -> None:
        self.state = state
        report.state = state

    def _merge(self, layout: Layout, report: RunReport) -> None:
        for language in layout.languages:
            outcome = merge_language(
                self.fs, layout, language, self.reporter, indent=self.config.indent
            )
            if outcome.written:
                report.written.append(layout.root_file(language))
            report.issues.extend(outcome.issues)

    def _cleanup(self, layout: Layout, report: RunReport) -> None:
        if not layout.namespaces:
            self.reporter.info("No namespace directories found. Nothing to clean up.")
            return
        self.reporter.info("Removing namespace files...")
        for namespace in layout.namespaces:
            outcome = cleanup_namespace(self.fs, layout, namespace, self.reporter)
            ns_path = layout.root / namespace
            report.removed_files.extend(outcome.removed_files)
            if outcome.removed_dir:
                report.removed_dirs.append(ns_path)
            if outcome.kept_dir:
                report.kept_dirs.append(ns_path)
            report.issues.extend(outcome.issues)
