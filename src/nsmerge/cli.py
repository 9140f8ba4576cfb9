"""Merge namespaced translation files into one root file per language.

Usage:
    tolgee-merge-namespaces --dir i18n
    python -m nsmerge -d path/to/i18n

Unknown arguments are ignored, and a bare ``-d`` keeps the default directory.
"""

import argparse
from importlib.metadata import PackageNotFoundError, version
import sys

from nsmerge.config import DEFAULT_DIR, MergeConfig
from nsmerge.errors import RootDirectoryError
from nsmerge.pipeline import Pipeline
from nsmerge.reporter import ConsoleReporter

PROG = "tolgee-merge-namespaces"


def package_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:  # running from a source checkout
        return "0+unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A tool to merge translations across namespaces in Tolgee "
        "i18n files.",
    )
    parser.add_argument(
        "--dir",
        "-d",
        nargs="?",
        const=DEFAULT_DIR,
        default=DEFAULT_DIR,
        help=f'Specify the i18n directory (default: "{DEFAULT_DIR}")',
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"{PROG} v{package_version()}",
        help="Show version information",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args, _ = build_parser().parse_known_args(argv)

    reporter = ConsoleReporter()
    pipeline = Pipeline(MergeConfig.from_cli(args.dir), reporter=reporter)
    try:
        pipeline.run()
    except RootDirectoryError:
        reporter.info("Use --dir option to specify a different i18n directory.")
        sys.exit(1)


if __name__ == "__main__":
    main()
