from pathlib import Path

from nsmerge.config import MergeConfig


def test_relative_dir_resolved_against_cwd() -> None:
    config = MergeConfig.from_cli("i18n", cwd=Path("/work/app"))
    assert config.root_dir == Path("/work/app/i18n")


def test_absolute_dir_kept() -> None:
    config = MergeConfig.from_cli("/srv/locales", cwd=Path("/work/app"))
    assert config.root_dir == Path("/srv/locales")


def test_default_indent() -> None:
    assert MergeConfig(root_dir=Path("i18n")).indent == 2
