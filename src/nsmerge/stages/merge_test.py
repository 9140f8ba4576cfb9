import json
from pathlib import Path

import pytest

from nsmerge.data_models.layout import Layout
from nsmerge.data_models.report import Operation
from nsmerge.fs import LocalFileSystem
from nsmerge.reporter import RecordingReporter
from nsmerge.stages.merge import merge_language


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


def _read(path: Path) -> dict:
    return json.loads(path.read_text())


def _layout(root: Path, *namespaces: str) -> Layout:
    for ns in namespaces:
        (root / ns).mkdir(exist_ok=True)
    return Layout(root=root, languages=["en"], namespaces=list(namespaces))


class ReadOnlyFileSystem(LocalFileSystem):
    def write_text(self, path: Path, text: str) -> None:
        raise PermissionError(f"Permission denied: '{path}'")


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def test_root_value_wins(tmp_path: Path, reporter: RecordingReporter) -> None:
    _write(tmp_path / "common" / "en.json", {"hello": "hi"})
    _write(tmp_path / "en.json", {"hello": "hello!"})
    layout = _layout(tmp_path, "common")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"hello": "hello!"}
    assert outcome.namespaces == ["common"]
    assert outcome.from_root
    assert outcome.written


def test_namespace_union_without_root(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", {"a": "1"})
    _write(tmp_path / "errors" / "en.json", {"b": "2"})
    layout = _layout(tmp_path, "common", "errors")

    merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"a": "1", "b": "2"}


def test_later_namespace_wins_collision(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", {"c": "from common"})
    _write(tmp_path / "errors" / "en.json", {"c": "from errors"})
    layout = _layout(tmp_path, "common", "errors")

    merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"c": "from errors"}


def test_root_keys_kept_alongside_namespace_keys(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", {"a": "1", "shared": "ns"})
    _write(tmp_path / "en.json", {"shared": "root", "z": "26"})
    layout = _layout(tmp_path, "common")

    merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"a": "1", "shared": "root", "z": "26"}


def test_nested_values_not_deep_merged(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", {"menu": {"open": "Open"}})
    _write(tmp_path / "errors" / "en.json", {"menu": {"close": "Close"}})
    layout = _layout(tmp_path, "common", "errors")

    merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"menu": {"close": "Close"}}


def test_namespace_without_language_file_skipped_silently(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "fr.json", {"a": "un"})
    _write(tmp_path / "errors" / "en.json", {"b": "2"})
    layout = _layout(tmp_path, "common", "errors")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert outcome.namespaces == ["errors"]
    assert outcome.issues == []
    assert reporter.errors == []


def test_malformed_namespace_file_skipped(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    (tmp_path / "broken").mkdir()
    (tmp_path / "broken" / "en.json").write_text('{"oops": ')
    _write(tmp_path / "common" / "en.json", {"a": "1"})
    layout = _layout(tmp_path, "broken", "common")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"a": "1"}
    assert outcome.namespaces == ["common"]
    assert [i.operation for i in outcome.issues] == [Operation.parse]
    assert outcome.issues[0].path == tmp_path / "broken" / "en.json"
    assert "Error parsing namespace file" in reporter.errors[0]


def test_non_object_document_is_malformed(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", ["not", "a", "mapping"])
    layout = _layout(tmp_path, "common")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert outcome.namespaces == []
    assert len(outcome.issues) == 1


def test_malformed_root_file_is_replaced_by_namespace_merge(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    (tmp_path / "en.json").write_text("not json")
    _write(tmp_path / "common" / "en.json", {"a": "1"})
    layout = _layout(tmp_path, "common")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"a": "1"}
    assert "Error parsing root file" in reporter.errors[0]
    assert outcome.written


def test_write_failure_reported(tmp_path: Path, reporter: RecordingReporter) -> None:
    _write(tmp_path / "common" / "en.json", {"a": "1"})
    layout = _layout(tmp_path, "common")

    outcome = merge_language(ReadOnlyFileSystem(), layout, "en", reporter)

    assert not outcome.written
    assert outcome.document.root == {"a": "1"}
    assert [i.operation for i in outcome.issues] == [Operation.write]
    assert not (tmp_path / "en.json").exists()
    assert "Error writing to root file" in reporter.errors[0]


def test_output_is_two_space_indented_utf8(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "common" / "en.json", {"k": "ünïcode"})
    layout = _layout(tmp_path, "common")

    merge_language(LocalFileSystem(), layout, "en", reporter)

    text = (tmp_path / "en.json").read_text(encoding="utf-8")
    assert text == '{\n  "k": "ünïcode"\n}'


def test_undecodable_namespace_file_skipped(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    (tmp_path / "common").mkdir()
    (tmp_path / "common" / "en.json").write_bytes(b'{"a": "caf\xe9"}')
    _write(tmp_path / "errors" / "en.json", {"b": "2"})
    layout = _layout(tmp_path, "common", "errors")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert _read(tmp_path / "en.json") == {"b": "2"}
    assert outcome.namespaces == ["errors"]
    assert [i.operation for i in outcome.issues] == [Operation.parse]
    assert outcome.issues[0].path == tmp_path / "common" / "en.json"
    assert "not valid UTF-8" in reporter.errors[0]


def test_namespace_named_root_is_not_the_root_file(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    _write(tmp_path / "root" / "en.json", {"a": "1"})
    layout = _layout(tmp_path, "root")

    outcome = merge_language(LocalFileSystem(), layout, "en", reporter)

    assert outcome.namespaces == ["root"]
    assert not outcome.from_root
