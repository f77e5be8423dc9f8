import pytest

from logit.session_file import SessionFile
from logit.utils.errors import LogSinkError


def test_append_creates_directory_and_file(tmp_path):
    sink = SessionFile(tmp_path / "a" / "b" / "run.log")
    assert sink.read_lines() == []

    sink.append("[INFO]  first")
    sink.append("[WARN]  second")

    assert sink.path.parent.is_dir()
    assert sink.read_lines() == ["[INFO]  first", "[WARN]  second"]
    assert sink.path.read_bytes().endswith(b"second\n")


def test_ensure_exists_creates_empty_file(tmp_path):
    sink = SessionFile(tmp_path / "run.log")
    sink.ensure_exists()
    assert sink.path.read_text(encoding="utf-8") == ""


def test_existing_content_is_preserved(tmp_path):
    path = tmp_path / "run.log"
    path.write_text("[DEBUG]  earlier\n", encoding="utf-8")
    SessionFile(path).append("[DEBUG]  later")
    assert path.read_text(encoding="utf-8") == "[DEBUG]  earlier\n[DEBUG]  later\n"


def test_path_that_is_a_directory_raises(tmp_path):
    sink = SessionFile(tmp_path)
    with pytest.raises(LogSinkError) as excinfo:
        sink.append("x")
    assert excinfo.value.path == tmp_path
    assert isinstance(excinfo.value.__cause__, OSError)
