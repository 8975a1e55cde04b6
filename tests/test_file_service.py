import pytest

from mdui.services.file_service import FileService


def test_file_service_write_text_atomic_success(tmp_path):
    fs = FileService()
    p = tmp_path / "a.md"
    fs.write_text_atomic(p, "hello ✓")
    assert p.read_text(encoding="utf-8") == "hello ✓"


def test_file_service_write_bytes_atomic(tmp_path):
    fs = FileService()
    p = tmp_path / "a.pdf"
    fs.write_bytes_atomic(p, b"%PDF-1.7\x00\xff")
    assert p.read_bytes() == b"%PDF-1.7\x00\xff"


def test_file_service_overwrites_existing(tmp_path):
    fs = FileService()
    p = tmp_path / "a.html"
    p.write_text("old contents that are longer", encoding="utf-8")
    fs.write_text_atomic(p, "new")
    assert p.read_text(encoding="utf-8") == "new"


def test_file_service_write_into_missing_directory_fails(tmp_path):
    fs = FileService()
    p = tmp_path / "no" / "such" / "dir" / "x.md"
    with pytest.raises(OSError):
        fs.write_text_atomic(p, "data")
    assert not p.exists()


def test_file_service_write_atomic_open_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            pass

        def open(self, *_):
            return False

    fs = FileService()
    p = tmp_path / "x.md"
    monkeypatch.setattr("mdui.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError, match="Cannot open"):
        fs.write_text_atomic(p, "data")


def test_file_service_short_write_cancels(monkeypatch, tmp_path):
    cancelled = []

    class FakeQSaveFile:
        def __init__(self, *_):
            pass

        def open(self, *_):
            return True

        def write(self, b):
            return len(b) - 1

        def cancelWriting(self):
            cancelled.append(True)

        def commit(self):
            raise AssertionError("must not commit a short write")

    fs = FileService()
    p = tmp_path / "x.pdf"
    monkeypatch.setattr("mdui.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError, match="Short write"):
        fs.write_bytes_atomic(p, b"data")
    assert cancelled == [True]
    assert not p.exists()


def test_file_service_write_atomic_commit_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            self._data = b""

        def open(self, *_):
            return True

        def write(self, b):
            self._data += b
            return len(b)

        def commit(self):
            return False

    fs = FileService()
    p = tmp_path / "x.md"
    monkeypatch.setattr("mdui.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError, match="Commit failed"):
        fs.write_text_atomic(p, "data")
    assert not p.exists()
