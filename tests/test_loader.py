"""Unit tests for the loader service.

WHY: The loader is the only place bytes become text; a decode error
must come back as DecodeError, never as a crash on the frame loop.

HOW: decode_text() and DroppedFile.from_path() are tested directly;
TextLoaderService is exercised with real files in tmp_path and waits
on the returned futures.

RULES:
- Futures are awaited with a timeout so a hung worker fails the test
"""

from pathlib import Path

import pytest

from speed_reader.core.loader import (
    DecodeError,
    DroppedFile,
    LoadError,
    TextLoaderService,
    UnsupportedMime,
    decode_text,
)

TIMEOUT = 5


@pytest.fixture
def service():
    svc = TextLoaderService()
    yield svc
    svc.close()


class TestDecodeText:
    def test_valid_utf8(self):
        assert decode_text("héllo wörld".encode("utf-8")) == "héllo wörld"

    def test_bom_is_dropped(self):
        assert decode_text(b"\xef\xbb\xbfword") == "word"

    def test_invalid_utf8_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decode_text(b"ok \xff\xfe broken")

    def test_decode_error_is_load_error(self):
        assert issubclass(DecodeError, LoadError)
        assert issubclass(UnsupportedMime, LoadError)


class TestDroppedFile:
    def test_txt_declares_plain_text(self):
        file = DroppedFile.from_path("notes.txt")
        assert file.mime_type == "text/plain"
        assert file.is_plain_text

    def test_pdf_is_not_plain_text(self):
        file = DroppedFile.from_path("paper.pdf")
        assert file.mime_type == "application/pdf"
        assert not file.is_plain_text

    def test_unknown_extension_has_no_mime(self):
        file = DroppedFile.from_path("README")
        assert file.mime_type is None
        assert not file.is_plain_text

    def test_path_is_normalised(self):
        assert DroppedFile.from_path("a/b.txt").path == Path("a/b.txt")


class TestTextLoaderService:
    def test_loads_text_file(self, service, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("a b\nc", encoding="utf-8")

        future = service.load(DroppedFile.from_path(path))
        assert future.result(timeout=TIMEOUT) == "a b\nc"

    def test_rejects_non_text_before_reading(self, service, tmp_path):
        path = tmp_path / "doc.pdf"
        with pytest.raises(UnsupportedMime):
            service.load(DroppedFile.from_path(path))

    def test_invalid_bytes_fail_with_decode_error(self, service, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xc3\x28 not utf8")

        future = service.load(DroppedFile.from_path(path))
        with pytest.raises(DecodeError):
            future.result(timeout=TIMEOUT)

    def test_missing_file_fails_with_load_error(self, service, tmp_path):
        future = service.load(DroppedFile.from_path(tmp_path / "gone.txt"))
        with pytest.raises(LoadError):
            future.result(timeout=TIMEOUT)
