"""Unit tests for the command-line entry point.

WHY: The CLI is how the reader is launched; a broken parser or preload
path means the window never opens with the requested file.

HOW: The parser is inspected directly; preload() is tested against a
FakeLoader-backed reader; main() runs with the GUI entry point patched
out so no display is needed.

RULES:
- No test opens a real window
"""

import sys
import types
from unittest.mock import MagicMock

import pytest

from speed_reader.cli import build_parser, main, preload
from speed_reader.config import DEFAULT_SPEED


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.file is None
        assert args.wpm == DEFAULT_SPEED

    def test_file_and_speed(self):
        args = build_parser().parse_args(["book.txt", "--wpm", "250"])
        assert args.file == "book.txt"
        assert args.wpm == 250.0

    def test_log_level_is_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "info"])
        assert args.log_level == "INFO"

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan", "Infinity"])
    def test_rejects_non_finite_speed(self, value):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--wpm", value])

    def test_rejects_non_numeric_speed(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--wpm", "fast"])

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "chatty"])


class TestPreload:
    def test_text_file_starts_load(self, reader, loader, tmp_path):
        path = tmp_path / "book.txt"
        path.write_text("hello", encoding="utf-8")
        assert preload(reader, path) is True
        assert loader.requests[0].path == path

    def test_non_text_file_is_ignored_with_warning(self, reader, loader, tmp_path, caplog):
        path = tmp_path / "book.pdf"
        path.write_bytes(b"%PDF-1.4")
        assert preload(reader, path) is False
        assert loader.requests == []
        assert "not a plain-text file" in caplog.text


class TestMain:
    @pytest.fixture
    def fake_gui(self, monkeypatch):
        gui_main = MagicMock()
        module = types.ModuleType("speed_reader.gui")
        module.main = gui_main
        monkeypatch.setitem(sys.modules, "speed_reader.gui", module)
        return gui_main

    def test_opens_window_with_requested_speed(self, fake_gui):
        main(["--wpm", "200"])
        reader = fake_gui.call_args.args[0]
        try:
            assert reader.playback.speed == 200.0
        finally:
            reader.close()

    def test_preloads_file(self, fake_gui, tmp_path):
        path = tmp_path / "book.txt"
        path.write_text("a b c", encoding="utf-8")
        main([str(path)])
        reader = fake_gui.call_args.args[0]
        try:
            assert reader.ingestion.has_pending_load
        finally:
            reader.close()

    def test_missing_file_exits(self, fake_gui, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "missing.txt")])
        fake_gui.assert_not_called()
