"""Shared test fixtures for the speed_reader test suite.

WHY: Most core tests need a loader whose loads finish exactly when the
test says so, instead of racing a worker thread.

HOW: FakeLoader hands out plain concurrent.futures.Future objects and
lets the test resolve them with text or an exception. Fixtures build an
IngestionController, PlaybackEngine, or whole SpeedReader on top of it.

RULES:
- FakeLoader applies the same MIME gate as TextLoaderService
- Fixtures use an explicit speed of 60 wpm, independent of .env
"""

from __future__ import annotations

from concurrent.futures import Future
from pathlib import Path
from typing import List

import pytest

from speed_reader.core.ingestion import IngestionController
from speed_reader.core.loader import DroppedFile, UnsupportedMime
from speed_reader.core.playback import PlaybackEngine
from speed_reader.core.reader import SpeedReader

TEST_SPEED = 60.0


class FakeLoader:
    """Loader whose futures are completed by the test."""

    def __init__(self) -> None:
        self.requests: List[DroppedFile] = []
        self.futures: List[Future] = []

    def load(self, file: DroppedFile) -> Future:
        if not file.is_plain_text:
            raise UnsupportedMime("{} is {}".format(file.path.name, file.mime_type))
        future: Future = Future()
        self.requests.append(file)
        self.futures.append(future)
        return future

    def complete(self, text: str, index: int = -1) -> None:
        self.futures[index].set_result(text)

    def fail(self, error: Exception, index: int = -1) -> None:
        self.futures[index].set_exception(error)


def text_file(name: str = "book.txt") -> DroppedFile:
    return DroppedFile(path=Path(name), mime_type="text/plain")


def pdf_file(name: str = "book.pdf") -> DroppedFile:
    return DroppedFile(path=Path(name), mime_type="application/pdf")


@pytest.fixture
def loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def ingestion(loader) -> IngestionController:
    return IngestionController(loader)


@pytest.fixture
def engine(ingestion) -> PlaybackEngine:
    return PlaybackEngine(ingestion, speed=TEST_SPEED)


@pytest.fixture
def reader(loader) -> SpeedReader:
    return SpeedReader(loader=loader, speed=TEST_SPEED, width=800, height=600)
