"""Asynchronous text loading for dropped files.

WHY: Reading a dropped file must never stall the frame loop, and the
core must not care how bytes are read or decoded. This module is the
narrow loader service the ingestion controller talks to.

HOW: DroppedFile describes a drop (path + declared MIME type).
TextLoaderService.load() validates the MIME type and submits the read
to a single-worker ThreadPoolExecutor, returning the Future as the
pending-load handle. decode_text() turns raw bytes into text.

RULES:
- Only ACCEPTED_MIME_TYPE files are loaded; others raise UnsupportedMime
- Decoding is strict UTF-8 (leading BOM dropped); failures raise DecodeError
- I/O failures surface as LoadError from the future, never as OSError
- The service owns its worker thread; call close() when done
"""

from __future__ import annotations

import logging
import mimetypes
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from speed_reader.config import ACCEPTED_MIME_TYPE, TEXT_ENCODING

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """A dropped file could not be turned into text."""


class UnsupportedMime(LoadError):
    """The dropped file does not declare a plain-text content type."""


class DecodeError(LoadError):
    """The file contents are not valid UTF-8."""


@dataclass(frozen=True)
class DroppedFile:
    """A file delivered by a drop.

    Attributes:
        path: Location of the file on disk.
        mime_type: Content type declared for the file, or None when
                   the platform could not determine one.
    """

    path: Path
    mime_type: Optional[str]

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "DroppedFile":
        """Build a DroppedFile, declaring the MIME type from the extension."""
        path = Path(path)
        mime_type, _encoding = mimetypes.guess_type(path.name)
        return cls(path=path, mime_type=mime_type)

    @property
    def is_plain_text(self) -> bool:
        return self.mime_type == ACCEPTED_MIME_TYPE


def decode_text(data: bytes) -> str:
    """Decode raw file bytes as UTF-8 text.

    Raises:
        DecodeError: If ``data`` is not valid UTF-8.
    """
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodeError("invalid UTF-8 at byte {}: {}".format(e.start, e.reason)) from e


def read_text_file(path: Path) -> str:
    """Read and decode a text file synchronously (runs on the worker)."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError("cannot read {}: {}".format(path, e)) from e
    return decode_text(data)


class TextLoaderService:
    """Loads dropped text files off the frame-loop thread.

    WHY: File reads block; the render loop polls instead of waiting.

    HOW: Each load() call submits read_text_file() to a one-worker
    executor, so loads run in drop order and only one file is read at
    a time.

    RULES:
    - load() raises UnsupportedMime before any I/O for non-text drops
    - The returned Future resolves to the text or raises LoadError
    - close() cancels queued loads and stops the worker
    """

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="text-loader")

    def load(self, file: DroppedFile) -> "Future[str]":
        if not file.is_plain_text:
            raise UnsupportedMime(
                "{} declares {!r}, expected {!r}".format(
                    file.path.name, file.mime_type, ACCEPTED_MIME_TYPE
                )
            )
        logger.debug("Submitting load of %s", file.path)
        return self._executor.submit(read_text_file, file.path)

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
