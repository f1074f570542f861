"""Drag-and-drop bookkeeping and pending-load tracking.

WHY: The window reports drag-enter, drag-leave, and drop as separate
events, and a dropped file arrives asynchronously. Something has to
count active drags, start loads for acceptable drops, and hand the
finished text to playback exactly once.

HOW: IngestionController keeps an integer drag counter and at most one
pending load handle (a Future-like object from the loader service).
The playback engine calls poll_completed_load() once per frame; the
call never blocks.

RULES:
- drag_count increments on every drag-enter and resets to 0 on leave/drop
- Only text/plain drops start a load; other drops are ignored silently
- A new load replaces the pending one; the old result is never delivered
- A finished load is delivered (or its error raised) once, then cleared
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError
from typing import Optional, Protocol

from speed_reader.core.loader import DroppedFile, LoadError, UnsupportedMime

logger = logging.getLogger(__name__)


class PendingLoad(Protocol):
    """The subset of concurrent.futures.Future the controller relies on."""

    def done(self) -> bool: ...

    def result(self, timeout: Optional[float] = None) -> str: ...

    def cancel(self) -> bool: ...


class TextLoader(Protocol):
    def load(self, file: DroppedFile) -> PendingLoad: ...


class IngestionController:
    """Turns drag/drop events into at most one pending text load."""

    def __init__(self, loader: TextLoader) -> None:
        self._loader = loader
        self.drag_count = 0
        self._pending: Optional[PendingLoad] = None

    @property
    def has_pending_load(self) -> bool:
        return self._pending is not None

    def on_drag_enter(self) -> None:
        self.drag_count += 1

    def on_drag_leave(self) -> None:
        self.drag_count = 0

    def on_drop(self, file: DroppedFile) -> bool:
        """Handle a drop; return True if a load was started."""
        self.drag_count = 0
        try:
            handle = self._loader.load(file)
        except UnsupportedMime as e:
            logger.debug("Ignoring drop: %s", e)
            return False

        if self._pending is not None:
            self._pending.cancel()
            logger.debug("Discarding previous pending load")
        self._pending = handle
        logger.info("Loading %s", file.path.name)
        return True

    def poll_completed_load(self) -> Optional[str]:
        """Return the loaded text if the pending load has finished.

        Returns None while nothing is pending or the load is still in
        flight. A finished load is cleared before its text is returned
        or its error is raised.

        Raises:
            DecodeError: The file was not valid UTF-8.
            LoadError: The file could not be read.
        """
        pending = self._pending
        if pending is None or not pending.done():
            return None

        self._pending = None
        try:
            return pending.result()
        except CancelledError:
            return None
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(str(e)) from e
