"""The reader context: one object that owns all core state.

WHY: The window layer needs a small surface: four input handlers and a
per-frame render call. Keeping every piece of state in one explicitly
constructed object (instead of module globals) lets tests drive the
whole core without a display.

HOW: SpeedReader wires an IngestionController and a PlaybackEngine to a
loader service. Input handlers mutate state immediately; render()
collects a finished load, selects draw intents from a snapshot, and
only then advances the position, so a frame always reflects the events
delivered before it.

RULES:
- on_wheel() uses only the sign of the delta
- render() never blocks; loads are only polled
- close() releases the loader if the reader created it
"""

from __future__ import annotations

from typing import List, Optional

from speed_reader.config import DEFAULT_SPEED, WINDOW_HEIGHT, WINDOW_WIDTH
from speed_reader.core.ingestion import IngestionController, TextLoader
from speed_reader.core.loader import DroppedFile, TextLoaderService
from speed_reader.core.playback import PlaybackEngine
from speed_reader.core.render import DrawIntent, select_intents
from speed_reader.core.state import DisplayMode, ReaderSnapshot


class SpeedReader:
    """Drag-and-drop speed reader core."""

    def __init__(
        self,
        loader: Optional[TextLoader] = None,
        speed: float = DEFAULT_SPEED,
        width: float = WINDOW_WIDTH,
        height: float = WINDOW_HEIGHT,
    ) -> None:
        self._service: Optional[TextLoaderService] = None
        if loader is None:
            self._service = TextLoaderService()
            loader = self._service
        self.ingestion = IngestionController(loader)
        self.playback = PlaybackEngine(self.ingestion, speed=speed)
        self.width = width
        self.height = height

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def on_drag_enter(self) -> None:
        self.ingestion.on_drag_enter()

    def on_drag_leave(self) -> None:
        self.ingestion.on_drag_leave()

    def on_drop(self, file: DroppedFile) -> bool:
        return self.ingestion.on_drop(file)

    def on_wheel(self, delta: float) -> float:
        return self.playback.adjust_speed(delta)

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    @property
    def mode(self) -> DisplayMode:
        return self.playback.mode

    def snapshot(self) -> ReaderSnapshot:
        return ReaderSnapshot(
            drag_count=self.ingestion.drag_count,
            words=self.playback.words,
            position=self.playback.position,
            speed=self.playback.speed,
        )

    def render(self, delta_seconds: float) -> List[DrawIntent]:
        """Return what to draw for this frame, then advance playback.

        The intents reflect the position at the start of the frame, so the
        frame that applies a new document always shows its first word.
        """
        self.playback.collect_load()
        intents = select_intents(self.snapshot(), self.width, self.height)
        self.playback.advance(delta_seconds)
        return intents

    def close(self) -> None:
        if self._service is not None:
            self._service.close()
