"""Timed word advancement and speed control.

WHY: The reader advances through the document on its own, at a rate the
user tunes with the scroll wheel, and must stay frame-rate independent.

HOW: PlaybackEngine owns the word sequence, a continuous position and
the speed. Each frame, update() first collects a finished load from the
ingestion controller (tokenizing it into a new word sequence), then
advances the position by ``speed / 60 * delta_seconds`` if the derived
mode is PLAYING.

RULES:
- A loaded document replaces the word sequence; the position is kept
- A failed load is logged and leaves the current words untouched
- The position only moves in PLAYING mode and never decreases
- Past the last word the last word stays displayed (no loop, no stop)
- Speed changes by SPEED_STEP per call and never drops below MIN_SPEED
- Non-finite speeds are rejected with ValueError
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from speed_reader.config import DEFAULT_SPEED, MIN_SPEED, SPEED_DIVISOR, SPEED_STEP
from speed_reader.core.ingestion import IngestionController
from speed_reader.core.loader import DecodeError, LoadError
from speed_reader.core.state import DisplayMode, ModeKind, derive_mode, displayed_index
from speed_reader.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


class PlaybackEngine:
    """Advances a continuous reading position through the loaded words."""

    def __init__(self, ingestion: IngestionController, speed: float = DEFAULT_SPEED) -> None:
        if not math.isfinite(speed):
            raise ValueError("speed must be a finite number, got {!r}".format(speed))
        self._ingestion = ingestion
        self.words: Tuple[str, ...] = ()
        self.position = 0.0
        self.speed = max(MIN_SPEED, float(speed))

    @property
    def mode(self) -> DisplayMode:
        return derive_mode(self._ingestion.drag_count, len(self.words))

    def current_index(self) -> Optional[int]:
        return displayed_index(self.position, len(self.words))

    def current_word(self) -> Optional[str]:
        index = self.current_index()
        return None if index is None else self.words[index]

    def adjust_speed(self, direction: float) -> float:
        """Step the speed in the direction of ``direction``'s sign."""
        if direction > 0:
            self.speed += SPEED_STEP
        elif direction < 0:
            self.speed = max(MIN_SPEED, self.speed - SPEED_STEP)
        return self.speed

    def load_text(self, text: str) -> None:
        """Replace the word sequence with the words of ``text``."""
        self.words = tokenize(text)
        if self.words:
            logger.info("Loaded document with %d words", len(self.words))
        else:
            logger.info("Loaded document has no words")

    def collect_load(self) -> bool:
        """Apply a finished load, if any; return True if the words changed."""
        try:
            text = self._ingestion.poll_completed_load()
        except DecodeError as e:
            logger.warning("Dropped file is not valid UTF-8: %s", e)
            text = None
        except LoadError as e:
            logger.warning("Dropped file could not be loaded: %s", e)
            text = None

        if text is None:
            return False
        self.load_text(text)
        return True

    def advance(self, delta_seconds: float) -> None:
        """Move the position forward by one frame if in PLAYING mode."""
        if self.mode.kind is ModeKind.PLAYING:
            self.position += self.speed / SPEED_DIVISOR * max(0.0, delta_seconds)

    def update(self, delta_seconds: float) -> None:
        """Run one frame: collect a finished load, then advance."""
        self.collect_load()
        self.advance(delta_seconds)
