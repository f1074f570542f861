"""Display modes and the per-frame reader snapshot.

WHY: What the window shows depends on two independent facts: whether a
drag is in progress and whether a document is loaded. Storing a mode
field next to those facts invites the two to disagree, so the mode is
always derived from them.

HOW: derive_mode() maps (drag count, word count) to a DisplayMode.
displayed_index() applies the clamp rule for the continuous playback
position. ReaderSnapshot bundles the state the render selector reads.

RULES:
- Any nonzero drag count means DRAGGING, regardless of loaded words
- No drag and no words means IDLE; no drag and words means PLAYING
- Displayed index = min(floor(position), word_count - 1)
- The mode is recomputed on every access, never cached
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional, Tuple


class ModeKind(str, enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    PLAYING = "playing"


@dataclass(frozen=True)
class DisplayMode:
    """The derived display mode; ``drag_count`` is only set while dragging."""

    kind: ModeKind
    drag_count: int = 0

    @classmethod
    def idle(cls) -> "DisplayMode":
        return cls(ModeKind.IDLE)

    @classmethod
    def dragging(cls, count: int) -> "DisplayMode":
        return cls(ModeKind.DRAGGING, count)

    @classmethod
    def playing(cls) -> "DisplayMode":
        return cls(ModeKind.PLAYING)


def derive_mode(drag_count: int, word_count: int) -> DisplayMode:
    if drag_count > 0:
        return DisplayMode.dragging(drag_count)
    if word_count == 0:
        return DisplayMode.idle()
    return DisplayMode.playing()


def displayed_index(position: float, word_count: int) -> Optional[int]:
    """Index of the word to show, or None when there are no words."""
    if word_count <= 0:
        return None
    return min(int(math.floor(max(0.0, position))), word_count - 1)


@dataclass(frozen=True)
class ReaderSnapshot:
    """Everything the render selector needs for one frame."""

    drag_count: int
    words: Tuple[str, ...]
    position: float
    speed: float

    @property
    def mode(self) -> DisplayMode:
        return derive_mode(self.drag_count, len(self.words))

    @property
    def current_word(self) -> Optional[str]:
        index = displayed_index(self.position, len(self.words))
        return None if index is None else self.words[index]
