"""Map the reader snapshot to draw intents.

WHY: The core decides what to show; the window decides how to paint it.
Draw intents are the contract between the two, so the selection logic
can be tested without a display.

HOW: select_intents() looks at the derived mode of a ReaderSnapshot and
returns a list of TextIntent / FrameIntent values. It reads, never
writes.

RULES:
- IDLE: one centred prompt
- DRAGGING(n): an outline frame plus a centred line reporting n
- PLAYING: the current word centred, and the speed in the top-left corner
- Geometry assumes the canvas size passed in (default 800x600)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from speed_reader.config import WINDOW_HEIGHT, WINDOW_WIDTH
from speed_reader.core.state import ModeKind, ReaderSnapshot

BLACK = "#000000"
WHITE = "#ffffff"
GRAY = "#808080"
ORANGE = "#ffa500"

PROMPT_TEXT = "Drop a text file here"
WORD_SIZE = 30
PROMPT_SIZE = 30
SPEED_SIZE = 24
SPEED_ORIGIN = (25.0, 25.0)
FRAME_MARGIN = 10.0
FRAME_STROKE = 6.0


@dataclass(frozen=True)
class TextIntent:
    """Draw ``text`` anchored at (x, y).

    h_align is "left" or "center"; v_align is always "middle".
    """

    text: str
    x: float
    y: float
    size: int
    color: str
    h_align: str = "center"
    v_align: str = "middle"


@dataclass(frozen=True)
class FrameIntent:
    """Draw a rectangle outline."""

    x: float
    y: float
    width: float
    height: float
    color: str
    stroke: float


DrawIntent = Union[TextIntent, FrameIntent]


def format_speed(speed: float) -> str:
    """Speed readout, e.g. ``"60 words per minute"``."""
    value = "{:d}".format(int(speed)) if float(speed).is_integer() else "{}".format(speed)
    return "{} words per minute".format(value)


def format_drag_count(count: int) -> str:
    noun = "file" if count == 1 else "files"
    return "You are dragging {} {}".format(count, noun)


def select_intents(
    snapshot: ReaderSnapshot,
    width: float = WINDOW_WIDTH,
    height: float = WINDOW_HEIGHT,
) -> List[DrawIntent]:
    """Return the draw intents for one frame."""
    centre_x = width / 2.0
    centre_y = height / 2.0
    mode = snapshot.mode

    if mode.kind is ModeKind.DRAGGING:
        return [
            FrameIntent(
                x=FRAME_MARGIN,
                y=FRAME_MARGIN,
                width=width - 2 * FRAME_MARGIN,
                height=height - 2 * FRAME_MARGIN,
                color=WHITE,
                stroke=FRAME_STROKE,
            ),
            TextIntent(format_drag_count(mode.drag_count), centre_x, centre_y, PROMPT_SIZE, GRAY),
        ]

    if mode.kind is ModeKind.IDLE:
        return [TextIntent(PROMPT_TEXT, centre_x, centre_y, PROMPT_SIZE, ORANGE)]

    word = snapshot.current_word or ""
    return [
        TextIntent(word, centre_x, centre_y, WORD_SIZE, WHITE),
        TextIntent(
            format_speed(snapshot.speed),
            SPEED_ORIGIN[0],
            SPEED_ORIGIN[1],
            SPEED_SIZE,
            ORANGE,
            h_align="left",
        ),
    ]
