"""Tkinter desktop window for the speed reader.

WHY: The core is display-agnostic; users need a window they can drop a
text file onto and watch the words flash by. This module is the thin
shell that delivers window events to the core and paints its draw
intents.

HOW: ReaderWindow builds a TkinterDnD root with a single black Canvas
registered as a file drop target. tkinterdnd2 virtual events and the
mouse wheel are forwarded to SpeedReader handlers. A frame tick
re-schedules itself with .after(), measures elapsed time with
time.monotonic(), calls SpeedReader.render() and redraws the canvas.

RULES:
- All core calls happen on the tkinter main thread
- Each announced file in a drag-enter counts as one drag
- Every dropped path is offered to the core in order (last load wins)
- Only the sign of wheel deltas matters
- Closing the window stops the frame tick and the loader
"""

from __future__ import annotations

import logging
import time
import tkinter as tk
import tkinter.font as tkfont
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tkinterdnd2 import COPY, DND_FILES, TkinterDnD

from speed_reader.config import (
    FONT_FAMILY,
    FRAME_INTERVAL_MS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from speed_reader.core.loader import DroppedFile
from speed_reader.core.reader import SpeedReader
from speed_reader.core.render import BLACK, DrawIntent, FrameIntent, TextIntent

logger = logging.getLogger(__name__)

# (h_align, v_align) -> tkinter anchor
_ANCHORS: Dict[Tuple[str, str], str] = {
    ("center", "middle"): tk.CENTER,
    ("left", "middle"): tk.W,
}


class ReaderWindow:
    """Single-window shell around a SpeedReader."""

    def __init__(self, root: tk.Tk, reader: SpeedReader) -> None:
        self._root = root
        self._reader = reader
        self._fonts: Dict[int, tkfont.Font] = {}
        self._last_tick: Optional[float] = None
        self._after_id: Optional[str] = None

        self._root.title(WINDOW_TITLE)
        self._root.resizable(False, False)
        self._canvas = tk.Canvas(
            self._root,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            background=BLACK,
            highlightthickness=0,
        )
        self._canvas.pack(fill=tk.BOTH, expand=True)

        self._canvas.drop_target_register(DND_FILES)
        self._canvas.dnd_bind("<<DropEnter>>", self._on_drop_enter)
        self._canvas.dnd_bind("<<DropPosition>>", self._on_drop_position)
        self._canvas.dnd_bind("<<DropLeave>>", self._on_drop_leave)
        self._canvas.dnd_bind("<<Drop>>", self._on_drop)

        self._root.bind("<MouseWheel>", self._on_mouse_wheel)
        self._root.bind("<Button-4>", lambda _e: self._reader.on_wheel(1))
        self._root.bind("<Button-5>", lambda _e: self._reader.on_wheel(-1))
        self._root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    # Event forwarding
    # ------------------------------------------------------------------

    def _paths(self, event) -> List[str]:
        data = getattr(event, "data", "") or ""
        return list(self._root.tk.splitlist(data))

    def _on_drop_enter(self, event):
        for _ in range(max(1, len(self._paths(event)))):
            self._reader.on_drag_enter()
        return COPY

    def _on_drop_position(self, event):
        return COPY

    def _on_drop_leave(self, event):
        self._reader.on_drag_leave()

    def _on_drop(self, event):
        paths = self._paths(event)
        if not paths:
            self._reader.on_drag_leave()
        for path in paths:
            self._reader.on_drop(DroppedFile.from_path(Path(path)))
        return COPY

    def _on_mouse_wheel(self, event) -> None:
        self._reader.on_wheel(event.delta)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def start(self) -> None:
        self._last_tick = time.monotonic()
        self._after_id = self._root.after(FRAME_INTERVAL_MS, self._tick)

    def _tick(self) -> None:
        now = time.monotonic()
        delta = now - self._last_tick if self._last_tick is not None else 0.0
        self._last_tick = now

        self._draw(self._reader.render(delta))
        self._after_id = self._root.after(FRAME_INTERVAL_MS, self._tick)

    def _font(self, size: int) -> tkfont.Font:
        font = self._fonts.get(size)
        if font is None:
            font = tkfont.Font(root=self._root, family=FONT_FAMILY, size=-size)
            self._fonts[size] = font
        return font

    def _draw(self, intents: List[DrawIntent]) -> None:
        canvas = self._canvas
        canvas.delete("all")
        for intent in intents:
            if isinstance(intent, FrameIntent):
                canvas.create_rectangle(
                    intent.x,
                    intent.y,
                    intent.x + intent.width,
                    intent.y + intent.height,
                    outline=intent.color,
                    width=intent.stroke,
                )
            elif isinstance(intent, TextIntent):
                canvas.create_text(
                    intent.x,
                    intent.y,
                    text=intent.text,
                    fill=intent.color,
                    font=self._font(intent.size),
                    anchor=_ANCHORS.get((intent.h_align, intent.v_align), tk.CENTER),
                )

    def close(self) -> None:
        if self._after_id is not None:
            self._root.after_cancel(self._after_id)
            self._after_id = None
        self._reader.close()
        self._root.destroy()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(reader: Optional[SpeedReader] = None) -> None:
    """Open the reader window and run the Tk main loop.

    RULES:
    - Blocks until the window is closed
    - Must be called from the main thread
    """
    root = TkinterDnD.Tk()
    window = ReaderWindow(root, reader if reader is not None else SpeedReader())
    window.start()
    logger.debug("Window opened (%dx%d)", WINDOW_WIDTH, WINDOW_HEIGHT)
    root.mainloop()


if __name__ == "__main__":
    main()
