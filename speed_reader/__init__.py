"""Speed Reader — drag-and-drop RSVP viewer for plain-text files.

WHY: Reading one word at a time at a fixed position removes eye
movement and lets a reader push their pace with a scroll wheel.

HOW: A display-agnostic core (speed_reader.core) turns drag/drop and
wheel events into draw intents each frame; a thin tkinter shell
(speed_reader.gui) delivers events and paints the intents.

RULES:
- The core never imports tkinter
- All core state lives in one SpeedReader object, never in globals
"""

__version__ = "0.1.0"
