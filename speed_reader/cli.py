"""Command-line entry point for the speed reader.

WHY: Users start the reader from a terminal or a desktop shortcut, and
sometimes want to open a file directly instead of dragging it in.

HOW: argparse accepts an optional text file, an initial speed, and a
log level. main() configures logging, builds a SpeedReader, offers the
file to it exactly as a drop would, and opens the window.

RULES:
- The optional file must exist; otherwise the parser exits with an error
- A preloaded file goes through the same MIME gate as a drop
- --wpm must be finite; it is clamped to MIN_SPEED by the playback engine
- argv=None means sys.argv; explicit argv is for testing
"""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import List, Optional

from speed_reader.config import DEFAULT_SPEED, LOG_FORMAT, LOG_LEVEL
from speed_reader.core.loader import DroppedFile
from speed_reader.core.reader import SpeedReader

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _speed(value: str) -> float:
    """argparse type for --wpm: a finite number."""
    try:
        speed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("not a number: {!r}".format(value)) from None
    if not math.isfinite(speed):
        raise argparse.ArgumentTypeError("must be a finite number: {!r}".format(value))
    return speed


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="speed-reader",
        description="Show a plain-text file one word at a time. Drop a .txt "
                    "file onto the window; scroll to change the speed.",
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Text file to open on start (optional).",
    )

    parser.add_argument(
        "--wpm",
        type=_speed,
        default=DEFAULT_SPEED,
        help="Initial reading speed in words per minute (default: %(default)s).",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=LOG_LEVEL if LOG_LEVEL in _LOG_LEVELS else "DEBUG",
        help="Logging verbosity (default: %(default)s).",
    )

    return parser


def preload(reader: SpeedReader, path: Path) -> bool:
    """Offer ``path`` to the reader as if it had been dropped."""
    started = reader.on_drop(DroppedFile.from_path(path))
    if not started:
        logger.warning("%s is not a plain-text file; ignoring it", path)
    return started


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``speed-reader`` and ``python -m speed_reader``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    path: Optional[Path] = None
    if args.file is not None:
        path = Path(args.file)
        if not path.is_file():
            parser.error("file not found: {}".format(path))

    # Imported here so --help works without a display or tkinterdnd2
    from speed_reader.gui import main as gui_main

    reader = SpeedReader(speed=args.wpm)
    if path is not None:
        preload(reader, path)
    gui_main(reader)


if __name__ == "__main__":
    main()
