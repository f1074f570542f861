"""Configuration constants, display defaults, and .env loading.

WHY: Centralizes every tunable value (reading speed, window geometry,
frame rate, font, log level) so they are easy to find and override
without touching the playback or rendering logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level; the few that users commonly change can be overridden
through SPEED_READER_* environment variables. read_float_env() and
read_int_env() parse those overrides.

RULES:
- Speed is words per minute; it never drops below MIN_SPEED
- Each wheel notch changes the speed by SPEED_STEP
- Only ACCEPTED_MIME_TYPE drops are loaded
- Malformed overrides raise ValueError naming the variable
"""

from __future__ import annotations

import math
import os

from dotenv import load_dotenv

# Load .env from the project root (where the app is started from)
load_dotenv()


def read_float_env(name: str, default: float) -> float:
    """Read a float override from the environment.

    RULES:
    - Missing or blank variable returns ``default``
    - Raises ValueError if the value is not a finite number
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError("{} must be a number, got {!r}".format(name, raw)) from None
    if not math.isfinite(value):
        raise ValueError("{} must be a finite number, got {!r}".format(name, raw))
    return value


def read_int_env(name: str, default: int) -> int:
    """Read an integer override from the environment."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw)) from None


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------

MIN_SPEED = 10.0
"""Lowest allowed reading speed (words per minute)."""

SPEED_STEP = 10.0
"""Speed change per wheel notch."""

DEFAULT_SPEED = max(MIN_SPEED, read_float_env("SPEED_READER_WPM", 60.0))

SPEED_DIVISOR = 60.0
"""Converts the configured speed into words per second."""

# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------

ACCEPTED_MIME_TYPE = "text/plain"
TEXT_ENCODING = "utf-8-sig"
"""UTF-8 with an optional leading byte-order mark."""

# ---------------------------------------------------------------------------
# Window and rendering
# ---------------------------------------------------------------------------

WINDOW_TITLE = "Speed Reader"
WINDOW_WIDTH = read_int_env("SPEED_READER_WIDTH", 800)
WINDOW_HEIGHT = read_int_env("SPEED_READER_HEIGHT", 600)
FRAME_INTERVAL_MS = max(1, read_int_env("SPEED_READER_FRAME_MS", 16))
FONT_FAMILY = os.getenv("SPEED_READER_FONT", "Ubuntu")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("SPEED_READER_LOG_LEVEL", "DEBUG").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
