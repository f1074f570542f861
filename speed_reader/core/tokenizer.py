"""Split document text into the word sequence shown during playback.

WHY: Playback shows one word per step, so a loaded document has to be
turned into an ordered list of words exactly once, when it arrives.

HOW: Splits on the space and newline characters and drops the empty
strings produced by runs of delimiters or leading/trailing delimiters.

RULES:
- Delimiters are ' ' and '\\n' only; tabs and other characters stay
  inside words
- Every returned word is non-empty
- Word order matches the document order
- Result is an immutable tuple
"""

from __future__ import annotations

import re
from typing import Tuple

_DELIMITERS = re.compile(r"[ \n]+")


def tokenize(text: str) -> Tuple[str, ...]:
    """Return the non-empty words of ``text`` in document order."""
    return tuple(part for part in _DELIMITERS.split(text) if part)
