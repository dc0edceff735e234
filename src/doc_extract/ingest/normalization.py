"""Text normalisation utilities."""
from __future__ import annotations

import re

_MULTIPLE_NEWLINES_RE = re.compile(r"\n{3,}")
_WHITESPACE_RE = re.compile(r"[ \t]+")


def normalize_text(text: str) -> str:
    """Collapse blank-line runs and horizontal whitespace, then trim.

    Runs of three or more newlines become a single paragraph break and runs of
    spaces or tabs become one space. Applying the function twice yields the
    same result as applying it once.
    """

    normalized = _MULTIPLE_NEWLINES_RE.sub("\n\n", text)
    normalized = _WHITESPACE_RE.sub(" ", normalized)
    return normalized.strip()
