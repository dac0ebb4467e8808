"""
Rep-range text form.

A :class:`RepRange` is shown and edited as ``"8"`` (fixed target) or
``"8-12"`` (inclusive range).  Parsing is lenient the way a form field
has to be: a missing or non-numeric bound falls back to ``1`` for the
lower bound and to the lower bound for the upper one, and reversed
bounds are put back in order.
"""

import re
from typing import Optional

from gymtrack.schemas.workout import RepRange

_LEADING_INT = re.compile(r"^\s*(\d+)")


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if not match:
        return None
    value = int(match.group(1))
    return value or None


def format_rep_range(rep_range: RepRange) -> str:
    """``"min-max"`` for a real range, ``"min"`` when ``max`` is absent or equal to ``min``."""
    if rep_range.max is not None and rep_range.max != rep_range.min:
        return f"{rep_range.min}-{rep_range.max}"
    return str(rep_range.min)


def parse_rep_range(text: str) -> RepRange:
    """Parse ``"8"`` or ``"8-12"`` into a :class:`RepRange`."""
    trimmed = text.strip()
    if "-" in trimmed:
        low_text, _, high_text = trimmed.partition("-")
        low = _leading_int(low_text) or 1
        high = _leading_int(high_text) or low
        low, high = sorted((low, high))
        return RepRange(min=low, max=high)
    return RepRange(min=_leading_int(trimmed) or 1)
