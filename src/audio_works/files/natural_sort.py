"""Natural ordering for track titles and folder names."""

import re
from typing import Optional

_DIGIT_RUNS = re.compile(r"(\d+)")


def natural_key(text: str) -> tuple:
    """Generate a sort key for natural ordering.

    Runs of digits compare by numeric value, so "track2" comes before
    "track10". Text runs compare case-insensitively; the raw string is
    the final tie-break so distinct strings never compare equal.

    Args:
        text: String to generate the key for

    Returns:
        Tuple of (alternating parts, raw text)
    """
    parts: list[int | str] = []
    # re.split with a capture group puts digit runs at odd indexes
    for i, segment in enumerate(_DIGIT_RUNS.split(text)):
        if i % 2:
            parts.append(int(segment))
        else:
            parts.append(segment.casefold())
    return tuple(parts), text


def track_sort_key(subtitle: Optional[str], title: str) -> tuple:
    """Sort key for (subtitle, title) pairs. A missing subtitle sorts first."""
    if subtitle is None:
        return (0, ()), natural_key(title)
    return (1, natural_key(subtitle)), natural_key(title)
