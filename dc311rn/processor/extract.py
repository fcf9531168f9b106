"""Service request number extraction."""

import re

PATTERN = re.compile(r"(\d{2})[- ]?(\d{8})")


def extract(text: str) -> list[str]:
    """Return every request identifier in ``text`` as ``NN-NNNNNNNN``, in order.

    Matches do not overlap and duplicates are kept. An optional ``-`` or a
    single space may separate the two-digit prefix from the number.
    """
    return [f"{prefix}-{number}" for prefix, number in PATTERN.findall(text or "")]
