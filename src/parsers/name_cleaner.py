"""Item name normalization."""

import re
from typing import Optional

MIN_NAME_LENGTH = 3

_LEADING_NOISE = re.compile(r'^[\d\s\-*•]+')
_TRAILING_PRICE = re.compile(r'[$₹€£]\d+.*$')
_WHITESPACE = re.compile(r'\s+')


def clean_item_name(raw_name: str) -> Optional[str]:
    """
    Normalize a captured name substring.

    Strips leading counters and bullets, stray trailing prices and extra
    whitespace.

    Args:
        raw_name: Name text captured from a receipt line

    Returns:
        Cleaned name, or None if fewer than three characters remain
    """
    if not raw_name:
        return None

    name = _LEADING_NOISE.sub('', raw_name)
    name = _TRAILING_PRICE.sub('', name)
    name = _WHITESPACE.sub(' ', name).strip()

    if len(name) < MIN_NAME_LENGTH:
        return None
    return name
