"""Shared utilities for the Video Catalog service."""

import re
from typing import Optional

# Optional sign, ASCII digits only; no underscores, no other scripts' digits
_INT_RE = re.compile(r'[+-]?\d+', re.ASCII)


def parse_int(raw: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """Parse a query-string integer, returning default when missing or malformed.

    Accepts surrounding whitespace and a leading sign; rejects floats and junk.
    """
    if raw is None:
        return default
    raw = raw.strip()
    if not _INT_RE.fullmatch(raw):
        return default
    return int(raw, 10)
