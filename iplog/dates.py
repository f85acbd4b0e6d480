"""IP Log - Date normalization"""

import re
from datetime import datetime

from .errors import InvalidDateFormatError
from .patterns import DATE_PATTERNS, TIMESTAMP_PATTERNS

_DATE_PATTERNS = [(re.compile(p), fmt) for p, fmt in DATE_PATTERNS]
_TIMESTAMP_PATTERNS = [(re.compile(p), fmt) for p, fmt in TIMESTAMP_PATTERNS]


def _try_formats(value: str, patterns) -> datetime:
    for pattern, fmt in patterns:
        if not pattern.match(value):
            continue
        try:
            if fmt is None:
                return datetime.fromisoformat(value)
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(value)


def parse_date(value: str) -> datetime:
    """
    Parse a window bound given as dd.MM.yyyy or yyyy.MM.dd.

    The result is midnight of that day, without timezone.
    """
    try:
        return _try_formats(value.strip(), _DATE_PATTERNS)
    except ValueError:
        raise InvalidDateFormatError(value) from None


def parse_timestamp(value: str) -> datetime:
    """Parse the timestamp part of a log line; raises ValueError if unknown."""
    return _try_formats(value.strip(), _TIMESTAMP_PATTERNS)
