"""Duration parsing utilities."""

import re
from datetime import timedelta

from lazyhn.errors import PreconditionError
from lazyhn.types import Duration

_DURATION_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(ms|s|m|h|d)$")
_UNITS: dict[str, float] = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3_600.0,
    "d": 86_400.0,
}


def parse_duration(duration: Duration) -> float:
    """Parse a duration to seconds.

    Numbers are milliseconds, strings use a unit suffix ("250ms", "1.5s",
    "5m"), timedeltas are converted as is.
    """
    if isinstance(duration, bool):
        raise PreconditionError(f"Invalid duration: {duration!r}")

    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    elif isinstance(duration, (int, float)):
        seconds = duration / 1000
    else:
        match = _DURATION_PATTERN.match(duration)
        if not match:
            raise PreconditionError(f"Invalid duration: {duration!r}")
        value, unit = match.groups()
        seconds = float(value) * _UNITS[unit]

    if seconds < 0:
        raise PreconditionError(f"Duration must not be negative: {duration!r}")
    return seconds
