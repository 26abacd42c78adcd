# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Parsing of human readable durations such as ``7d`` or ``90 minutes``."""

from __future__ import annotations

import re
from datetime import timedelta

_DURATION_RE = re.compile(
    r"^(?P<value>\d+(?:\.\d+)?|\.\d+)\s*(?P<unit>[a-z]+)?$",
    re.IGNORECASE,
)

_UNIT_SECONDS: dict[str, float] = {
    "ms": 0.001,
    "msec": 0.001,
    "msecs": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
    "y": 31557600,
    "yr": 31557600,
    "yrs": 31557600,
    "year": 31557600,
    "years": 31557600,
}


def parse_duration(value: str | int | float | timedelta) -> timedelta:
    """Convert ``value`` into a positive :class:`timedelta`.

    Numbers are seconds. Strings are ``<number><unit>`` where the unit is one
    of ms, s, m, h, d, w, y or a long form of those (``days``, ``hours``); a
    string without a unit is milliseconds, as in the ``ms`` package.
    """
    if isinstance(value, timedelta):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    elif isinstance(value, (int, float)):
        result = timedelta(seconds=value)
    elif isinstance(value, str):
        match = _DURATION_RE.match(value.strip())
        if not match:
            raise ValueError(f"invalid duration: {value!r}")
        unit = (match.group("unit") or "ms").lower()
        if unit not in _UNIT_SECONDS:
            raise ValueError(f"unknown duration unit {unit!r} in {value!r}")
        result = timedelta(seconds=float(match.group("value")) * _UNIT_SECONDS[unit])
    else:
        raise ValueError(f"invalid duration: {value!r}")

    if result <= timedelta(0):
        raise ValueError(f"duration must be positive: {value!r}")
    return result


__all__ = ["parse_duration"]
