"""
Scalar Parsers — best-effort conversion of arbitrary record values.

Every parser returns the typed value or ``None`` when the input cannot be
interpreted. None of them raise, so the type inferencer can try a value
against each parser in turn.

Heliographic longitudes follow the Stonyhurst convention: West positive,
East negative.
"""

import datetime as dt
import math
import re
from typing import Any, NamedTuple, Optional

import numpy as np
import pandas as pd


_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_HELIOGRAPHIC_PATTERN = re.compile(r"^([NS])(\d+)([EW])(\d+)$", re.IGNORECASE)

_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


class HeliographicCoordinate(NamedTuple):
    lat: int
    lon: int


def is_missing(value: Any) -> bool:
    """Absent, null, NaN and blank strings all count as missing."""
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def parse_number(value: Any) -> Optional[float]:
    """Parse a finite number from a native number or a fully numeric string."""
    if _is_bool(value):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text or not _NUMBER_PATTERN.match(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def parse_boolean(value: Any) -> Optional[bool]:
    if _is_bool(value):
        return bool(value)
    if isinstance(value, (str, int, np.integer)):
        text = str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    return None


def _to_utc(ts: pd.Timestamp) -> pd.Timestamp:
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def parse_date(value: Any, min_length: int = 8) -> Optional[pd.Timestamp]:
    """
    Parse a date/time into a UTC ``pd.Timestamp``.

    Strings shorter than ``min_length`` are rejected so that short codes
    like ``"2024"`` or ``"M1.5"`` never read as dates. Native numbers are
    treated as epoch milliseconds.
    """
    if value is None or _is_bool(value):
        return None

    try:
        if isinstance(value, (dt.datetime, dt.date, np.datetime64)):
            ts = pd.Timestamp(value)
        elif isinstance(value, (int, float, np.integer, np.floating)):
            if not math.isfinite(float(value)):
                return None
            ts = pd.Timestamp(float(value), unit="ms")
        elif isinstance(value, str):
            text = value.strip()
            if len(text) < min_length:
                return None
            ts = pd.Timestamp(text)
        else:
            return None
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(ts):
        return None
    return _to_utc(ts)


def parse_heliographic(value: Any) -> Optional[HeliographicCoordinate]:
    """Parse ``N16E65``-style solar coordinates into signed lat/lon degrees."""
    if not isinstance(value, str) or not value:
        return None
    match = _HELIOGRAPHIC_PATTERN.match(value.strip())
    if not match:
        return None

    lat_dir, lat_val, lon_dir, lon_val = match.groups()
    lat = int(lat_val) * (-1 if lat_dir.upper() == "S" else 1)
    lon = int(lon_val) * (-1 if lon_dir.upper() == "E" else 1)
    if abs(lat) > 90 or abs(lon) > 180:
        return None
    return HeliographicCoordinate(lat=lat, lon=lon)
