"""
JSON serialisation utilities.

The differ compares sequence elements and date-time values by their
serialised form rather than by identity.  This module provides the
canonical serialiser used for that comparison together with a lookup
helper that distinguishes an absent key from a key holding ``None``.
"""

import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional

import numpy as np


class _Missing:
    """Sentinel for a key or index that is absent from its container."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def isoformat_utc(value: Any) -> str:
    """Render a date-time value as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Aware datetimes are converted to UTC, naive ones are taken as UTC.
    Plain dates render at midnight; plain times render on their own.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    if isinstance(value, date):
        return value.strftime("%Y-%m-%dT00:00:00.000Z")
    if isinstance(value, time):
        return value.isoformat(timespec="milliseconds")
    raise TypeError(f"Expected a date-time value, got {type(value).__name__}")


def _number(value: Any) -> Any:
    # integral values serialise as ints so 1, 1.0 and Decimal("1") agree
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float("nan") if value.is_nan() else float(value)
    number = float(value)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def _mapping_key(key: Any) -> tuple:
    return (type(key).__name__, str(key))


def _normalise(value: Any) -> Any:
    """Reduce *value* to JSON-native data with non-JSON kinds tagged."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float, Decimal, Fraction, np.bool_, np.integer, np.floating)):
        return _number(value)
    if isinstance(value, (datetime, date, time)):
        return {"__datetime__": isoformat_utc(value)}
    if isinstance(value, bytes):
        return {"__bytes__": value.hex()}
    if isinstance(value, np.ndarray):
        return [_normalise(item) for item in value.tolist()]
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    if isinstance(value, Mapping):
        if all(isinstance(key, str) for key in value):
            return {key: _normalise(item) for key, item in value.items()}
        pairs = sorted(value.items(), key=lambda pair: _mapping_key(pair[0]))
        return {"__mapping__": [[_normalise(key), _normalise(item)] for key, item in pairs]}
    if isinstance(value, (set, frozenset)):
        return {"__set__": sorted(to_canonical_json(item) for item in value)}
    if isinstance(value, np.generic):
        return _normalise(value.item())
    return {"__object__": type(value).__qualname__, "repr": repr(value)}


def to_canonical_json(value: Any) -> Optional[str]:
    """Serialise *value* to a deterministic JSON string.

    Keys are sorted so mapping insertion order never affects the result;
    mappings with non-string keys are written as key/value pairs sorted
    by key type and text.  Integral numbers serialise as ints whatever
    their type, and values JSON has no notation for (bytes, date-times,
    sets, other objects) are tagged so they never equal a plain string.
    ``MISSING`` serialises to ``None`` so it differs from every present
    value, ``None`` included (which serialises to ``"null"``).
    """
    if value is MISSING:
        return None
    return json.dumps(_normalise(value), sort_keys=True, separators=(",", ":"))


def get_value(container: Any, key: Any, default: Any = MISSING) -> Any:
    """Look up *key* in a mapping or sequence, returning *default* when absent.

    Lookups on anything that is not subscriptable by *key* (a primitive,
    a sequence indexed with a string, ...) are treated as absent.
    """
    if container is None or isinstance(container, (str, bytes)):
        return default
    try:
        return container[key]
    except (KeyError, IndexError, TypeError, ValueError):
        return default
