"""Classification of nested values.

The structural helpers (:mod:`helperkit.copier`, :mod:`helperkit.differ`)
work on arbitrarily nested data built from primitives, ordered
sequences and mappings.  Rather than sprinkling ``isinstance`` checks
through the recursive code, both dispatch on the :class:`NestedKind`
tag returned by :func:`classify`.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

import numpy as np


class NestedKind(Enum):
    PRIMITIVE = "primitive"
    DATETIME = "datetime"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


_PRIMITIVE_TYPES = (str, bytes, bool, int, float, complex, Decimal, Fraction, Enum, np.generic)
_DATETIME_TYPES = (datetime, date, time)
_SEQUENCE_TYPES = (list, tuple, np.ndarray)


def classify(value: Any) -> NestedKind:
    """Return the :class:`NestedKind` tag for *value*.

    ``str`` and ``bytes`` are primitives even though Python treats them
    as sequences.  Sets, callables and arbitrary objects are
    ``UNSUPPORTED``.
    """
    if value is None or isinstance(value, _PRIMITIVE_TYPES):
        return NestedKind.PRIMITIVE
    if isinstance(value, _DATETIME_TYPES):
        return NestedKind.DATETIME
    if isinstance(value, _SEQUENCE_TYPES):
        return NestedKind.SEQUENCE
    if isinstance(value, Mapping):
        return NestedKind.MAPPING
    return NestedKind.UNSUPPORTED


def is_container(kind: NestedKind) -> bool:
    """True for kinds the differ descends into (date-times included)."""
    return kind in (NestedKind.SEQUENCE, NestedKind.MAPPING, NestedKind.DATETIME)


__all__ = ["NestedKind", "classify", "is_container"]
