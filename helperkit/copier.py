"""Deep copy of nested values.

Example:

>>> from helperkit.copier import deep_object_copy
>>> original = {"a": 1, "b": {"c": [2, 3]}}
>>> duplicate = deep_object_copy(original)
>>> duplicate["b"]["c"].append(4)
>>> original["b"]["c"]
[2, 3]

Unlike :func:`copy.deepcopy` the copy only understands plain data
(primitives, sequences and mappings) and refuses anything else, so
objects with custom behaviour never end up silently duplicated.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .exceptions import UnsupportedTypeError
from .nested import NestedKind, classify

logger = logging.getLogger(__name__)


def _copy_sequence(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        if value.dtype != object:
            return value.copy()
        out = np.empty_like(value)
        for index in np.ndindex(value.shape):
            out[index] = deep_object_copy(value[index])
        return out
    items = [deep_object_copy(item) for item in value]
    if isinstance(value, tuple):
        return tuple(items)
    return items


def deep_object_copy(value: Any) -> Any:
    """Return an independent deep copy of *value*.

    Primitives and date-time values are immutable and returned as-is.
    Lists and tuples are rebuilt element by element, numpy arrays are
    copied, and every mapping becomes a new ``dict`` holding copies of
    its values.

    Raises
    ------
    UnsupportedTypeError
        If *value* (or anything nested in it) is neither a primitive,
        a sequence nor a mapping.
    """
    kind = classify(value)
    if kind in (NestedKind.PRIMITIVE, NestedKind.DATETIME):
        return value
    if kind is NestedKind.SEQUENCE:
        return _copy_sequence(value)
    if kind is NestedKind.MAPPING:
        return {key: deep_object_copy(item) for key, item in value.items()}

    type_name = type(value).__name__
    logger.debug("Refusing to copy value of unsupported type %s", type_name)
    raise UnsupportedTypeError(type_name)


__all__ = ["deep_object_copy"]
