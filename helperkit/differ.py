"""First-difference detection between two nested mappings.

:func:`find_difference` walks the keys of the *previous* state and
reports the first field whose value changed in the *current* state.
It answers "which top-level field changed?" for form-dirty checks and
is deliberately coarse:

* only the first difference is reported;
* keys that exist only in ``current`` are never looked at, so pure
  additions are not differences;
* a changed list reports the whole current list, not the element;
* a changed nested mapping reports the nested :class:`Difference`
  itself as the value, so descriptors may nest to any depth.

Example:

>>> find_difference({"x": {"y": 1}}, {"x": {"y": 2}})
Difference(field='x', value=Difference(field='y', value=2))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .nested import NestedKind, classify, is_container
from .utils.json_parse import MISSING, get_value, to_canonical_json
from .utils.validation import validate_mapping


@dataclass(frozen=True)
class Difference:
    """The first changed field and what it changed to."""
    field: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain ``{"field", "value"}`` dictionaries, recursively."""
        value = self.value.to_dict() if isinstance(self.value, Difference) else self.value
        return {"field": self.field, "value": value}


def _reported(value: Any) -> Any:
    return None if value is MISSING else value


def _strictly_differs(prev: Any, current: Any) -> bool:
    if current is MISSING:
        return True
    # a container never equals a scalar, even a one-element array
    if is_container(classify(prev)) != is_container(classify(current)):
        return True
    # True == 1 in Python; treat booleans and numbers as distinct values
    if isinstance(prev, bool) != isinstance(current, bool):
        return True
    try:
        return bool(prev != current)
    except (TypeError, ValueError):
        # comparison does not reduce to a single truth value
        return prev is not current


def _sequence_differs(prev: Any, current: Any) -> bool:
    for index in range(len(prev)):
        if to_canonical_json(prev[index]) != to_canonical_json(get_value(current, index)):
            return True
    return False


def _find_difference(prev: Mapping, current: Any) -> Optional[Difference]:
    for key in prev:
        prev_value = prev[key]
        current_value = get_value(current, key)
        prev_kind = classify(prev_value)

        if is_container(prev_kind) and is_container(classify(current_value)):
            if prev_kind is NestedKind.SEQUENCE:
                if _sequence_differs(prev_value, current_value):
                    return Difference(key, current_value)
            elif prev_kind is NestedKind.DATETIME:
                if to_canonical_json(prev_value) != to_canonical_json(current_value):
                    return Difference(key, current_value)
            else:
                nested = _find_difference(prev_value, current_value)
                if nested is not None:
                    return Difference(key, nested)
        elif _strictly_differs(prev_value, current_value):
            return Difference(key, _reported(current_value))
    return None


def find_difference(prev: Mapping, current: Mapping) -> Optional[Difference]:
    """Return the first field of *prev* whose value differs in *current*.

    Parameters
    ----------
    prev:
        The previous state.  Its keys, in insertion order, drive the
        traversal.
    current:
        The current state.

    Returns
    -------
    Difference | None
        ``Difference(field, value)`` for the first changed field, or
        ``None`` when every key of ``prev`` is unchanged.  A key missing
        from ``current`` is reported with value ``None``.

    Raises
    ------
    InvalidArgumentError
        If either argument is not a mapping.
    """
    validate_mapping(prev, "prev")
    validate_mapping(current, "current")
    return _find_difference(prev, current)


__all__ = ["Difference", "find_difference"]
