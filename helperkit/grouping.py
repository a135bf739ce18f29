"""Grouped option lists.

Select components render grouped options as a flat list in which each
group is introduced by a header entry.  :func:`set_grouped_list` turns
a flat list of records into that shape::

    set_grouped_list(branches, "branchId", "name")

Groups appear in ascending key order.  Each group starts with
``{"header": <label>}`` taken from the first member carrying a label,
followed by copies of its members with ``"header"`` set to ``None``.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from itertools import groupby
from typing import Any, Dict, List, Mapping, Sequence, Union

import numpy as np

from .exceptions import InvalidArgumentError
from .utils.validation import validate_records

HEADER_FIELD = "header"


def _group_key(record: Mapping, group_by: str) -> Union[int, float, Decimal]:
    if group_by not in record:
        raise InvalidArgumentError(f"Record is missing group key '{group_by}'", argument="group_by")
    raw = record[group_by]
    # keys stay exact; int, float and Decimal compare exactly with each other
    if isinstance(raw, (bool, np.bool_, np.integer)):
        return int(raw)
    if isinstance(raw, (int, float, Decimal)):
        return raw
    if isinstance(raw, np.floating):
        return float(raw)
    if isinstance(raw, str):
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            pass
    raise InvalidArgumentError(
        f"Group key '{group_by}' must be numeric, got {raw!r}", argument="group_by"
    )


def _is_nan(key: Union[int, float, Decimal]) -> bool:
    if isinstance(key, Decimal):
        return key.is_nan()
    return isinstance(key, float) and math.isnan(key)


def set_grouped_list(records: Sequence[Mapping], group_by: str, name_by: str) -> List[Dict[str, Any]]:
    """Sort *records* by *group_by* and insert a header before each group.

    Parameters
    ----------
    records:
        Flat sequence of mappings.  Not modified.
    group_by:
        Field holding the numeric group key used for grouping and the
        ascending sort.  Equal keys keep their input order.
    name_by:
        Field whose value becomes the group's header label.  Groups in
        which no member has a non-null label get no header.

    Returns
    -------
    list
        Header entries and member copies, group by group.

    Raises
    ------
    InvalidArgumentError
        If *records* is not a sequence of mappings, or a group key is
        missing or not numeric.
    """
    validate_records(records)
    keyed = [(_group_key(record, group_by), record) for record in records]
    if any(_is_nan(key) for key, _ in keyed):
        raise InvalidArgumentError(f"Group key '{group_by}' must not be NaN", argument="group_by")
    keyed.sort(key=lambda pair: pair[0])

    output: List[Dict[str, Any]] = []
    for _, pairs in groupby(keyed, key=lambda pair: pair[0]):
        members = [record for _, record in pairs]
        labels = [record.get(name_by) for record in members if record.get(name_by) is not None]
        if labels:
            output.append({HEADER_FIELD: labels[0]})
        for record in members:
            output.append({**record, HEADER_FIELD: None})
    return output


__all__ = ["set_grouped_list", "HEADER_FIELD"]
