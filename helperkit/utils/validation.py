"""
Validation helpers.

Light-weight runtime checks for helper arguments.  Failures raise
:class:`helperkit.exceptions.InvalidArgumentError`, which is also a
``ValueError``.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ..exceptions import InvalidArgumentError


def validate_mapping(value: Any, name: str) -> None:
    """Raise if *value* is not a mapping."""
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(
            f"{name} must be a mapping, got {type(value).__name__}", argument=name
        )


def validate_records(records: Any, name: str = "records") -> None:
    """Raise unless *records* is a sequence whose items are all mappings."""
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise InvalidArgumentError(
            f"{name} must be a sequence of mappings, got {type(records).__name__}", argument=name
        )
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidArgumentError(
                f"{name}[{index}] must be a mapping, got {type(record).__name__}", argument=name
            )

