"""Helper registry.

Front-end code historically reached these helpers through globally
registered names such as ``$FormatDate``.  This module keeps those
names available as a plain lookup table without any global
registration step:

* :func:`list_helpers` – return the registered helper names.
* :func:`get_helper` – return the callable registered under a name.

New code should import the functions directly.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .copier import deep_object_copy
from .dates import (
    format_date,
    get_date_and_time,
    get_date_from_now,
    get_next_saturday_by_week,
    get_utc_date_and_time,
    get_utc_json_date,
    get_utc_only_date,
)
from .differ import find_difference
from .files import read_file_async
from .filters import vselect_filter_phone_country
from .grouping import set_grouped_list
from .strings import string_to_capitalize, string_to_slug
from .youtube import export_youtube_id

# Map the historical global names to their implementations.  New
# helpers should be inserted here.
HELPERS: Dict[str, Callable] = {
    "FormatDate": format_date,
    "GetUtcJsonDate": get_utc_json_date,
    "GetUtcOnlyDate": get_utc_only_date,
    "GetUtcDateAndTime": get_utc_date_and_time,
    "GetDateAndTime": get_date_and_time,
    "GetDateFromNow": get_date_from_now,
    "GetNextSaturdayByWeek": get_next_saturday_by_week,
    "StringToSlug": string_to_slug,
    "StringToCapitalize": string_to_capitalize,
    "VSelectFilterPhoneCountry": vselect_filter_phone_country,
    "ReadFileAsync": read_file_async,
    "ExportYoutubeId": export_youtube_id,
    "DeepObjectCopy": deep_object_copy,
    "FindDifference": find_difference,
    "SetGrouppedList": set_grouped_list,
}


def list_helpers() -> List[str]:
    """Return the list of registered helper names."""
    return list(HELPERS.keys())


def get_helper(name: str) -> Optional[Callable]:
    """Return the helper registered under *name*.

    A leading ``$`` (as used by the old global properties) is ignored.
    Returns ``None`` for unknown or non-string names.
    """
    if not isinstance(name, str):
        return None
    return HELPERS.get(name[1:] if name.startswith("$") else name)


__all__ = ["HELPERS", "list_helpers", "get_helper"]
