from .copier import deep_object_copy
from .differ import Difference, find_difference
from .grouping import set_grouped_list
from .dates import (
    format_date,
    get_utc_json_date,
    get_utc_only_date,
    get_utc_date_and_time,
    get_date_and_time,
    get_date_from_now,
    get_next_saturday_by_week,
    relative_time,
)
from .strings import string_to_slug, string_to_capitalize
from .youtube import export_youtube_id
from .filters import vselect_filter_phone_country
from .files import read_file_async
from .registry import list_helpers, get_helper
from .exceptions import HelperError, UnsupportedTypeError, InvalidArgumentError

__all__ = [
    "deep_object_copy",
    "Difference",
    "find_difference",
    "set_grouped_list",
    "format_date",
    "get_utc_json_date",
    "get_utc_only_date",
    "get_utc_date_and_time",
    "get_date_and_time",
    "get_date_from_now",
    "get_next_saturday_by_week",
    "relative_time",
    "string_to_slug",
    "string_to_capitalize",
    "export_youtube_id",
    "vselect_filter_phone_country",
    "read_file_async",
    "list_helpers",
    "get_helper",
    "HelperError",
    "UnsupportedTypeError",
    "InvalidArgumentError",
]
