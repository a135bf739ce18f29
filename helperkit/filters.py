"""Option filtering for searchable select inputs."""

from typing import Any, List, Mapping, Optional, Sequence

from .config import get_settings


def vselect_filter_phone_country(
    options: Sequence[Mapping[str, Any]],
    search: str,
    keys: Optional[Sequence[str]] = None,
) -> List[Mapping[str, Any]]:
    """Return the countries whose name or dialling code contains *search*.

    Matching is case-insensitive on the stringified value of each key.
    *keys* defaults to the ``phone_filter_keys`` setting
    (``name`` and ``countryCode``); a missing key never matches.
    Option order is preserved.
    """
    keys = list(keys) if keys is not None else get_settings().phone_filter_keys
    needle = search.lower()
    return [
        country for country in options
        if any(key in country and needle in str(country[key]).lower() for key in keys)
    ]


__all__ = ["vselect_filter_phone_country"]
