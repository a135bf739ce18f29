"""String helpers for URLs and labels."""

import re
from typing import Optional

# Characters folded before stripping; anything else outside [a-z0-9 -]
# is dropped.  The table is kept as published so existing slugs stay
# stable.
_SLUG_FROM = "ãàáäâẽèéëêìíïîõòóöôùúüûñçşğ·/_,:;"
_SLUG_TO = "aaaaaee-eeiiiioooo-uuuuncsg------"
_SLUG_TABLE = str.maketrans(_SLUG_FROM, _SLUG_TO)

_UNSAFE_RE = re.compile(r"[^a-z0-9 -]")
_SPACES_RE = re.compile(r"\s+")
_DASHES_RE = re.compile(r"-+")


def string_to_slug(text: Optional[str]) -> Optional[str]:
    """Turn *text* into a URL-friendly slug.

    >>> string_to_slug("Hello, World! This is an Example!")
    'hello-world-this-is-an-example'

    Returns ``None`` when *text* is empty or not a string.
    """
    if not text or not isinstance(text, str):
        return None
    slug = text.strip().lower().translate(_SLUG_TABLE)
    slug = _UNSAFE_RE.sub("", slug)
    slug = _SPACES_RE.sub("-", slug)
    return _DASHES_RE.sub("-", slug)


def string_to_capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return text[:1].upper() + text[1:]


__all__ = ["string_to_slug", "string_to_capitalize"]
