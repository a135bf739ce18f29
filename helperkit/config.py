"""Runtime settings.

A handful of helpers have knobs that deployments may want to tune
without code changes.  Values are read from ``HELPERKIT_*`` environment
variables; a ``.env`` file in the working directory is loaded first
when present.  Call :func:`get_settings` to obtain the validated
settings object.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "HELPERKIT_"

# Mapping from setting name to the environment variable it is read from
ENV_VARS = {
    "relative_window_hours": ENV_PREFIX + "RELATIVE_WINDOW_HOURS",
    "phone_filter_keys": ENV_PREFIX + "PHONE_FILTER_KEYS",
}


class HelperSettings(BaseModel):
    """Validated helper settings."""

    # get_date_from_now switches from relative to absolute output past this age
    relative_window_hours: int = Field(default=24, ge=0)
    phone_filter_keys: List[str] = Field(default_factory=lambda: ["name", "countryCode"])

    @field_validator("phone_filter_keys", mode="before")
    @classmethod
    def _split_keys(cls, value):
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",")]
        if isinstance(value, list):
            value = [part for part in value if part]
            if not value:
                raise ValueError("phone_filter_keys must name at least one key")
        return value


def _read_environment() -> dict:
    values = {}
    for name, env_var in ENV_VARS.items():
        raw = os.getenv(env_var)
        if raw is not None and raw != "":
            values[name] = raw
    return values


@lru_cache(maxsize=1)
def get_settings() -> HelperSettings:
    """Return the process settings, loading ``.env`` on first use.

    The result is cached; call ``get_settings.cache_clear()`` after
    changing the environment to reload.
    """
    if not load_dotenv():
        logger.debug("No .env file found or could not be loaded.")
    return HelperSettings(**_read_environment())


__all__ = ["HelperSettings", "get_settings", "ENV_VARS"]
