import pytest
from pydantic import ValidationError

import helperkit
from helperkit.config import HelperSettings, get_settings
from helperkit.registry import get_helper, list_helpers


def test_list_helpers_contains_every_global_name():
    names = list_helpers()
    assert len(names) == 15
    assert "FormatDate" in names
    assert "SetGrouppedList" in names


def test_get_helper_accepts_global_prefix():
    assert get_helper("$DeepObjectCopy") is helperkit.deep_object_copy
    assert get_helper("FindDifference") is helperkit.find_difference


def test_get_helper_unknown_returns_none():
    assert get_helper("DoesNotExist") is None


def test_registered_helpers_work_through_lookup():
    slug = get_helper("StringToSlug")
    assert slug("Hello World") == "hello-world"


def test_default_settings():
    settings = get_settings()
    assert settings.relative_window_hours == 24
    assert settings.phone_filter_keys == ["name", "countryCode"]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("HELPERKIT_RELATIVE_WINDOW_HOURS", "48")
    monkeypatch.setenv("HELPERKIT_PHONE_FILTER_KEYS", "name, dialCode ,")
    settings = get_settings()
    assert settings.relative_window_hours == 48
    assert settings.phone_filter_keys == ["name", "dialCode"]


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("HELPERKIT_RELATIVE_WINDOW_HOURS", "5")
    assert get_settings() is first


@pytest.mark.parametrize("overrides", [{"relative_window_hours": -1}, {"relative_window_hours": "soon"}, {"phone_filter_keys": ","}])
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        HelperSettings(**overrides)


@pytest.mark.parametrize("name", [None, 42, b"FormatDate"])
def test_get_helper_non_string_returns_none(name):
    assert get_helper(name) is None
