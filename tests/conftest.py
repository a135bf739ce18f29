import pytest

from helperkit.config import ENV_VARS, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def branch_records():
    return [
        {"id": 2, "name": "B", "v": 1},
        {"id": 1, "name": "A", "v": 2},
        {"id": 1, "name": "A", "v": 3},
    ]


@pytest.fixture
def countries():
    return [
        {"name": "Turkey", "countryCode": "+90"},
        {"name": "United Kingdom", "countryCode": "+44"},
        {"name": "Germany", "countryCode": "+49"},
        {"name": "Tunisia", "countryCode": "+216"},
    ]
