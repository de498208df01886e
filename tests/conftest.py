"""
Pytest configuration.

- Registers Hypothesis profiles for local dev and CI.
- Pins the process TZ to UTC so "auto" timezone detection is deterministic.
"""

import os
import time

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=60,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=200,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


def _tzset() -> None:
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture(scope="session", autouse=True)
def freeze_tz_env():
    prev = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    _tzset()
    try:
        yield
    finally:
        if prev is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = prev
        _tzset()


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    for name in ("PRAYTIMES_CONFIG", "PRAYTIMES_METHOD", "PRAYTIMES_FORMAT"):
        monkeypatch.delenv(name, raising=False)


MECCA = (21.4225, 39.8262)


@pytest.fixture
def mecca():
    return MECCA
