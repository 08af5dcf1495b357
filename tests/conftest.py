from __future__ import annotations

import os
from collections.abc import Callable, Generator
from datetime import date

import pytest

from app.config import AppSettings, CalendarSettings


def _clear_daylayout_env() -> None:
    for key in list(os.environ):
        if key.startswith("DAYLAYOUT_"):
            os.environ.pop(key, None)


_clear_daylayout_env()


@pytest.fixture(autouse=True)
def clear_daylayout_env() -> Generator[None, None, None]:
    _clear_daylayout_env()
    yield
    _clear_daylayout_env()


@pytest.fixture
def sample_events() -> list[dict[str, int]]:
    return [
        {"start": 30, "end": 150},
        {"start": 540, "end": 600},
        {"start": 560, "end": 620},
        {"start": 610, "end": 670},
    ]


@pytest.fixture
def calendar_settings() -> CalendarSettings:
    return CalendarSettings(
        title="Test Day",
        day_start_hour=9,
        day_limit_minutes=720,
        axis_step_minutes=30,
        day=date(2026, 10, 18),
        max_workers=1,
    )


@pytest.fixture
def calendar_settings_factory(
    calendar_settings: CalendarSettings,
) -> Callable[..., CalendarSettings]:
    def _factory(**overrides: object) -> CalendarSettings:
        return calendar_settings.model_copy(update=overrides)

    return _factory


@pytest.fixture
def app_settings(calendar_settings: CalendarSettings) -> AppSettings:
    return AppSettings(calendar=calendar_settings)


@pytest.fixture
def app_settings_factory(
    calendar_settings_factory: Callable[..., CalendarSettings],
) -> Callable[..., AppSettings]:
    def _factory(**overrides: object) -> AppSettings:
        return AppSettings(calendar=calendar_settings_factory(**overrides))

    return _factory
