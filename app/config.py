from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from adapters.layout.columns import LayoutConfig
from domain.models import DAY_LIMIT_MINUTES

DEFAULT_CONFIG_PATH = Path("config/day_layout.yaml")
CONFIG_PATH_ENV = "DAYLAYOUT_CONFIG_PATH"
MINUTES_PER_DAY = 24 * 60


def _default_sample_events() -> list[dict[str, Any]]:
    return [
        {"start": 30, "end": 150},
        {"start": 540, "end": 600},
        {"start": 560, "end": 620},
        {"start": 610, "end": 670},
    ]


class CalendarSettings(BaseModel):
    title: str = "Day Layout"
    day_start_hour: int = Field(default=9, ge=0, le=23)
    day_limit_minutes: int = Field(default=DAY_LIMIT_MINUTES, gt=0)
    axis_step_minutes: int = Field(default=30, gt=0)
    day: date | None = None
    max_workers: int = Field(default=1, ge=1)
    sample_events: list[dict[str, Any]] = Field(default_factory=_default_sample_events)

    @field_validator("title", mode="before")
    @classmethod
    def normalize_title(cls, value: object) -> str:
        text = str(value or "").strip()
        return text or "Day Layout"

    @model_validator(mode="after")
    def ensure_window_fits_day(self) -> CalendarSettings:
        if self.day_start_hour * 60 + self.day_limit_minutes > MINUTES_PER_DAY:
            msg = (
                f"calendar window of {self.day_limit_minutes} minutes starting at "
                f"{self.day_start_hour}:00 runs past midnight"
            )
            raise ValueError(msg)
        return self

    def resolved_date(self) -> date:
        return self.day or date.today()

    def to_layout_config(self) -> LayoutConfig:
        return LayoutConfig(day_limit=self.day_limit_minutes, max_workers=self.max_workers)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DAYLAYOUT_", env_nested_delimiter="__")

    calendar: CalendarSettings = CalendarSettings()

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Priority: init kwargs, environment, YAML file, .env, secrets.
        yaml_sources: tuple[PydanticBaseSettingsSource, ...] = ()
        if cls._yaml_path is not None:
            yaml_sources = (YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path),)
        return (init_settings, env_settings, *yaml_sources, dotenv_settings, file_secret_settings)


def resolve_config_path(config_path: Path | None = None) -> Path | None:
    """Pick the YAML file to read: explicit argument, then env var, then default."""
    if config_path is not None:
        candidate = config_path
    elif env_path := os.getenv(CONFIG_PATH_ENV):
        candidate = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    else:
        return None
    if not candidate.exists():
        msg = f"Config file not found: {candidate}"
        raise FileNotFoundError(msg)
    return candidate


@contextmanager
def _yaml_source(path: Path | None) -> Iterator[None]:
    previous = AppSettings._yaml_path
    AppSettings._yaml_path = path
    try:
        yield
    finally:
        AppSettings._yaml_path = previous


def load_settings(config_path: Path | None = None) -> AppSettings:
    with _yaml_source(resolve_config_path(config_path)):
        return AppSettings()
