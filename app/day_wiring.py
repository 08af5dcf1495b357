from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from adapters.html.day_page import DayPageContext, DayPageRenderer
from adapters.layout.columns import ColumnLayoutEngine
from app.config import AppSettings
from domain.models import AxisLabel, DayLayoutPlan
from domain.services.build_time_axis import build_time_axis


def build_layout_engine(settings: AppSettings) -> ColumnLayoutEngine:
    return ColumnLayoutEngine(settings.calendar.to_layout_config())


def build_axis(settings: AppSettings) -> list[AxisLabel]:
    calendar = settings.calendar
    return build_time_axis(
        calendar.day_limit_minutes, calendar.axis_step_minutes, calendar.day_start_hour
    )


def build_page_context(settings: AppSettings) -> DayPageContext:
    calendar = settings.calendar
    return DayPageContext(
        title=calendar.title,
        day=calendar.resolved_date(),
        day_limit=calendar.day_limit_minutes,
        day_start_hour=calendar.day_start_hour,
    )


def render_day_page(
    settings: AppSettings,
    records: Iterable[Any],
    renderer: DayPageRenderer | None = None,
) -> tuple[DayLayoutPlan, str]:
    plan = build_layout_engine(settings).build_plan(records)
    html = (renderer or DayPageRenderer()).render(
        plan, build_axis(settings), build_page_context(settings)
    )
    return plan, html
