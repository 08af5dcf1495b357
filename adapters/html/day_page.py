from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from domain.models import DEFAULT_EVENT_TITLE, AxisLabel, DayLayoutPlan
from domain.services.build_time_axis import DEFAULT_DAY_START_HOUR, format_time, timestamp_for
from domain.services.project_geometry import percent

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class DayPageContext:
    title: str
    day: date
    day_limit: int
    day_start_hour: int = DEFAULT_DAY_START_HOUR


class DayPageRenderer:
    def __init__(self, templates_dir: Path | None = None) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )

    def render(
        self, plan: DayLayoutPlan, axis: Sequence[AxisLabel], context: DayPageContext
    ) -> str:
        template = self.env.get_template("day.html")
        return template.render(
            title=context.title,
            day_limit=context.day_limit,
            axis=[self._axis_entry(label, context) for label in axis],
            events=[
                self._event_entry(record.to_dict(), context)
                for record in plan.records_in_input_order()
            ],
        )

    def _axis_entry(self, label: AxisLabel, context: DayPageContext) -> dict[str, Any]:
        return {
            "top": label.minute,
            "clock": label.clock,
            "period": label.period,
            "is_full_hour": label.is_full_hour,
            "datetime": timestamp_for(label.minute, context.day, context.day_start_hour)
            .isoformat(timespec="minutes"),
        }

    def _event_entry(self, record: dict[str, Any], context: DayPageContext) -> dict[str, Any]:
        start, end = record["start"], record["end"]
        return {
            "title": record["title"] or DEFAULT_EVENT_TITLE,
            "top": record["top"],
            "height": record["height"],
            "left": percent(record["left"]),
            "width": percent(record["width"]),
            "start_text": format_time(start, context.day_start_hour),
            "end_text": format_time(end, context.day_start_hour),
            "start_iso": timestamp_for(start, context.day, context.day_start_hour)
            .isoformat(timespec="minutes"),
            "end_iso": timestamp_for(end, context.day, context.day_start_hour)
            .isoformat(timespec="minutes"),
            "column_offset": record["column_offset"],
            "column_count": record["column_count"],
        }
