from __future__ import annotations

from datetime import date, datetime, time, timedelta

from domain.models import DAY_LIMIT_MINUTES, AxisLabel

DEFAULT_DAY_START_HOUR = 9
DEFAULT_AXIS_STEP_MINUTES = 30


def format_clock(minute: int, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> tuple[str, str]:
    total = day_start_hour * 60 + minute
    hour, mins = divmod(total % (24 * 60), 60)
    period = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{mins:02d}", period


def format_time(minute: int, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> str:
    clock, period = format_clock(minute, day_start_hour)
    return f"{clock} {period}"


def build_time_axis(
    day_limit: int = DAY_LIMIT_MINUTES,
    step: int = DEFAULT_AXIS_STEP_MINUTES,
    day_start_hour: int = DEFAULT_DAY_START_HOUR,
) -> list[AxisLabel]:
    if step <= 0:
        msg = f"Axis step must be positive, got {step}"
        raise ValueError(msg)
    labels: list[AxisLabel] = []
    for minute in range(0, day_limit + 1, step):
        clock, period = format_clock(minute, day_start_hour)
        labels.append(
            AxisLabel(
                minute=minute,
                clock=clock,
                period=period,
                is_full_hour=(day_start_hour * 60 + minute) % 60 == 0,
            )
        )
    return labels


def timestamp_for(
    minute: int, day: date, day_start_hour: int = DEFAULT_DAY_START_HOUR
) -> datetime:
    return datetime.combine(day, time(hour=day_start_hour)) + timedelta(minutes=minute)
