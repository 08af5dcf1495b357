from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from domain.models import DAY_LIMIT_MINUTES, EventRecord, Interval

logger = logging.getLogger(__name__)


def is_valid_interval(interval: Interval, day_limit: int = DAY_LIMIT_MINUTES) -> bool:
    return interval.start >= 0 and interval.end >= interval.start and interval.end <= day_limit


def validate_intervals(
    records: Iterable[Any], day_limit: int = DAY_LIMIT_MINUTES
) -> list[Interval]:
    """Keep the records that read as in-range intervals, in input order.

    Anything else (missing fields, wrong types, out-of-range bounds) is dropped
    without raising, so one bad record never blocks the rest of the day.
    """
    valid: list[Interval] = []
    dropped = 0
    for position, record in enumerate(records):
        interval = _as_interval(record, position)
        if interval is None or not is_valid_interval(interval, day_limit):
            dropped += 1
            continue
        valid.append(interval)
    if dropped:
        logger.debug("Dropped %d invalid interval(s), kept %d.", dropped, len(valid))
    return valid


def _as_interval(record: Any, position: int) -> Interval | None:
    if isinstance(record, EventRecord):
        parsed = record
    elif isinstance(record, (Interval, Mapping)):
        fields = (
            {"start": record.start, "end": record.end, "title": record.title}
            if isinstance(record, Interval)
            else dict(record)
        )
        try:
            parsed = EventRecord.model_validate(fields)
        except ValidationError:
            return None
    else:
        return None
    return Interval(start=parsed.start, end=parsed.end, position=position, title=parsed.title)
