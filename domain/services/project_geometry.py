from __future__ import annotations

from collections.abc import Sequence

from domain.models import Column, LayoutRecord


def project_columns(columns: Sequence[Column]) -> list[LayoutRecord]:
    column_count = len(columns)
    return [
        LayoutRecord(interval=interval, column_offset=offset, column_count=column_count)
        for offset, column in enumerate(columns)
        for interval in column.intervals
    ]


def percent(value: float, digits: int = 4) -> float:
    return round(value, digits)
