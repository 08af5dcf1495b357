from __future__ import annotations

from typing import Any

import pytest

from domain.models import EventRecord, Interval
from domain.services.validate_intervals import is_valid_interval, validate_intervals


def _bounds(intervals: list[Interval]) -> list[tuple[int, int]]:
    return [(interval.start, interval.end) for interval in intervals]


def test_keeps_in_range_records_in_input_order() -> None:
    records = [{"start": 540, "end": 600}, {"start": 30, "end": 150}]
    intervals = validate_intervals(records)
    assert _bounds(intervals) == [(540, 600), (30, 150)]
    assert [interval.position for interval in intervals] == [0, 1]


@pytest.mark.parametrize(
    ("record", "expected"),
    [
        ({"start": 0, "end": 720}, True),
        ({"start": 0, "end": 0}, True),
        ({"start": 720, "end": 720}, True),
        ({"start": 720, "end": 721}, False),
        ({"start": 100, "end": 50}, False),
        ({"start": -1, "end": 10}, False),
    ],
)
def test_bounds_are_inclusive(record: dict[str, int], expected: bool) -> None:
    assert bool(validate_intervals([record])) is expected


@pytest.mark.parametrize(
    "record",
    [
        {"start": 10},
        {"end": 10},
        {},
        {"start": "10", "end": 20},
        {"start": 10.5, "end": 20},
        {"start": True, "end": 20},
        {"start": None, "end": 20},
        None,
        42,
        "start=10,end=20",
        [10, 20],
        Interval(start=None, end=20),  # type: ignore[arg-type]
        Interval(start=10, end="20"),  # type: ignore[arg-type]
    ],
)
def test_malformed_records_are_dropped_without_raising(record: Any) -> None:
    assert validate_intervals([record, {"start": 1, "end": 2}]) == [
        Interval(start=1, end=2, position=1)
    ]


def test_accepts_intervals_event_records_and_extra_keys() -> None:
    records = [
        Interval(start=10, end=20, position=99),
        EventRecord(start=30, end=40, title="Review"),
        {"start": 50, "end": 60, "title": "Lunch", "location": "Cafe"},
    ]
    intervals = validate_intervals(records)
    assert intervals == [
        Interval(start=10, end=20, position=0),
        Interval(start=30, end=40, position=1, title="Review"),
        Interval(start=50, end=60, position=2, title="Lunch"),
    ]


@pytest.mark.parametrize("title", [42, None, ["Standup"], {"text": "Standup"}])
def test_non_text_title_does_not_decide_validity(title: Any) -> None:
    intervals = validate_intervals([{"start": 10, "end": 20, "title": title}])
    assert intervals == [Interval(start=10, end=20, position=0, title=None)]


def test_custom_day_limit() -> None:
    records = [{"start": 0, "end": 480}, {"start": 0, "end": 481}]
    assert _bounds(validate_intervals(records, day_limit=480)) == [(0, 480)]


def test_output_is_the_valid_subsequence() -> None:
    records: list[Any] = [
        {"start": 5, "end": 1},
        {"start": 5, "end": 10},
        {"start": 700, "end": 800},
        {"start": 8},
        {"start": 0, "end": 720},
    ]
    intervals = validate_intervals(records)
    assert [interval.position for interval in intervals] == [1, 4]


def test_is_valid_interval() -> None:
    assert is_valid_interval(Interval(start=0, end=720))
    assert not is_valid_interval(Interval(start=0, end=721))
    assert is_valid_interval(Interval(start=0, end=721), day_limit=1440)


def test_empty_input() -> None:
    assert validate_intervals([]) == []
