from __future__ import annotations

from collections.abc import Iterable

from domain.models import Group, Interval


def group_intervals(intervals: Iterable[Interval]) -> list[Group]:
    ordered = sorted(intervals, key=lambda interval: (interval.start, interval.position))
    groups: list[Group] = []
    current: list[Interval] = []
    current_max_end = 0

    for interval in ordered:
        # Sorted by start: once a start reaches the running max end, nothing
        # later can reach back into the open group.
        if current and interval.start >= current_max_end:
            groups.append(_close_group(current, current_max_end))
            current = []
        if not current:
            current_max_end = interval.end
        current.append(interval)
        current_max_end = max(current_max_end, interval.end)

    if current:
        groups.append(_close_group(current, current_max_end))
    return groups


def _close_group(intervals: list[Interval], max_end: int) -> Group:
    return Group(intervals=tuple(intervals), start=intervals[0].start, end=max_end)
