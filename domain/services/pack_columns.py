from __future__ import annotations

from domain.models import Column, Group


def pack_group(group: Group) -> list[Column]:
    """First-fit packing of a group in ascending start order.

    A new column opens only when every existing column still holds an event
    running at the incoming start, so the column count equals the largest
    number of events overlapping at one instant. Ties fall back to the
    shorter event, then to input position.
    """
    ordered = sorted(
        group.intervals, key=lambda interval: (interval.start, interval.end, interval.position)
    )
    columns: list[Column] = []
    for interval in ordered:
        for column in columns:
            if column.fits(interval):
                column.append(interval)
                break
        else:
            column = Column()
            column.append(interval)
            columns.append(column)
    return columns
