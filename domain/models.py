from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, field_validator

DAY_LIMIT_MINUTES = 720
DEFAULT_EVENT_TITLE = "Sample Item"


class EventRecord(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    start: int
    end: int
    title: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def drop_non_text_title(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Interval:
    start: int
    end: int
    position: int = 0
    title: str | None = None

    def overlaps(self, other: Interval) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Group:
    intervals: tuple[Interval, ...]
    start: int
    end: int

    def __len__(self) -> int:
        return len(self.intervals)


@dataclass
class Column:
    intervals: List[Interval] = field(default_factory=list)
    max_end: int = 0

    def fits(self, interval: Interval) -> bool:
        return self.max_end <= interval.start

    def append(self, interval: Interval) -> None:
        self.intervals.append(interval)
        self.max_end = interval.end


@dataclass(frozen=True)
class EventBox:
    top: float
    left: float
    width: float
    height: float


@dataclass(frozen=True)
class LayoutRecord:
    interval: Interval
    column_offset: int
    column_count: int

    @property
    def width(self) -> float:
        return 100 / self.column_count

    @property
    def left(self) -> float:
        return self.width * self.column_offset

    @property
    def top(self) -> int:
        return self.interval.start

    @property
    def height(self) -> int:
        return self.interval.end - self.interval.start

    def to_box(self) -> EventBox:
        return EventBox(top=self.top, left=self.left, width=self.width, height=self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.interval.position,
            "start": self.interval.start,
            "end": self.interval.end,
            "title": self.interval.title,
            "column_offset": self.column_offset,
            "column_count": self.column_count,
            "top": self.top,
            "left": self.left,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class GroupLayout:
    group: Group
    columns: List[Column]
    records: List[LayoutRecord]

    @property
    def column_count(self) -> int:
        return len(self.columns)


@dataclass(frozen=True)
class DayLayoutPlan:
    groups: List[GroupLayout]
    dropped: int = 0

    @property
    def records(self) -> List[LayoutRecord]:
        return [record for group in self.groups for record in group.records]

    def records_in_input_order(self) -> List[LayoutRecord]:
        return sorted(self.records, key=lambda record: record.interval.position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": [
                {
                    "start": layout.group.start,
                    "end": layout.group.end,
                    "column_count": layout.column_count,
                    "positions": [interval.position for interval in layout.group.intervals],
                }
                for layout in self.groups
            ],
            "records": [record.to_dict() for record in self.records_in_input_order()],
            "dropped": self.dropped,
        }


@dataclass(frozen=True)
class AxisLabel:
    minute: int
    clock: str
    period: str
    is_full_hour: bool

    @property
    def text(self) -> str:
        return f"{self.clock} {self.period}"
