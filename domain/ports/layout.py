from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from domain.models import DayLayoutPlan


class DayLayoutEngine(Protocol):
    def build_plan(self, records: Iterable[Any]) -> DayLayoutPlan:
        ...
