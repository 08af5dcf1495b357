from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, List

from domain.models import DAY_LIMIT_MINUTES, DayLayoutPlan, Group, GroupLayout, LayoutRecord
from domain.ports.layout import DayLayoutEngine
from domain.services.group_intervals import group_intervals
from domain.services.pack_columns import pack_group
from domain.services.project_geometry import project_columns
from domain.services.validate_intervals import validate_intervals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    day_limit: int = DAY_LIMIT_MINUTES
    max_workers: int = 1


class ColumnLayoutEngine(DayLayoutEngine):
    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def build_plan(self, records: Iterable[Any]) -> DayLayoutPlan:
        records = list(records)
        intervals = validate_intervals(records, day_limit=self.config.day_limit)
        groups = group_intervals(intervals)

        # Groups share no intervals, so they can be packed independently.
        if self.config.max_workers > 1 and len(groups) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                layouts = list(executor.map(self._lay_out_group, groups))
        else:
            layouts = [self._lay_out_group(group) for group in groups]

        dropped = len(records) - len(intervals)
        logger.debug(
            "Laid out %d interval(s) in %d group(s), dropped %d.",
            len(intervals),
            len(layouts),
            dropped,
        )
        return DayLayoutPlan(groups=layouts, dropped=dropped)

    def _lay_out_group(self, group: Group) -> GroupLayout:
        columns = pack_group(group)
        return GroupLayout(group=group, columns=columns, records=project_columns(columns))


def lay_out_day(records: Iterable[Any], config: LayoutConfig | None = None) -> List[LayoutRecord]:
    return ColumnLayoutEngine(config).build_plan(records).records_in_input_order()
