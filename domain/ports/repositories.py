from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from domain.models import DayLayoutPlan


class EventRepository(Protocol):
    def load(self, path: Path) -> list[Any]: ...

    def load_all_with_paths(self, directory: Path) -> Sequence[tuple[Path, list[Any]]]: ...

    def save_layout(self, plan: DayLayoutPlan, path: Path) -> None: ...
