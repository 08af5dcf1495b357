from __future__ import annotations

from pathlib import Path
from typing import Any, List

import orjson

from adapters.filesystem.event_utils import (
    extract_event_list,
    iter_event_paths,
    strip_line_comments,
)
from adapters.filesystem.json_utils import parse_json_text, write_json_atomic
from domain.models import DayLayoutPlan
from domain.ports.repositories import EventRepository


class EventFileError(ValueError):
    pass


class FileSystemEventRepository(EventRepository):
    def load(self, path: Path) -> List[Any]:
        text = path.read_text(encoding="utf-8")
        try:
            payload = parse_json_text(strip_line_comments(text))
        except orjson.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise EventFileError(msg) from exc
        events = extract_event_list(payload)
        if events is None:
            msg = f"Expected a list of events or an object with an 'events' list in {path}"
            raise EventFileError(msg)
        return events

    def load_all_with_paths(self, directory: Path) -> List[tuple[Path, List[Any]]]:
        return [(path, self.load(path)) for path in sorted(iter_event_paths(directory))]

    def save_layout(self, plan: DayLayoutPlan, path: Path) -> None:
        write_json_atomic(path, plan.to_dict())
