from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

EVENTS_KEY = "events"


def iter_event_paths(directory: Path) -> Iterable[Path]:
    yield from directory.glob("*.json")


def strip_line_comments(content: str) -> str:
    result_lines: list[str] = []
    for line in content.splitlines():
        in_string = False
        escaped = False
        cleaned = []
        for idx, char in enumerate(line):
            if not escaped and char == '"':
                in_string = not in_string
            if not in_string and char == "/" and idx + 1 < len(line) and line[idx + 1] == "/":
                break
            cleaned.append(char)
            escaped = char == "\\" and not escaped
        result_lines.append("".join(cleaned))
    return "\n".join(result_lines)


def extract_event_list(payload: Any) -> list[Any] | None:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get(EVENTS_KEY), list):
        return payload[EVENTS_KEY]
    return None
