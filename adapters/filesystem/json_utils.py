from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def parse_json_text(text: str) -> Any:
    return orjson.loads(text.encode("utf-8"))


def write_json_atomic(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.name}.tmp")
    tmp_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
    tmp_path.replace(path)
