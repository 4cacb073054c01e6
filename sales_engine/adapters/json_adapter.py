"""JSON adapter for sales tasks."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Optional

from sales_engine.normalize import normalize_task
from sales_engine.schema import Task


def parse(file_path: str, now: Optional[datetime] = None) -> list[Task]:
    """Parse a JSON array of task objects into normalized tasks."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Malformed JSON in {file_path}: {exc.msg}") from exc

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    now = now or datetime.now(timezone.utc)
    return [normalize_task(item, index, now) for index, item in enumerate(payload)]
