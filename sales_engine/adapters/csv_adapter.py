"""CSV adapter for sales tasks."""

from __future__ import annotations

import csv
from datetime import datetime, timezone
from typing import Optional

from sales_engine.normalize import normalize_task
from sales_engine.schema import Task


def parse(file_path: str, now: Optional[datetime] = None) -> list[Task]:
    """Parse a CSV file with a header row into normalized tasks."""

    now = now or datetime.now(timezone.utc)
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        tasks: list[Task] = []
        for index, row in enumerate(reader):
            tasks.append(normalize_task(row, index, now, label=f"Row {index + 2}"))
        return tasks
