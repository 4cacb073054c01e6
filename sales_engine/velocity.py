"""Creation-to-completion velocity by priority."""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import datetime
from typing import Sequence

from sales_engine.schema import PRIORITIES, Task
from sales_engine.throughput import to_utc

_SECONDS_PER_DAY = 86400.0


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, rounded half up and floored at zero."""

    elapsed = (to_utc(end) - to_utc(start)).total_seconds() / _SECONDS_PER_DAY
    return max(0, math.floor(elapsed + 0.5))


def compute_velocity_by_priority(tasks: Sequence[Task]) -> dict:
    """Average days to completion per priority; empty groups report 0."""

    durations: dict[str, list[int]] = defaultdict(list)
    for task in tasks:
        if task.completed_at is None or task.created_at is None:
            continue
        if task.priority not in PRIORITIES:
            continue
        durations[task.priority].append(days_between(task.created_at, task.completed_at))

    return {
        priority: {
            "avg_days": sum(durations[priority]) / len(durations[priority]) if durations[priority] else 0.0
        }
        for priority in PRIORITIES
    }
