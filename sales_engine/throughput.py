"""Weekly completion throughput and flat revenue forecast."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

import numpy as np

from sales_engine.schema import Task

DEFAULT_FORECAST_HORIZON = 4


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken as UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso_week_key(value: datetime) -> tuple[int, int]:
    """Return the (ISO year, ISO week) of an instant, evaluated in UTC."""

    iso_year, week, _ = to_utc(value).isocalendar()
    return iso_year, week


def week_label(iso_year: int, week: int) -> str:
    return f"{iso_year}-W{week}"


def compute_throughput_by_week(tasks: Sequence[Task]) -> list[dict]:
    """Bucket tasks by ISO week of completed_at, oldest week first.

    Only ``completed_at`` is consulted: a Done task without a completion
    stamp is skipped and a stamped task is counted whatever its status.
    """

    buckets: dict[tuple[int, int], dict] = {}
    for task in tasks:
        if task.completed_at is None:
            continue
        key = iso_week_key(task.completed_at)
        bucket = buckets.setdefault(key, {"week": week_label(*key), "count": 0, "revenue": 0.0})
        bucket["count"] += 1
        bucket["revenue"] += task.revenue

    return [buckets[key] for key in sorted(buckets)]


def compute_forecast(buckets: Sequence[dict], horizon: int = DEFAULT_FORECAST_HORIZON) -> list[dict]:
    """Project the mean weekly revenue flat over ``horizon`` future weeks."""

    if len(buckets) < 2 or horizon <= 0:
        return []

    average = float(np.mean([bucket["revenue"] for bucket in buckets]))
    projected = max(0.0, average)
    return [{"week": f"+{step}", "revenue": projected} for step in range(1, horizon + 1)]
