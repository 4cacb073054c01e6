"""Normalization of raw task records into Task objects."""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timedelta
from typing import Any, Optional

from sales_engine.schema import PRIORITY_LOW, STATUS_DONE, STATUS_TODO, Task


def _first(item: dict, *keys: str) -> Any:
    for key in keys:
        value = item.get(key)
        if value not in (None, ""):
            return value
    return None


def _number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan
    return number


def _timestamp(value: Any, field: str, label: str) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError(f"{label}: malformed {field} '{value}'") from exc


def normalize_task(item: dict, index: int, now: datetime, label: str | None = None) -> Task:
    """Coerce one raw record into a Task, substituting loader defaults.

    Invalid or non-positive revenue becomes 0 and invalid or non-positive
    time becomes 1 hour. A completion stamp is only kept on Done tasks,
    where a missing one defaults to ``now``.
    """

    label = label or f"Item {index + 1}"
    if not isinstance(item, dict):
        raise ValueError(f"{label}: expected an object, got {type(item).__name__}")

    revenue = _number(item.get("revenue"))
    time_taken = _number(_first(item, "time_taken", "timeTaken"))
    status = str(_first(item, "status") or STATUS_TODO).strip()

    created_at = _timestamp(_first(item, "created_at", "createdAt"), "created_at", label)
    if created_at is None:
        created_at = now - timedelta(seconds=index)

    completed_at = None
    if status == STATUS_DONE:
        completed_at = _timestamp(_first(item, "completed_at", "completedAt"), "completed_at", label) or now

    task_id = _first(item, "task_id", "id")
    return Task(
        task_id=str(task_id).strip() if task_id is not None else uuid.uuid4().hex,
        title=str(item.get("title") or ""),
        revenue=revenue if math.isfinite(revenue) and revenue > 0 else 0.0,
        time_taken=time_taken if math.isfinite(time_taken) and time_taken > 0 else 1.0,
        priority=str(_first(item, "priority") or PRIORITY_LOW).strip(),
        status=status,
        created_at=created_at,
        notes=str(item.get("notes") or ""),
        completed_at=completed_at,
    )
