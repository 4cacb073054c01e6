"""Core data schema for sales tasks."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

PRIORITY_HIGH = "High"
PRIORITY_MEDIUM = "Medium"
PRIORITY_LOW = "Low"
PRIORITIES = (PRIORITY_HIGH, PRIORITY_MEDIUM, PRIORITY_LOW)

STATUS_TODO = "Todo"
STATUS_IN_PROGRESS = "In Progress"
STATUS_DONE = "Done"
STATUSES = (STATUS_TODO, STATUS_IN_PROGRESS, STATUS_DONE)


@dataclass(frozen=True)
class Task:
    """Normalized sales task record used by all modules."""

    task_id: str
    title: str
    revenue: float
    time_taken: float
    priority: str
    status: str
    created_at: datetime
    notes: str = ""
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class DerivedTask(Task):
    """Task with ranking attributes attached."""

    roi: Optional[float] = None
    priority_weight: int = 1


def task_fields(task: Task) -> dict:
    """Return the base Task fields of any task as a dict."""

    return {f.name: getattr(task, f.name) for f in fields(Task)}


def task_to_dict(task: Task) -> dict:
    """Serialize a task into JSON-friendly primitives."""

    payload = {f.name: getattr(task, f.name) for f in fields(task)}
    for key in ("created_at", "completed_at"):
        value = payload[key]
        payload[key] = value.isoformat() if value is not None else None
    return payload
