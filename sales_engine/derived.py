"""ROI, priority weights and task ranking."""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from sales_engine.schema import PRIORITY_HIGH, PRIORITY_MEDIUM, DerivedTask, Task, task_fields

_CENTS = Decimal("0.01")


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def round_money(value: float) -> float:
    """Round to 2 dp, half away from zero on the exact binary value."""

    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_roi(revenue: float, time_taken: float) -> Optional[float]:
    """Return revenue per hour rounded to 2 dp, or None when undefined."""

    if not _is_finite_number(revenue) or not _is_finite_number(time_taken) or time_taken <= 0:
        return None
    ratio = revenue / time_taken
    if not math.isfinite(ratio):
        return None
    return round_money(float(ratio))


def compute_priority_weight(priority: str) -> int:
    if priority == PRIORITY_HIGH:
        return 3
    if priority == PRIORITY_MEDIUM:
        return 2
    return 1


def with_derived(task: Task) -> DerivedTask:
    """Attach roi and priority_weight to a task without mutating it."""

    return DerivedTask(
        **task_fields(task),
        roi=compute_roi(task.revenue, task.time_taken),
        priority_weight=compute_priority_weight(task.priority),
    )


def _rank_key(task: DerivedTask) -> tuple:
    roi = task.roi if task.roi is not None else -math.inf
    title = task.title or ""
    return (-roi, -task.priority_weight, title.casefold(), title)


def sort_tasks(tasks: Iterable[DerivedTask]) -> list[DerivedTask]:
    """Rank by ROI desc (None last), priority weight desc, then title."""

    return sorted(tasks, key=_rank_key)
