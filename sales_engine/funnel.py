"""Pipeline funnel counts and status-weighted revenue."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from sales_engine.schema import STATUS_DONE, STATUS_IN_PROGRESS, STATUS_TODO, Task

logger = logging.getLogger(__name__)

DEFAULT_PIPELINE_WEIGHTS = {
    STATUS_TODO: 0.1,
    STATUS_IN_PROGRESS: 0.5,
    STATUS_DONE: 1.0,
}

_FUNNEL_KEYS = {
    STATUS_TODO: "todo",
    STATUS_IN_PROGRESS: "in_progress",
    STATUS_DONE: "done",
}


def compute_funnel(tasks: Sequence[Task]) -> dict:
    """Count tasks per lifecycle status; unknown statuses are not counted."""

    counts = {key: 0 for key in _FUNNEL_KEYS.values()}
    for task in tasks:
        key = _FUNNEL_KEYS.get(task.status)
        if key is not None:
            counts[key] += 1
    return counts


def compute_weighted_pipeline(tasks: Sequence[Task], weights: Optional[Mapping[str, float]] = None) -> float:
    """Expected realized revenue, weighting each task by its stage."""

    weights = DEFAULT_PIPELINE_WEIGHTS if weights is None else weights
    total = 0.0
    for task in tasks:
        weight = weights.get(task.status)
        if weight is None:
            logger.warning("No pipeline weight for status %r (task %s)", task.status, task.task_id)
            continue
        total += task.revenue * weight
    return total
