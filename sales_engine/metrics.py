"""Sales outcome metrics."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from sales_engine.derived import compute_roi
from sales_engine.schema import STATUS_DONE, Task

GRADE_EXCELLENT = "Excellent"
GRADE_GOOD = "Good"
GRADE_NEEDS_IMPROVEMENT = "Needs Improvement"

DEFAULT_EXCELLENT_ABOVE = 500.0
DEFAULT_GOOD_FROM = 200.0


def compute_total_revenue(tasks: Sequence[Task]) -> float:
    """Sum revenue of Done tasks only."""

    return sum(task.revenue for task in tasks if task.status == STATUS_DONE)


def compute_total_time_taken(tasks: Sequence[Task]) -> float:
    return sum(task.time_taken for task in tasks)


def compute_time_efficiency(tasks: Sequence[Task]) -> float:
    """Percentage of tasks that are Done."""

    if not tasks:
        return 0.0
    done = sum(1 for task in tasks if task.status == STATUS_DONE)
    return (done / len(tasks)) * 100.0


def compute_revenue_per_hour(tasks: Sequence[Task]) -> float:
    revenue = compute_total_revenue(tasks)
    time_taken = compute_total_time_taken(tasks)
    return revenue / time_taken if time_taken > 0 else 0.0


def compute_average_roi(tasks: Sequence[Task]) -> float:
    """Mean of all defined ROI values, 0 when none is defined."""

    rois = [compute_roi(task.revenue, task.time_taken) for task in tasks]
    rois = [roi for roi in rois if roi is not None and math.isfinite(roi)]
    if not rois:
        return 0.0
    return sum(rois) / len(rois)


def compute_performance_grade(
    avg_roi: float,
    excellent_above: float = DEFAULT_EXCELLENT_ABOVE,
    good_from: float = DEFAULT_GOOD_FROM,
) -> str:
    if avg_roi > excellent_above:
        return GRADE_EXCELLENT
    if avg_roi >= good_from:
        return GRADE_GOOD
    return GRADE_NEEDS_IMPROVEMENT


def compute_metrics(tasks: Sequence[Task], grading: Optional[dict] = None) -> dict:
    """Compute revenue, time, efficiency, ROI and grade metrics."""

    if not tasks:
        return {
            "total_revenue": 0.0,
            "total_time_taken": 0.0,
            "time_efficiency_pct": 0.0,
            "revenue_per_hour": 0.0,
            "average_roi": 0.0,
            "performance_grade": GRADE_NEEDS_IMPROVEMENT,
        }

    grading = grading or {}
    average_roi = compute_average_roi(tasks)
    return {
        "total_revenue": compute_total_revenue(tasks),
        "total_time_taken": compute_total_time_taken(tasks),
        "time_efficiency_pct": compute_time_efficiency(tasks),
        "revenue_per_hour": compute_revenue_per_hour(tasks),
        "average_roi": average_roi,
        "performance_grade": compute_performance_grade(
            average_roi,
            excellent_above=grading.get("excellent_above", DEFAULT_EXCELLENT_ABOVE),
            good_from=grading.get("good_from", DEFAULT_GOOD_FROM),
        ),
    }
