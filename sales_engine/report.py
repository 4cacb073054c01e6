"""Assemble every analytics view for the presentation layer."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sales_engine.config import merge_config
from sales_engine.derived import sort_tasks, with_derived
from sales_engine.funnel import compute_funnel, compute_weighted_pipeline
from sales_engine.metrics import compute_metrics
from sales_engine.schema import Task, task_to_dict
from sales_engine.throughput import compute_forecast, compute_throughput_by_week
from sales_engine.velocity import compute_velocity_by_priority

logger = logging.getLogger(__name__)


def build_report(tasks: Sequence[Task], config: Optional[dict] = None) -> dict:
    """Compute the ranked view and all aggregates from one task snapshot."""

    config = merge_config(config)
    tasks = tuple(tasks)

    ranked = sort_tasks(with_derived(task) for task in tasks)
    throughput = compute_throughput_by_week(tasks)
    report = {
        "tasks": [task_to_dict(task) for task in ranked],
        "metrics": compute_metrics(tasks, grading=config["grading"]),
        "funnel": compute_funnel(tasks),
        "throughput": throughput,
        "forecast": compute_forecast(throughput, horizon=int(config["forecast"]["horizon"])),
        "velocity": compute_velocity_by_priority(tasks),
        "weighted_pipeline": compute_weighted_pipeline(tasks, weights=config["pipeline_weights"]),
    }
    logger.debug("Built report for %d tasks across %d weeks", len(tasks), len(throughput))
    return report
