"""Load task collections from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from sales_engine.adapters import csv_adapter, json_adapter
from sales_engine.schema import Task
from sales_engine.seed import generate_sales_tasks

logger = logging.getLogger(__name__)


def load_tasks(path: str | Path, fallback_count: int = 50) -> list[Task]:
    """Parse a .csv/.json task file; fall back to demo data when it is empty."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        tasks = csv_adapter.parse(str(path))
    elif suffix == ".json":
        tasks = json_adapter.parse(str(path))
    else:
        raise ValueError("Unsupported input format, expected .csv or .json")

    if not tasks and fallback_count > 0:
        logger.info("No tasks found in %s, generating %d demo tasks", path, fallback_count)
        return generate_sales_tasks(fallback_count)
    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return tasks
