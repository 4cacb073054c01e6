"""Deterministic demo data for the sales tracker."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np

from sales_engine.schema import PRIORITIES, STATUS_DONE, STATUSES, Task

_ACTIVITIES = (
    "Discovery call",
    "Product demo",
    "Proposal draft",
    "Contract review",
    "Follow-up email",
    "Pricing negotiation",
    "Renewal check-in",
    "Upsell pitch",
)
_ACCOUNTS = ("Acme", "Globex", "Initech", "Umbrella", "Hooli", "Stark", "Wayne", "Soylent")


def generate_sales_tasks(count: int = 50, seed: Optional[int] = None, now: Optional[datetime] = None) -> list[Task]:
    """Generate ``count`` plausible sales tasks from a seeded RNG."""

    rng = np.random.default_rng(seed)
    now = now or datetime.now(timezone.utc)

    tasks: list[Task] = []
    for index in range(count):
        status = STATUSES[int(rng.integers(len(STATUSES)))]
        created_at = now - timedelta(days=float(rng.uniform(1, 60)))
        completed_at = None
        if status == STATUS_DONE:
            elapsed = (now - created_at).total_seconds()
            completed_at = created_at + timedelta(seconds=float(rng.uniform(0, elapsed)))

        activity = _ACTIVITIES[int(rng.integers(len(_ACTIVITIES)))]
        account = _ACCOUNTS[int(rng.integers(len(_ACCOUNTS)))]
        tasks.append(
            Task(
                task_id=f"seed-{index + 1}",
                title=f"{activity} - {account}",
                revenue=float(round(rng.uniform(100, 10000), 2)),
                time_taken=float(rng.integers(1, 41)),
                priority=PRIORITIES[int(rng.integers(len(PRIORITIES)))],
                status=status,
                created_at=created_at,
                completed_at=completed_at,
            )
        )
    return tasks
