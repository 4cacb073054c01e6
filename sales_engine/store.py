"""In-memory task collection with add, update, delete and undo."""

from __future__ import annotations

import math
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from sales_engine.derived import sort_tasks, with_derived
from sales_engine.metrics import compute_metrics
from sales_engine.schema import PRIORITY_LOW, STATUS_DONE, STATUS_TODO, DerivedTask, Task


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """Owns the mutable task list; every read hands out an immutable snapshot."""

    def __init__(self, tasks: Iterable[Task] = (), clock: Optional[Callable[[], datetime]] = None):
        self._tasks: list[Task] = list(tasks)
        self._clock = clock or _utc_now
        self.last_deleted: Optional[Task] = None

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        return next((task for task in self._tasks if task.task_id == task_id), None)

    def add_task(
        self,
        title: str,
        revenue: float,
        time_taken: float,
        priority: str = PRIORITY_LOW,
        status: str = STATUS_TODO,
        notes: str = "",
    ) -> Task:
        now = self._clock()
        task = Task(
            task_id=uuid.uuid4().hex,
            title=title,
            revenue=revenue if revenue > 0 else 0.0,
            time_taken=time_taken if time_taken > 0 else 1.0,
            priority=priority,
            status=status,
            created_at=now,
            notes=notes,
            completed_at=now if status == STATUS_DONE else None,
        )
        self._tasks.append(task)
        return task

    def update_task(self, task_id: str, **patch) -> Optional[Task]:
        """Apply a field patch; returns the updated task or None if unknown."""

        for index, current in enumerate(self._tasks):
            if current.task_id != task_id:
                continue

            patch.pop("task_id", None)
            time_taken = patch.get("time_taken")
            if time_taken is None or not math.isfinite(time_taken) or time_taken <= 0:
                patch["time_taken"] = current.time_taken
            if current.status != STATUS_DONE and patch.get("status") == STATUS_DONE:
                patch["completed_at"] = self._clock()
            else:
                patch["completed_at"] = current.completed_at

            updated = replace(current, **patch)
            self._tasks[index] = updated
            return updated
        return None

    def delete_task(self, task_id: str) -> Optional[Task]:
        target = self.get(task_id)
        self.last_deleted = target
        self._tasks = [task for task in self._tasks if task.task_id != task_id]
        return target

    def undo_delete(self) -> Optional[Task]:
        """Restore the most recently deleted task, at most once."""

        restored = self.last_deleted
        if restored is None:
            return None
        self._tasks.append(restored)
        self.last_deleted = None
        return restored

    def clear_last_deleted(self) -> None:
        self.last_deleted = None

    def derived_sorted(self) -> list[DerivedTask]:
        return sort_tasks(with_derived(task) for task in self._tasks)

    def metrics(self, grading: Optional[dict] = None) -> dict:
        return compute_metrics(self.snapshot(), grading=grading)
