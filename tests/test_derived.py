import math
from datetime import datetime

import numpy as np
import pytest

from sales_engine.derived import compute_priority_weight, compute_roi, sort_tasks, with_derived
from sales_engine.schema import DerivedTask, Task


def make_task(title, revenue, time_taken, priority="Low", status="Todo", task_id=None):
    return Task(
        task_id=task_id or title,
        title=title,
        revenue=revenue,
        time_taken=time_taken,
        priority=priority,
        status=status,
        created_at=datetime.fromisoformat("2025-01-01T09:00:00"),
    )


def test_compute_roi_rounds_to_two_places():
    assert compute_roi(100, 10) == 10.0
    assert compute_roi(10, 3) == 3.33
    assert compute_roi(2, 3) == 0.67
    assert compute_roi(1, 8) == 0.13
    assert compute_roi(1.005, 1) == 1.0
    assert compute_roi(2.675, 1) == 2.67


def test_compute_roi_accepts_numpy_scalars():
    assert compute_roi(np.int64(100), np.int64(10)) == 10.0
    assert compute_roi(np.float64(10), np.int32(3)) == 3.33
    assert compute_roi(True, 1) is None


@pytest.mark.parametrize(
    "revenue,time_taken",
    [(100, 0), (100, -2), (math.nan, 1), (math.inf, 1), (100, math.inf), (100, math.nan), (None, 1), (1e308, 1e-10)],
)
def test_compute_roi_undefined_inputs(revenue, time_taken):
    assert compute_roi(revenue, time_taken) is None


def test_priority_weight_is_total():
    assert compute_priority_weight("High") == 3
    assert compute_priority_weight("Medium") == 2
    assert compute_priority_weight("Low") == 1
    assert compute_priority_weight("urgent") == 1


def test_with_derived_copies_fields_without_mutation():
    task = make_task("A", 100, 10, priority="High")
    derived = with_derived(task)
    assert isinstance(derived, DerivedTask)
    assert derived.roi == 10.0
    assert derived.priority_weight == 3
    assert derived.title == task.title
    assert derived.created_at == task.created_at
    assert not hasattr(task, "roi")


def test_sort_tasks_cascade():
    tasks = [
        with_derived(make_task("zeta", 100, 0)),
        with_derived(make_task("beta", 50, 10, priority="Low")),
        with_derived(make_task("alpha", 50, 10, priority="Low")),
        with_derived(make_task("gamma", 50, 10, priority="High")),
        with_derived(make_task("top", 900, 10)),
    ]
    ranked = sort_tasks(tasks)
    assert [task.title for task in ranked] == ["top", "gamma", "alpha", "beta", "zeta"]
    assert [task.title for task in tasks][0] == "zeta"


def test_sort_tasks_title_is_case_insensitive_and_idempotent():
    tasks = [with_derived(make_task(title, 10, 1)) for title in ("banana", "Apple", "apple", "Cherry")]
    ranked = sort_tasks(tasks)
    assert [task.title for task in ranked] == ["Apple", "apple", "banana", "Cherry"]
    assert sort_tasks(ranked) == ranked


def test_sort_tasks_keeps_input_order_for_full_ties():
    first = with_derived(make_task("same", 10, 1, task_id="first"))
    second = with_derived(make_task("same", 10, 1, task_id="second"))
    assert [task.task_id for task in sort_tasks([first, second])] == ["first", "second"]
