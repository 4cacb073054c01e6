import json

import pytest

from sales_engine.loader import load_tasks


def test_load_tasks_dispatches_on_suffix(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([{"title": "Call", "revenue": 10}]), encoding="utf-8")
    tasks = load_tasks(path)
    assert [task.title for task in tasks] == ["Call"]


def test_load_tasks_unsupported_suffix(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_tasks(path)


def test_load_tasks_falls_back_to_demo_data(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("[]", encoding="utf-8")
    assert len(load_tasks(path, fallback_count=12)) == 12
    assert load_tasks(path, fallback_count=0) == []
