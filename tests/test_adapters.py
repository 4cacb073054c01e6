import json
from datetime import datetime, timezone

import pytest

from sales_engine.adapters.csv_adapter import parse as parse_csv
from sales_engine.adapters.json_adapter import parse as parse_json

NOW = datetime(2025, 3, 20, 12, 0, tzinfo=timezone.utc)


def test_json_parse_applies_defaults(tmp_path):
    path = tmp_path / "tasks.json"
    payload = [
        {"id": "a", "title": "Demo", "revenue": 500, "timeTaken": 5, "priority": "High", "status": "Done",
         "createdAt": "2025-03-01T09:00:00Z", "completedAt": "2025-03-02T09:00:00Z"},
        {"title": "Bad numbers", "revenue": "lots", "timeTaken": -3},
        {"title": "Stray stamp", "status": "Todo", "completedAt": "2025-03-02T09:00:00Z"},
        {"title": "Done without stamp", "status": "Done"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    tasks = parse_json(str(path), now=NOW)

    assert len(tasks) == 4
    assert tasks[0].task_id == "a"
    assert tasks[0].completed_at == datetime(2025, 3, 2, 9, 0, tzinfo=timezone.utc)

    assert tasks[1].revenue == 0.0
    assert tasks[1].time_taken == 1.0
    assert tasks[1].priority == "Low"
    assert tasks[1].status == "Todo"
    assert tasks[1].notes == ""
    assert tasks[1].task_id
    assert (NOW - tasks[1].created_at).total_seconds() == 1

    assert tasks[2].completed_at is None
    assert tasks[3].completed_at == NOW


def test_json_parse_requires_list(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_malformed_timestamp(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([{"title": "x", "createdAt": "yesterday"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_json(str(path))


def test_json_parse_invalid_document(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_csv_parse_success(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "id,title,revenue,time_taken,priority,status,created_at,completed_at\n"
        "a,Call,1200,3,High,Done,2025-03-01T09:00:00,2025-03-03T09:00:00\n"
        "b,Email,,,Medium,In Progress,2025-03-02T09:00:00,\n",
        encoding="utf-8",
    )
    tasks = parse_csv(str(path), now=NOW)
    assert [task.task_id for task in tasks] == ["a", "b"]
    assert tasks[0].revenue == 1200.0
    assert tasks[1].revenue == 0.0
    assert tasks[1].time_taken == 1.0
    assert tasks[1].status == "In Progress"


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("title,created_at\nCall,bad\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("", encoding="utf-8")
    assert parse_csv(str(path)) == []
