"""Demo script for sales-task-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sales_engine.adapters.json_adapter import parse
from sales_engine.report import build_report


def main() -> None:
    tasks = parse("examples/sample_tasks.json")
    report = build_report(tasks)
    print("Top tasks:", [(task["title"], task["roi"]) for task in report["tasks"][:3]])
    print("Metrics:", report["metrics"])
    print("Funnel:", report["funnel"])
    print("Throughput:", report["throughput"])
    print("Forecast:", report["forecast"])
    print("Velocity:", report["velocity"])
    print("Weighted pipeline:", report["weighted_pipeline"])


if __name__ == "__main__":
    main()
