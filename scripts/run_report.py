"""Build the sales analytics report from a CSV/JSON task file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sales_engine.config import get_default_config, load_config
from sales_engine.loader import load_tasks
from sales_engine.report import build_report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run sales-task-engine analytics report")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON tasks file")
    parser.add_argument("--config", help="Optional YAML/JSON config file")
    parser.add_argument("--horizon", type=int, help="Override forecast horizon in weeks")
    parser.add_argument("--output", default="outputs/sales_report.json", help="Where to save the report")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else get_default_config()
        if args.horizon is not None:
            config["forecast"]["horizon"] = args.horizon
        tasks = load_tasks(args.data, fallback_count=int(config["seed"]["fallback_count"]))
    except (ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = build_report(tasks, config)
    print(json.dumps(report, indent=2))

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved sales report to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
