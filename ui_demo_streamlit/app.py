"""Streamlit dashboard for sales-task-engine."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

from sales_engine.config import get_default_config
from sales_engine.loader import load_tasks
from sales_engine.report import build_report
from sales_engine.seed import generate_sales_tasks


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return load_tasks(temp_path, fallback_count=0)


def _fmt_money(value: float) -> str:
    return f"${value:,.2f}"


def run_engine(tasks: list, horizon: int) -> dict[str, Any]:
    """Build the report with a UI-selected forecast horizon."""

    config = get_default_config()
    config["forecast"]["horizon"] = horizon
    return build_report(tasks, config)


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Sales Task Tracker", layout="wide")
    st.title("Sales Task Tracker: Analytics")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload tasks", type=["csv", "json"])
        use_demo = st.checkbox("Use generated demo tasks", value=True)
        demo_count = st.number_input("Demo task count", min_value=1, max_value=500, value=50, step=1)
        horizon = st.slider("Forecast horizon (weeks)", min_value=1, max_value=12, value=4)
        run = st.button("Build report", type="primary")

    if not run:
        st.info("Choose a data source in the sidebar and click **Build report**.")
        return

    try:
        if use_demo:
            tasks = generate_sales_tasks(int(demo_count), seed=7)
            data_source = "generated demo tasks"
        elif uploaded is not None:
            tasks = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable demo tasks.")
            return
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    if not tasks:
        st.error("No tasks were found in the selected input.")
        return

    report = run_engine(tasks, int(horizon))
    st.success(f"Loaded {len(tasks)} tasks from {data_source}.")

    st.subheader("A) Metrics")
    metrics = report["metrics"]
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("Total revenue", _fmt_money(metrics["total_revenue"]))
    c2.metric("Efficiency", f"{metrics['time_efficiency_pct']:.1f}%")
    c3.metric("Revenue / hour", _fmt_money(metrics["revenue_per_hour"]))
    c4.metric("Average ROI", f"{metrics['average_roi']:.2f}")
    c5.metric("Grade", metrics["performance_grade"])

    st.subheader("B) Ranked tasks")
    st.dataframe(report["tasks"], use_container_width=True)

    st.subheader("C) Funnel and weighted pipeline")
    f1, f2 = st.columns(2)
    f1.table([report["funnel"]])
    f2.metric("Weighted pipeline", _fmt_money(report["weighted_pipeline"]))

    st.subheader("D) Weekly throughput and forecast")
    if report["throughput"]:
        st.bar_chart(
            {"revenue": [bucket["revenue"] for bucket in report["throughput"]]},
        )
        st.table(report["throughput"])
    else:
        st.write("No completed tasks yet.")
    st.table(report["forecast"] or [{"week": "-", "revenue": "needs two weeks of history"}])

    st.subheader("E) Velocity by priority")
    st.table([{"priority": name, "avg_days": value["avg_days"]} for name, value in report["velocity"].items()])


if __name__ == "__main__":
    main()
