from __future__ import annotations

import json
import os
from pathlib import Path

import streamlit as st


def _load_json(path: Path) -> dict | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return None


def _format_currency(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"${value:,.2f}"


def main() -> None:
    st.set_page_config(page_title="Volatility DCA Report", layout="wide")

    default_report_path = os.getenv("VOLZONE_REPORT_PATH", "reports/latest.json")
    report_path = Path(st.sidebar.text_input("Report path", value=default_report_path))
    report = _load_json(report_path)
    if report is None:
        st.warning(f"No report found at {report_path}")
        return

    st.title(f"{report.get('symbol', '?')}: volatility zones")
    distribution = report.get("distribution", {})
    simulation = report.get("simulation", {})

    col_a, col_b, col_c, col_d = st.columns(4)
    col_a.metric("Current Price", _format_currency(report.get("current_price")))
    col_b.metric("Mean Daily Change", f"{distribution.get('mean', 0.0):.2f}%")
    col_c.metric(
        "1σ Range",
        f"±{distribution.get('sd', 0.0):.2f}%",
        f"{distribution.get('count_1sigma', 0)} days ({distribution.get('pct_within_1sigma', 0.0):.1f}%)",
        delta_color="off",
    )
    col_d.metric(
        "2σ Range",
        f"±{distribution.get('sd', 0.0) * 2:.2f}%",
        f"{distribution.get('count_2sigma', 0)} days ({distribution.get('pct_within_2sigma', 0.0):.1f}%)",
        delta_color="off",
    )

    if not distribution.get("total_days"):
        st.info("Not enough history for a return distribution.")
        return

    st.subheader("Price & Bollinger Bands")
    st.line_chart(
        report.get("price_chart", []),
        x="date",
        y=["close", "sma20", "upper_band", "lower_band"],
    )

    st.subheader("Daily Return Distribution")
    st.bar_chart(distribution.get("bins", []), x="bin", y="count")
    st.caption(
        "  ".join(f"{marker['label']}: {marker['bin']:.1f}%" for marker in distribution.get("markers", []))
    )

    st.subheader(f"Simulation (zones {', '.join(report.get('selected_zones', [])) or 'none'})")
    col_e, col_f, col_g, col_h = st.columns(4)
    col_e.metric("Total Buys", str(simulation.get("total_buys", 0)))
    col_f.metric("Invested", _format_currency(simulation.get("total_invested")))
    col_g.metric("Value (reinvest)", _format_currency(simulation.get("current_value")))
    col_h.metric("Total Return", f"{simulation.get('total_return', 0.0):+.2f}%")
    st.line_chart(
        report.get("equity_chart", []),
        x="date",
        y=["invested", "value_reinvest", "value_no_reinvest"],
    )

    st.json(report.get("run") or {})


if __name__ == "__main__":
    main()
