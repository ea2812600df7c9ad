"""Editable business case section."""

from datetime import datetime

import streamlit as st

from config.default_params import DEFAULT_INPUTS, CHART_HORIZON_MONTHS
from engine.models import Plan, ROIInputs
from engine.compute import compute_roi
from engine.series import build_chart, chart_frame
from utils.formatting import format_currency, format_payback
from utils.visualizations import create_benefit_cost_chart
from utils.export import business_case_csv, business_case_excel

NUMBER_FIELDS = [
    ("leads_per_month", "Leads / month"),
    ("current_close_rate_pct", "Current close rate %"),
    ("relative_win_rate_lift_pct", "Relative win-rate lift %"),
    ("avg_deal_value", "Avg deal value ($)"),
    ("team_size", "Team size"),
    ("hourly_rate", "Hourly rate ($)"),
    ("time_saved_hours_per_week_per_person", "Time saved (hrs/week/person)"),
    ("discount_pct", "Discount %"),
]


def get_inputs_from_ui(defaults: ROIInputs) -> ROIInputs:
    """Build a complete ROIInputs from the input widgets"""
    values = {}
    cols = st.columns(2)
    for i, (key, label) in enumerate(NUMBER_FIELDS):
        with cols[i % 2]:
            values[key] = st.number_input(label, value=float(getattr(defaults, key)), key=f"roi_{key}")

    st.markdown("**Plan**")
    plans = list(Plan)
    values["plan"] = st.radio(
        "Plan",
        plans,
        index=plans.index(defaults.plan),
        format_func=lambda p: f"{p.info.name} ({format_currency(p.info.listed_price)})",
        horizontal=True,
        label_visibility="collapsed",
        key="roi_plan",
    )
    st.caption(values["plan"].info.description)
    return ROIInputs.from_dict(values)


def render_business_case(defaults: ROIInputs = None):
    """Render the business case: inputs and stats on the left, chart on the right."""
    if defaults is None:
        defaults = ROIInputs.from_dict(DEFAULT_INPUTS)

    st.header("Business case (editable)")
    st.caption("Tweak assumptions to see impact. We'll validate during discovery.")

    col1, col2 = st.columns(2)

    with col1:
        inputs = get_inputs_from_ui(defaults)
        roi = compute_roi(inputs)

        stat_cols = st.columns(3)
        stat_cols[0].metric("Added revenue / mo", format_currency(roi.monthly_added_revenue))
        stat_cols[1].metric("Time value / mo", format_currency(roi.monthly_time_value))
        stat_cols[2].metric("Total value / mo", format_currency(roi.monthly_total_value))

        stat_cols = st.columns(3)
        stat_cols[0].metric("Your price / mo", format_currency(roi.monthly_price))
        stat_cols[1].metric("Net value / mo", format_currency(roi.monthly_net))
        stat_cols[2].metric("Payback (months)", format_payback(roi.payback_months))
        if roi.monthly_net < 0:
            st.warning("⚠️ Price exceeds monthly value at these assumptions")

    points = build_chart(roi, CHART_HORIZON_MONTHS)

    with col2:
        fig = create_benefit_cost_chart(chart_frame(points))
        st.plotly_chart(fig, use_container_width=True)
        st.caption(
            f"Cumulative benefits vs cost over {CHART_HORIZON_MONTHS} months "
            "(editable inputs on left). Not a guarantee; actuals vary."
        )

        stamp = datetime.now().strftime('%Y%m%d')
        dl1, dl2 = st.columns(2)
        with dl1:
            st.download_button(
                "Business case (CSV)",
                data=business_case_csv(inputs, roi, points),
                file_name=f"Business_Case_{stamp}.csv",
                mime="text/csv"
            )
        with dl2:
            st.download_button(
                "Business case (Excel)",
                data=business_case_excel(inputs, roi, points),
                file_name=f"Business_Case_{stamp}.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
            )

    return inputs, roi, points
