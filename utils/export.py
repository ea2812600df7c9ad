"""CSV / Excel export of a business case."""

from io import BytesIO

import pandas as pd

from engine.series import chart_frame
from utils.formatting import format_payback

ASSUMPTION_LABELS = [
    ("leads_per_month", "Leads / month"),
    ("current_close_rate_pct", "Current close rate %"),
    ("relative_win_rate_lift_pct", "Relative win-rate lift %"),
    ("avg_deal_value", "Avg deal value"),
    ("team_size", "Team size"),
    ("hourly_rate", "Hourly rate"),
    ("time_saved_hours_per_week_per_person", "Time saved (hrs/week/person)"),
    ("discount_pct", "Discount %"),
]

RESULT_LABELS = [
    ("monthly_added_revenue", "Added revenue / mo"),
    ("monthly_time_value", "Time value / mo"),
    ("monthly_total_value", "Total value / mo"),
    ("monthly_price", "Your price / mo"),
    ("monthly_net", "Net value / mo"),
]


def business_case_frame(inputs, result):
    """Assumptions and results as a two-column Metric/Value table."""
    rows = [{"Metric": label, "Value": getattr(inputs, key)} for key, label in ASSUMPTION_LABELS]
    rows.append({"Metric": "Plan", "Value": inputs.plan.info.name})
    rows += [{"Metric": label, "Value": round(getattr(result, key), 2)} for key, label in RESULT_LABELS]
    # "<n/a>" instead of inf so the sheet stays numeric-or-text
    rows.append({"Metric": "Payback (months)", "Value": format_payback(result.payback_months)})
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def business_case_csv(inputs, result, points):
    df = business_case_frame(inputs, result)
    series = chart_frame(points).rename(columns={"month": "Metric"})
    out = df.to_csv(index=False) + "\n" + series.to_csv(index=False)
    return out.encode("utf-8")


def business_case_excel(inputs, result, points):
    """Workbook bytes with 'Business Case' and 'Cumulative 6m' sheets."""
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as xw:
        business_case_frame(inputs, result).to_excel(xw, index=False, sheet_name="Business Case")
        chart_frame(points).to_excel(xw, index=False, sheet_name="Cumulative 6m")
    bio.seek(0)
    return bio.read()
