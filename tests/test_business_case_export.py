from io import BytesIO
import csv

import pytest
from openpyxl import load_workbook

from engine.models import Plan, ROIInputs
from engine.compute import compute_roi
from engine.series import build_chart
from utils.export import business_case_frame, business_case_csv, business_case_excel


def wb_from_bytes(binary: bytes):
    return load_workbook(BytesIO(binary), data_only=True)


def find_value(ws, label):
    for r in range(1, ws.max_row + 1):
        if ws.cell(r, 1).value == label:
            return ws.cell(r, 2).value
    return None


@pytest.fixture
def default_case():
    inputs = ROIInputs()
    roi = compute_roi(inputs)
    return inputs, roi, build_chart(roi)


def test_frame_has_assumptions_and_results(default_case):
    inputs, roi, _ = default_case
    df = business_case_frame(inputs, roi)
    values = dict(zip(df["Metric"], df["Value"]))
    assert values["Leads / month"] == 40.0
    assert values["Plan"] == "Pro"
    assert values["Added revenue / mo"] == pytest.approx(60_000.0)
    assert values["Total value / mo"] == pytest.approx(72_470.4)
    assert values["Payback (months)"] == "1.0"


def test_frame_never_payback_is_text():
    inputs = ROIInputs(avg_deal_value=0, time_saved_hours_per_week_per_person=0)
    df = business_case_frame(inputs, compute_roi(inputs))
    assert df["Value"].iloc[-1] == "<n/a>"


def test_excel_sheets_and_values(default_case):
    wb = wb_from_bytes(business_case_excel(*default_case))
    assert wb.sheetnames == ["Business Case", "Cumulative 6m"]

    ws = wb["Business Case"]
    assert ws.cell(1, 1).value == "Metric"
    assert abs(find_value(ws, "Your price / mo") - 2500.0) < 0.01
    assert abs(find_value(ws, "Net value / mo") - 69_970.4) < 0.01

    series = wb["Cumulative 6m"]
    assert [series.cell(1, c).value for c in range(1, 4)] == ["month", "benefit", "cost"]
    assert series.cell(7, 1).value == "M6"
    assert series.cell(7, 3).value == 15000


def test_excel_with_non_finite_values_does_not_raise():
    inputs = ROIInputs(avg_deal_value=float("inf"), plan=Plan.STARTER)
    roi = compute_roi(inputs)
    data = business_case_excel(inputs, roi, build_chart(roi))
    assert wb_from_bytes(data).sheetnames == ["Business Case", "Cumulative 6m"]


def test_csv_contains_both_tables(default_case):
    text = business_case_csv(*default_case).decode("utf-8")
    rows = list(csv.reader(text.splitlines()))
    assert rows[0] == ["Metric", "Value"]
    assert ["Plan", "Pro"] in rows
    assert ["Metric", "benefit", "cost"] in rows
    assert ["M6", "434822", "15000"] in rows
