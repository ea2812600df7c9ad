"""Cumulative benefit vs cost series for the business-case chart"""
import math
from typing import List

import pandas as pd

from .models import ROIOutputs, ChartPoint


def round_half_up(x: float):
    """Nearest integer, .5 rounds toward +inf; non-finite values pass through"""
    if not math.isfinite(x):
        return x
    return int(math.floor(x + 0.5))


def month_label(month: int) -> str:
    return f"M{month}"


def build_chart(result: ROIOutputs, horizon_months: int = 6) -> List[ChartPoint]:
    """
    Cumulative benefit and cost for months 1..horizon_months.

    Sums are kept unrounded; each point is rounded only when emitted.
    """
    points = []
    cum_benefit = 0.0
    cum_cost = 0.0
    for m in range(1, horizon_months + 1):
        cum_benefit += result.monthly_total_value
        cum_cost += result.monthly_price
        points.append(ChartPoint(
            label=month_label(m),
            cumulative_benefit=round_half_up(cum_benefit),
            cumulative_cost=round_half_up(cum_cost),
        ))
    return points


def chart_frame(points: List[ChartPoint]) -> pd.DataFrame:
    """Chart points as a month/benefit/cost DataFrame"""
    return pd.DataFrame(
        [{"month": p.label, "benefit": p.cumulative_benefit, "cost": p.cumulative_cost} for p in points],
        columns=["month", "benefit", "cost"],
    )
