"""ROI projection engine: monthly value, price and payback from sales assumptions"""
import logging
import math

from .models import Plan, PLAN_CATALOGUE, ROIInputs, ROIOutputs, PAYBACK_NEVER

logger = logging.getLogger(__name__)

WEEKS_PER_MONTH = 4.33        # 52 / 12, fixed calendar approximation
PAYBACK_HORIZON_MONTHS = 36   # payback search stops here


def price_for_plan(plan: Plan) -> float:
    """Monthly-equivalent base price (multi-month plans are amortized)"""
    return PLAN_CATALOGUE[plan].monthly_price


def close_rate_delta(current_close_rate_pct: float, relative_lift_pct: float) -> float:
    """
    Absolute close-rate gain from a relative win-rate lift.

    A 15% baseline with +20% relative lift gives 0.18 - 0.15 = 0.03.
    Negative lifts floor at zero; NaN passes through.
    """
    current = current_close_rate_pct / 100.0
    lifted = current * (1 + relative_lift_pct / 100.0)
    delta = lifted - current
    if math.isnan(delta):
        return delta
    if delta < 0:
        logger.debug("Relative lift %.2f%% floored to zero close-rate gain", relative_lift_pct)
        return 0.0
    return delta


def payback_months(monthly_total_value: float, monthly_price: float) -> float:
    """
    Months until the running sum of monthly net value reaches the monthly price.

    Returns PAYBACK_NEVER when value never exceeds price, otherwise an int
    between 1 and PAYBACK_HORIZON_MONTHS.
    """
    if monthly_total_value <= monthly_price:
        return PAYBACK_NEVER

    net = monthly_total_value - monthly_price
    cum = 0.0
    months = 0
    while months < PAYBACK_HORIZON_MONTHS and cum < monthly_price:
        cum += net
        months += 1
    return max(1, months)


def compute_roi(inputs: ROIInputs) -> ROIOutputs:
    """
    Compute monthly ROI metrics from a complete set of assumptions.

    Never raises for numeric inputs: negatives, zeros and non-finite values
    flow through the arithmetic unchanged.
    """
    delta_close = close_rate_delta(inputs.current_close_rate_pct, inputs.relative_win_rate_lift_pct)

    extra_deals = inputs.leads_per_month * delta_close
    added_revenue = extra_deals * inputs.avg_deal_value

    time_value = (
        inputs.team_size
        * inputs.hourly_rate
        * inputs.time_saved_hours_per_week_per_person
        * WEEKS_PER_MONTH
    )

    price = price_for_plan(inputs.plan) * (1 - inputs.discount_pct / 100.0)

    total_value = added_revenue + time_value
    net = total_value - price
    payback = payback_months(total_value, price)

    if payback == PAYBACK_NEVER:
        logger.debug("No payback: value %.2f/mo does not exceed price %.2f/mo", total_value, price)
    logger.debug(
        "ROI plan=%s value=%.2f price=%.2f net=%.2f payback=%s",
        inputs.plan.value, total_value, price, net, payback,
    )

    return ROIOutputs(
        monthly_added_revenue=added_revenue,
        monthly_time_value=time_value,
        monthly_total_value=total_value,
        monthly_price=price,
        monthly_net=net,
        payback_months=payback,
        delta_close=delta_close,
        extra_deals_per_month=extra_deals,
    )
