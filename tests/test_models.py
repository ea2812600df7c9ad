import dataclasses

import pytest

from engine.models import Plan, PLAN_CATALOGUE, ROIInputs, ROIOutputs, PAYBACK_NEVER
from config.default_params import DEFAULT_INPUTS


def test_plan_catalogue_covers_every_plan():
    assert set(PLAN_CATALOGUE) == set(Plan)
    assert Plan.PILOT.info.listed_price == 9000.0
    assert Plan.PILOT.info.term_months == 3
    assert Plan.PILOT.info.monthly_price == 3000.0
    assert Plan.STARTER.info.monthly_price == 1200.0


@pytest.mark.parametrize("raw,plan", [
    ("starter", Plan.STARTER),
    ("Pro", Plan.PRO),
    (" pilot ", Plan.PILOT),
    (Plan.PRO, Plan.PRO),
])
def test_plan_from_value(raw, plan):
    assert Plan.from_value(raw) is plan


def test_unknown_plan_rejected():
    with pytest.raises(ValueError):
        Plan.from_value("enterprise")
    with pytest.raises(ValueError):
        ROIInputs(plan="enterprise")
    with pytest.raises(ValueError):
        ROIInputs.from_dict({"plan": "free"})


def test_string_plan_is_coerced():
    assert ROIInputs(plan="pilot").plan is Plan.PILOT


def test_inputs_are_immutable():
    inputs = ROIInputs()
    with pytest.raises(dataclasses.FrozenInstanceError):
        inputs.discount_pct = 10


def test_replace_returns_new_record():
    inputs = ROIInputs()
    changed = inputs.replace(discount_pct=10, plan="starter")
    assert changed is not inputs
    assert changed.discount_pct == 10
    assert changed.plan is Plan.STARTER
    assert inputs.discount_pct == 0.0
    assert inputs.plan is Plan.PRO
    assert changed.leads_per_month == inputs.leads_per_month


def test_from_dict_coerces_numbers():
    inputs = ROIInputs.from_dict({"leads_per_month": "55", "avg_deal_value": 1000, "plan": "pilot"})
    assert inputs.leads_per_month == 55.0
    assert inputs.avg_deal_value == 1000.0
    assert inputs.plan is Plan.PILOT
    # untouched fields keep defaults
    assert inputs.team_size == 3.0


def test_from_dict_bad_number_raises():
    with pytest.raises(ValueError):
        ROIInputs.from_dict({"team_size": "three"})


def test_defaults_match_config():
    assert ROIInputs.from_dict(DEFAULT_INPUTS) == ROIInputs()
    assert ROIInputs().as_dict() == {**{k: float(v) for k, v in DEFAULT_INPUTS.items() if k != "plan"},
                                     "plan": "pro"}


def test_pays_back_flag():
    base = dict(monthly_added_revenue=0, monthly_time_value=0, monthly_total_value=0,
                monthly_price=0, monthly_net=0)
    assert not ROIOutputs(payback_months=PAYBACK_NEVER, **base).pays_back
    assert ROIOutputs(payback_months=3, **base).pays_back
