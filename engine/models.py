from dataclasses import dataclass, asdict, fields, replace as _replace
from enum import Enum


class Plan(Enum):
    STARTER = "starter"
    PRO = "pro"
    PILOT = "pilot"

    @classmethod
    def from_value(cls, value) -> "Plan":
        """Coerce a plan id (or Plan) to a member; unknown ids raise ValueError"""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @property
    def info(self) -> "PlanInfo":
        return PLAN_CATALOGUE[self]


@dataclass(frozen=True)
class PlanInfo:
    name: str
    listed_price: float
    term_months: int = 1      # listed price covers this many months
    description: str = ""

    @property
    def monthly_price(self) -> float:
        """Listed price amortized over its term"""
        return self.listed_price / self.term_months


PLAN_CATALOGUE = {
    Plan.STARTER: PlanInfo("Starter", 1200.0, 1, "One line, read-only connectors, weekly check-ins"),
    Plan.PRO: PlanInfo("Pro", 2500.0, 1, "Two lines, action board, alerting, on-call hours"),
    Plan.PILOT: PlanInfo("90-day Pilot", 9000.0, 3, "All-in pilot, exec reporting, success-based roll-forward"),
}


@dataclass(frozen=True)
class ROIInputs:
    leads_per_month: float = 40.0
    current_close_rate_pct: float = 15.0
    relative_win_rate_lift_pct: float = 20.0   # relative, 15% * (1 + 20%) = 18%
    avg_deal_value: float = 50_000.0
    team_size: float = 3.0
    hourly_rate: float = 120.0
    time_saved_hours_per_week_per_person: float = 8.0
    discount_pct: float = 0.0
    plan: Plan = Plan.PRO

    def __post_init__(self):
        # plan ids are a closed set; anything else is rejected here
        object.__setattr__(self, "plan", Plan.from_value(self.plan))

    def replace(self, **changes) -> "ROIInputs":
        """New record with the given fields changed"""
        return _replace(self, **changes)

    @classmethod
    def from_dict(cls, values: dict) -> "ROIInputs":
        """
        Build inputs from raw values (e.g. form fields or query params).

        Numbers are coerced with float(); missing keys keep their defaults.
        Unknown plan ids raise ValueError here, never inside the engine.
        """
        kwargs = {}
        for name in (f.name for f in fields(cls)):
            if name not in values:
                continue
            kwargs[name] = values[name] if name == "plan" else float(values[name])
        return cls(**kwargs)

    def as_dict(self) -> dict:
        d = asdict(self)
        d["plan"] = self.plan.value
        return d


# Payback sentinel when value never exceeds price
PAYBACK_NEVER = float("inf")


@dataclass(frozen=True)
class ROIOutputs:
    monthly_added_revenue: float
    monthly_time_value: float
    monthly_total_value: float
    monthly_price: float
    monthly_net: float
    payback_months: float     # int >= 1, or PAYBACK_NEVER
    # intermediate values, kept for display/debug
    delta_close: float = 0.0
    extra_deals_per_month: float = 0.0

    @property
    def pays_back(self) -> bool:
        return self.payback_months != PAYBACK_NEVER

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ChartPoint:
    label: str
    cumulative_benefit: int
    cumulative_cost: int
