"""Display formatting for currency, payback and countdown values."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from engine.models import PAYBACK_NEVER

PAYBACK_NA = "<n/a>"

# wide enough for any finite float at 1 decimal place
_CTX = Context(prec=400)


def _half_up(x: float, places: int = 0) -> Decimal:
    # round the exact binary value, ties away from zero
    return Decimal(x).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=_CTX)


def format_currency(n: float) -> str:
    """Whole-dollar USD with thousands separators, e.g. $1,235 or -$1,235."""
    if math.isnan(n):
        return "NaN"
    sign = "-" if n < 0 else ""
    if math.isinf(n):
        return f"{sign}$∞"
    return f"{sign}${int(_half_up(abs(n))):,}"


def format_currency_short(n: float) -> str:
    """Abbreviated USD for chart axes: $1.3M, -$2.5k, else full currency."""
    if not math.isfinite(n):
        return format_currency(n)
    sign = "-" if n < 0 else ""
    a = abs(n)
    if a >= 1_000_000:
        return f"{sign}${_half_up(a / 1_000_000, 1)}M"
    if a >= 1_000:
        return f"{sign}${_half_up(a / 1_000, 1)}k"
    return format_currency(n)


def format_payback(months: float) -> str:
    if months == PAYBACK_NEVER:
        return PAYBACK_NA
    return f"{months:.1f}"


def format_duration(ms: float) -> str:
    """
    Countdown text for a millisecond duration.

    Shows the three leading units from the largest non-zero one:
    "2d 3h 4m", "3h 4m 5s", "4m 5s" or "5s".
    """
    sec = max(0, int(ms // 1000))
    d, rem = divmod(sec, 86400)
    h, rem = divmod(rem, 3600)
    m, s = divmod(rem, 60)
    if d > 0:
        return f"{d}d {h}h {m}m"
    if h > 0:
        return f"{h}h {m}m {s}s"
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"
