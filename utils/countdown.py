"""Proposal link expiry: deadline and time remaining"""
from datetime import datetime

from dateutil.relativedelta import relativedelta


def proposal_expiry(issued_at: datetime, days: int = 5, hour: int = 17) -> datetime:
    """Deadline `days` after issue at `hour`:00 on that day (5:00 PM by default)"""
    return issued_at + relativedelta(days=+days, hour=hour, minute=0, second=0, microsecond=0)


def remaining_ms(expires_at: datetime, now: datetime) -> int:
    """Milliseconds until expiry, never negative"""
    delta = expires_at - now
    return max(0, int(delta.total_seconds() * 1000))
