"""Default parameters for the prospect business case."""

# Starting assumptions for the editable business case
DEFAULT_INPUTS = {
    'leads_per_month': 40,
    'current_close_rate_pct': 15,
    'relative_win_rate_lift_pct': 20,   # relative lift, e.g. +20% of current
    'avg_deal_value': 50000,
    'team_size': 3,
    'hourly_rate': 120,
    'time_saved_hours_per_week_per_person': 8,
    'discount_pct': 0,
    'plan': 'pro',                      # starter | pro | pilot
}

# Personalization, normally overridden by link query params
DEFAULT_PROSPECT = {
    'name': 'Alex Chen',
    'title': 'CTO',
    'company': 'Great Lakes Manufacturing Co.',
    'city': 'Cleveland, OH',
}

# Private link auto-expires this many days out, at this local hour
EXPIRY_DAYS = 5
EXPIRY_HOUR = 17

CHART_HORIZON_MONTHS = 6

LOG_LEVEL_ENV = 'ROI_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'
