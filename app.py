"""
Prospect Proposal Microsite - Business Case UI
A minimal Streamlit interface that uses the engine as the single source of truth
"""

import logging
import os
from datetime import datetime

import streamlit as st

from config.default_params import (
    DEFAULT_INPUTS, DEFAULT_PROSPECT, EXPIRY_DAYS, EXPIRY_HOUR,
    LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL
)
from engine.models import ROIInputs
from components.business_case_tab import render_business_case
from utils.countdown import proposal_expiry, remaining_ms
from utils.formatting import format_duration

logging.basicConfig(
    level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Private Proposal",
    page_icon="🛡️",
    layout="wide"
)


def get_prospect():
    """Personalization from link query params over defaults"""
    params = st.query_params
    return {key: params.get(key, default) for key, default in DEFAULT_PROSPECT.items()}


def get_default_inputs():
    """Starting assumptions; link params may override any field"""
    raw = dict(DEFAULT_INPUTS)
    params = st.query_params
    raw.update({k: params[k] for k in DEFAULT_INPUTS if k in params})
    try:
        return ROIInputs.from_dict(raw)
    except ValueError as e:
        logger.warning("Ignoring invalid link params: %s", e)
        st.error(f"😕 Invalid proposal link parameter ({e}); showing default assumptions")
        return ROIInputs.from_dict(DEFAULT_INPUTS)


@st.fragment(run_every="1s")
def render_expiry_pill(expires_at):
    remaining = format_duration(remaining_ms(expires_at, datetime.now()))
    st.info(f"🕒 Expires in {remaining}")


def main():
    prospect = get_prospect()

    # Deadline is fixed when the session first opens the link
    if 'issued_at' not in st.session_state:
        st.session_state['issued_at'] = datetime.now()
    expires_at = proposal_expiry(st.session_state['issued_at'], EXPIRY_DAYS, EXPIRY_HOUR)

    st.caption(f"🛡️ Private proposal for {prospect['name']}, {prospect['title']} @ {prospect['company']}")
    st.title("Reduce unplanned downtime by 30% in 90 days")
    render_expiry_pill(expires_at)

    render_business_case(get_default_inputs())

    st.divider()
    st.caption(
        f"🔒 Read-only access · Private link · Auto-expires {expires_at:%Y-%m-%d} · "
        f"Prepared for {prospect['name']} ({prospect['title']}) · {prospect['company']}"
    )


if __name__ == "__main__":
    main()
