"""Legis Ledger — Streamlit UI.

Run locally:
    streamlit run streamlit_app.py --server.port 8501

Access: http://localhost:8501
"""

import asyncio

import streamlit as st

from ledger.config import Settings
from ledger.container import AppContainer
from ledger.logging_config import get_logger, setup_logging
from ledger.navigator import CertaintyNavigator
from ledger.rendering.html import render_claim_list
from ledger.rendering.svg import render_svg

st.set_page_config(
    page_title="Legis Ledger",
    page_icon="⚖️",
    layout="wide",
)

st.markdown("""
<style>
    .block-container { padding-top: 2rem; max-width: 1400px; }

    .claim {
        border: 1px solid #e2e8f0;
        border-radius: 8px;
        padding: 12px 16px;
        margin-bottom: 12px;
        transition: box-shadow 0.3s ease, background 0.3s ease;
    }
    .claim.highlight { background: #fef3c7; box-shadow: 0 0 0 3px #f59e0b; }
    .claim-meta span { margin-right: 12px; font-size: 14px; }
    .grade { font-weight: 600; }
    .empty-state, .error { color: #64748b; padding: 24px 0; }
    .error { color: #991b1b; }
    .hint { font-size: 13px; }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def configure_logging() -> None:
    settings = Settings()
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)


configure_logging()
logger = get_logger("streamlit_app")


def get_navigator() -> CertaintyNavigator:
    """One navigator per browser session; the manifest loads on first use."""
    if "navigator" not in st.session_state:
        navigator = AppContainer().navigator()
        asyncio.run(navigator.load())
        st.session_state.navigator = navigator
    return st.session_state.navigator


navigator = get_navigator()

st.title("Legis Ledger")
st.caption("Certainty navigator: every claim placed by confidence")

if navigator.error:
    st.error(navigator.error)
    st.stop()

percent = st.slider(
    "Confidence threshold",
    min_value=0,
    max_value=100,
    value=navigator.threshold.percent,
    format="%d%%",
)
if percent != navigator.threshold.percent:
    navigator.set_threshold_percent(percent)

st.markdown(
    f"Showing **{navigator.visible_count}** of **{navigator.total_count}** claims"
)

col_funnel, col_list = st.columns([3, 2])

with col_list:
    st.markdown("### Claims")
    choices = [card.claim.id for card in navigator.list_view.cards]
    titles = {card.claim.id: card.claim.title for card in navigator.list_view.cards}
    picked = st.selectbox(
        "Jump to claim",
        options=[""] + choices,
        format_func=lambda cid: titles.get(cid, "—"),
    )
    # Reruns replay the widget value; only a new pick counts as a click
    if picked and picked != st.session_state.get("last_pick"):
        navigator.click(picked)
    st.session_state.last_pick = picked
    navigator.tick()
    st.markdown(render_claim_list(navigator.list_view), unsafe_allow_html=True)

with col_funnel:
    st.markdown("### Certainty funnel")
    st.markdown(render_svg(navigator.scene), unsafe_allow_html=True)
