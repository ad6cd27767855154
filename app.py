"""
Card Scavenger Hunt Web App
Streamlit interface: deal cards and try to complete the current mission.
"""

import random
import time

import pandas as pd
import streamlit as st

from scavenger_hunt.engine.deck import Card
from scavenger_hunt.engine.game import GameConfig, RoundState
from scavenger_hunt.engine.history import SessionHistory
from scavenger_hunt.logging_utils import setup_logging
from scavenger_hunt.simulator import Simulator

# Page config
st.set_page_config(
    page_title="Card Scavenger Hunt",
    page_icon="🃏",
    layout="centered"
)

setup_logging()

CARD_COLORS = {"red": "#dc2626", "black": "#111827", "purple": "#7c3aed"}


@st.cache_resource
def get_config() -> GameConfig:
    return GameConfig()


@st.cache_data
def mission_odds(samples: int) -> pd.DataFrame:
    batch = Simulator(get_config(), seed=0).odds_by_rule(rounds_per_rule=samples)
    return pd.DataFrame({
        "Mission": list(batch.attempts.keys()),
        "Completion %": [batch.successes.get(k, 0) / n * 100 for k, n in batch.attempts.items()],
    })


config = get_config()

# Session state: the round is replaced wholesale on every action
if "round" not in st.session_state:
    st.session_state.round = RoundState()
    st.session_state.rng = random.Random(config.seed)
    st.session_state.history = SessionHistory(session_name="web")

state: RoundState = st.session_state.round
rng: random.Random = st.session_state.rng
history: SessionHistory = st.session_state.history


def card_html(card: Card) -> str:
    color = CARD_COLORS[card.color]
    return (
        f"<div style='width:90px;height:130px;background:white;border-radius:10px;"
        f"box-shadow:0 5px 15px rgba(0,0,0,0.4);color:{color};font-weight:bold;"
        f"display:flex;flex-direction:column;justify-content:space-between;padding:8px;'>"
        f"<div>{card.rank}</div>"
        f"<div style='text-align:center;font-size:2.5rem'>{card.suit}</div>"
        f"<div style='text-align:right;transform:rotate(180deg)'>{card.rank}</div>"
        f"</div>"
    )


st.title("🃏 Card Scavenger Hunt")

# Mission box
st.caption("CURRENT MISSION:")
if state.task:
    st.subheader(state.task.text)
else:
    st.subheader("Click 'New Mission' to start!")

col1, col2 = st.columns(2)
with col1:
    if st.button("🔄 New Mission", use_container_width=True):
        with st.spinner("Choosing a mission..."):
            time.sleep(config.mission_delay)
            st.session_state.round = state.new_mission(rng, history)
        st.rerun()
with col2:
    if st.button("Deal Cards", type="primary", use_container_width=True):
        with st.spinner("Shuffling..."):
            time.sleep(config.deal_delay)
            st.session_state.round = state.deal(config, rng, history)
        st.rerun()

st.divider()

# Hand
if not state.hand:
    st.markdown("*Deal cards to attempt the mission...*")
else:
    cols = st.columns(len(state.hand))
    for col, card in zip(cols, state.hand):
        with col:
            st.markdown(card_html(card), unsafe_allow_html=True)

if state.completed:
    st.success("✅ Mission Accomplished!")

# Sidebar: session log and odds
st.sidebar.header("Session")
summary = history.to_dict()["summary"]
st.sidebar.metric("Missions completed", f"{summary['missions_completed']}/{summary['missions']}")
st.sidebar.metric("Deals", summary["deals"])

with st.sidebar.expander("Recent events"):
    for event in reversed(history.recent(8)):
        if event.event_type == "mission":
            st.markdown(f"**#{event.mission_number}** {event.data['text']}")
        elif event.event_type == "deal":
            mark = "✅" if event.data["completed"] else "·"
            st.markdown(f"{mark} {' '.join(event.data['hand'])}")

st.sidebar.header("Mission Odds")
if st.sidebar.button("Estimate odds"):
    chart_data = mission_odds(2000)
    st.sidebar.bar_chart(chart_data.set_index("Mission"))

# Footer
st.divider()
st.markdown("*Built with the Card Scavenger Hunt engine*")
