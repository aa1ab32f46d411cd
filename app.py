import time

import altair as alt
import pandas as pd
import streamlit as st

from fivedice.ai.baselines import GreedyAgent, RandomAgent
from fivedice.ai.expectimax import ExpectimaxAgent
from fivedice.ai.rule_based import RuleBasedAgent
from fivedice.game.categories import ALL
from fivedice.game.engine import GameEngine
from fivedice.trainer.tournament import run_tournament, summarize
from fivedice.ui.views import sorted_options

st.set_page_config(page_title="Five Dice", layout="wide")

st.title("Five Dice: Category Scoring")

AGENTS = {
    "Rule-Based": RuleBasedAgent,
    "Expectimax": ExpectimaxAgent,
    "Greedy": GreedyAgent,
    "Random": RandomAgent,
}


# --- UI HELPERS ---
def render_dice(hand):
    cols = st.columns(len(hand))
    for i, face in enumerate(hand):
        with cols[i]:
            st.markdown(f"<div style='font-size: 40px; text-align: center;'>{face.glyph}</div>", unsafe_allow_html=True)


def scorecard_frame(scorecard):
    rows = []
    for cat in ALL:
        value = scorecard.get_score(cat)
        label = f"~~{cat.label}~~" if value is not None else cat.label
        rows.append({"Category": label, "Value": "-" if value is None else value})
    return pd.DataFrame(rows)


def render_score(scorecard):
    score = scorecard.score()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Upper", score.upper)
    c2.metric("Bonus", score.bonus)
    c3.metric("Lower", score.lower)
    c4.metric("Total", score.total)


# --- NAVIGATION ---
st.sidebar.header("Control Panel")
mode = st.sidebar.radio("Mode", ["Play", "Watch Agent", "Benchmark"])

# --- PLAY ---
if mode == "Play":
    st.header("Solo Game")

    new_game = st.button("New Game")
    if new_game or "engine" not in st.session_state:
        st.session_state.engine = GameEngine()

    engine = st.session_state.engine
    render_score(engine.scorecard)

    if engine.game_over:
        st.info("Game Over")
    else:
        st.write(f"Round: {engine.turn_number} | Re-rolls left: {engine.rolls_left}")

        d_cols = st.columns(len(engine.hand))
        keep = 0
        for i, face in enumerate(engine.hand):
            with d_cols[i]:
                st.markdown(f"<div style='font-size: 40px;'>{face.glyph}</div>", unsafe_allow_html=True)
                if engine.rolls_left > 0:
                    if st.checkbox("Hold", key=f"h_{engine.turn_number}_{engine.rolls_left}_{i}"):
                        keep |= (1 << i)

        if engine.rolls_left > 0 and st.button("Roll"):
            engine.apply_action('keep', keep)
            st.rerun()

        st.write("Record:")
        cols_s = st.columns(3)
        for idx, option in enumerate(sorted_options(engine.open_options())):
            with cols_s[idx % 3]:
                if st.button(f"{option.category.label} (+{option.value})", key=f"s_{option.category.name}"):
                    engine.apply_action('score', option.category)
                    st.rerun()

    st.table(scorecard_frame(engine.scorecard))

# --- WATCH AGENT ---
elif mode == "Watch Agent":
    st.header("Spectator Mode")

    agent_name = st.selectbox("Select Agent", list(AGENTS))
    delay = st.slider("Delay (s)", 0.0, 1.0, 0.2)

    if st.button("Run Simulation"):
        agent = AGENTS[agent_name]()
        eng = GameEngine()
        ph = st.empty()

        while not eng.game_over:
            hand = eng.hand
            at, av = agent.select_action(eng.get_mask(), eng)
            eng.apply_action(at, av)

            with ph.container():
                st.write(f"Round: {eng.turn_number}")
                render_dice(hand)
                st.write(f"Action: {at} {av}")
                render_score(eng.scorecard)
            time.sleep(delay)

        st.success(f"Final score: {eng.scorecard.score().total}")
        st.table(scorecard_frame(eng.scorecard))

# --- BENCHMARK ---
elif mode == "Benchmark":
    st.header("Agent Benchmark")

    chosen = st.multiselect("Agents", list(AGENTS), default=["Rule-Based", "Greedy", "Random"])
    num_games = st.number_input("Games per agent", min_value=1, max_value=1000, value=50)
    seed = st.number_input("Seed", min_value=0, value=0)

    if st.button("Run Benchmark") and chosen:
        with st.spinner("Playing games..."):
            df = run_tournament([AGENTS[name]() for name in chosen], int(num_games), int(seed), verbose=False)

        st.table(summarize(df))

        hist = alt.Chart(df).mark_bar(opacity=0.6).encode(
            x=alt.X("Score", bin=alt.Bin(maxbins=40), title="Final Score"),
            y=alt.Y("count()", stack=None, title="Games"),
            color="Agent",
            tooltip=["Agent", "count()"],
        ).properties(height=400)
        st.altair_chart(hist, use_container_width=True)
