import datetime as dt

import streamlit as st
import pandas as pd
import altair as alt

from ui import app_shell, guard_login, show_error
from state import init_state
from api import delete_intake, get_daily, get_today, update_intake


st.set_page_config(page_title="Dashboard", page_icon="📊", layout="centered")
init_state()
app_shell("📊 Calorie Dashboard", active="dashboard", show_tabs=True)
guard_login()

token = st.session_state.get("access_token")

CLR_C = "#60a5fa"
CLR_P = "#34d399"
CLR_F = "#f59e0b"
GREY  = "#e5e7eb"

with st.spinner("Loading today's summary..."):
    today = get_today(token)
if show_error(today, "Could not load today's summary"):
    st.stop()

if today.get("exceeded"):
    st.markdown(
        "<div class='warn'>⚠️ Calorie limit exceeded! "
        f"You are {today['consumed'] - today['goal']} kcal over today's goal.</div>",
        unsafe_allow_html=True,
    )

h1, h2, h3 = st.columns(3)
h1.metric("Consumed", f"{today['consumed']} kcal")
h2.metric("Goal", f"{today['goal']} kcal")
h3.metric("Remaining", f"{today['remaining']} kcal")
st.progress(today["percentage"] / 100, text=f"{today['percentage']}% of daily goal")


def macro_donut(nutrients: dict) -> alt.Chart:
    df = pd.DataFrame({
        "macro": ["Protein", "Carbs", "Fats"],
        "gram": [nutrients["protein"], nutrients["carbs"], nutrients["fats"]],
    })
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=40)
        .encode(
            theta="gram:Q",
            color=alt.Color("macro:N", scale=alt.Scale(
                domain=["Protein", "Carbs", "Fats"], range=[CLR_P, CLR_C, CLR_F]
            )),
            tooltip=["macro:N", alt.Tooltip("gram:Q", format=".1f")],
        )
        .properties(height=220)
    )


nutrients = today["nutrients"]
st.markdown("### 🥗 Today's macros")
m1, m2 = st.columns([1.2, 1])
with m1:
    if sum(nutrients.values()) > 0:
        st.altair_chart(macro_donut(nutrients), use_container_width=True)
    else:
        st.caption("No macros logged yet today.")
with m2:
    st.metric("Protein", f"{nutrients['protein']:.1f} g")
    st.metric("Carbs", f"{nutrients['carbs']:.1f} g")
    st.metric("Fats", f"{nutrients['fats']:.1f} g")

st.divider()

# ── records for a chosen day ─────────────────
day = st.date_input("Day", value=dt.date.today(), max_value=dt.date.today())
daily = get_daily(token, day.isoformat())
if show_error(daily, "Could not load intake"):
    st.stop()

totals = daily["totals"]
st.markdown(
    f"**{day.strftime('%A, %b %d')}** · {totals['calories']} kcal · "
    f"P {totals['protein']:.1f} g · C {totals['carbs']:.1f} g · F {totals['fats']:.1f} g"
)

if not daily["intakes"]:
    st.info("Nothing logged for this day.")

for item in daily["intakes"]:
    with st.container(border=True):
        a, b, c = st.columns([3, 1.3, 1.2])
        with a:
            st.markdown(f"**{item['name']}** × {item['quantity']}")
            st.caption(f"{item['calories'] * item['quantity']} kcal")
        with b:
            qty = st.number_input(
                "Qty", min_value=1, max_value=20, value=int(item["quantity"]), key=f"q-{item['id']}"
            )
            if qty != item["quantity"]:
                if not show_error(update_intake(token, item["id"], int(qty)), "Update failed"):
                    st.rerun()
        with c:
            st.write("")
            if st.button("🗑️", key=f"del-{item['id']}", use_container_width=True):
                if not show_error(delete_intake(token, item["id"]), "Delete failed"):
                    st.rerun()
