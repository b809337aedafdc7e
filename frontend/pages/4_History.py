import streamlit as st
import pandas as pd
import altair as alt

from state import init_state
from api import get_history
from ui import app_shell, guard_login, show_error

st.set_page_config(page_title="History", page_icon="📈", layout="centered")
init_state()
app_shell("📈 History", active="history", show_tabs=True)
guard_login()

days_window = st.radio("Period", [7, 14, 30, 90], index=2, horizontal=True, format_func=lambda d: f"{d} days")

with st.spinner("Aggregating history..."):
    data = get_history(st.session_state["access_token"], days=days_window)
if show_error(data, "Could not load history"):
    st.stop()

goal = int(data.get("goal") or 0)
days = pd.DataFrame(data.get("history", []))
if days.empty:
    st.info("No intake logged in this period yet.")
    st.stop()

# the API only returns days with intake; gaps stay gaps
days["date"] = pd.to_datetime(days["date"], errors="coerce")
for col in ["totalCalories", "totalProtein", "totalCarbs", "totalFats"]:
    days[col] = pd.to_numeric(days[col], errors="coerce").fillna(0.0)
days = days.sort_values("date").reset_index(drop=True)

st.caption(f"🎯 Daily goal {goal} kcal · {len(days)} logged day(s) out of {days_window}")

c1, c2, c3, c4 = st.columns(4)
c1.metric("🔥 Avg kcal", f"{days['totalCalories'].mean():.0f}")
c2.metric("💪 Avg protein", f"{days['totalProtein'].mean():.0f} g")
c3.metric("🍚 Avg carbs", f"{days['totalCarbs'].mean():.0f} g")
c4.metric("🥑 Avg fats", f"{days['totalFats'].mean():.0f} g")

st.subheader("Calories per day")

days["status"] = days["exceeded"].map({True: "Over goal", False: "Within goal"})
line = alt.Chart(days).mark_line(point=True).encode(
    x=alt.X("date:T", title="Date", axis=alt.Axis(format="%b %d", labelAngle=0)),
    y=alt.Y("totalCalories:Q", title="kcal"),
    color=alt.value("#10b981"),
    tooltip=[
        alt.Tooltip("date:T", title="Date", format="%Y-%m-%d"),
        alt.Tooltip("totalCalories:Q", title="Calories", format=".0f"),
        alt.Tooltip("status:N", title="Status"),
    ],
)
points = alt.Chart(days).mark_circle(size=80).encode(
    x="date:T",
    y="totalCalories:Q",
    color=alt.Color("status:N", scale=alt.Scale(
        domain=["Within goal", "Over goal"], range=["#10b981", "#ef4444"]
    ), legend=alt.Legend(title=None, orient="bottom")),
)

rule_df = pd.DataFrame({"y": [float(goal)]})
rule = alt.Chart(rule_df).mark_rule(strokeDash=[6, 4]).encode(y="y:Q")

if goal > 0:
    rule_label = alt.Chart(rule_df).mark_text(
        align="left", dx=6, dy=-6, fontWeight="bold"
    ).encode(y="y:Q", text=alt.value(f"Goal {goal} kcal"))
    st.altair_chart((line + points + rule + rule_label).properties(height=300), use_container_width=True)
else:
    st.altair_chart((line + points).properties(height=300), use_container_width=True)

st.subheader("Macros per day")
macros = days.melt(
    id_vars=["date"],
    value_vars=["totalProtein", "totalCarbs", "totalFats"],
    var_name="macro",
    value_name="grams",
)
macros["macro"] = macros["macro"].str.replace("total", "", regex=False)
bars = alt.Chart(macros).mark_bar().encode(
    x=alt.X("date:T", title="Date", axis=alt.Axis(format="%b %d", labelAngle=0)),
    y=alt.Y("grams:Q", title="g", stack=True),
    color=alt.Color("macro:N", scale=alt.Scale(
        domain=["Protein", "Carbs", "Fats"], range=["#34d399", "#60a5fa", "#f59e0b"]
    )),
    tooltip=[alt.Tooltip("date:T", format="%Y-%m-%d"), "macro:N", alt.Tooltip("grams:Q", format=".1f")],
)
st.altair_chart(bars.properties(height=260), use_container_width=True)

over = int(days["exceeded"].sum())
st.markdown(f"**{over}** of {len(days)} logged day(s) went over the goal.")
