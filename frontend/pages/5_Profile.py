import streamlit as st

from state import init_state
from ui import app_shell, guard_login, show_error
from api import estimate_goal, get_profile, update_profile

st.set_page_config(page_title="Profile", page_icon="👤", layout="centered")
init_state()
app_shell("👤 Profile", active="profile", show_tabs=True)
guard_login()

token = st.session_state["access_token"]
profile = get_profile(token)
if show_error(profile, "Could not load profile"):
    st.stop()

GENDERS = ["male", "female"]
LEVELS = {
    "low": "Low · little or no exercise",
    "medium": "Medium · exercise 3-5 days/week",
    "high": "High · exercise 6-7 days/week",
}

with st.form("profile-form"):
    name = st.text_input("Name", value=profile["name"])
    c1, c2 = st.columns(2)
    with c1:
        height = st.number_input("Height (cm)", min_value=100.0, max_value=250.0, value=float(profile["height"]), step=1.0)
        age = st.number_input("Age", min_value=10, max_value=120, value=int(profile["age"]), step=1)
    with c2:
        weight = st.number_input("Weight (kg)", min_value=30.0, max_value=300.0, value=float(profile["weight"]), step=0.5)
        gender = st.selectbox("Gender", GENDERS, index=GENDERS.index(profile["gender"]))
    activity = st.selectbox(
        "Activity level", list(LEVELS), index=list(LEVELS).index(profile["activityLevel"]),
        format_func=LEVELS.get,
    )
    goal = st.number_input("Daily calorie goal (kcal)", min_value=0, max_value=10000,
                           value=int(profile["dailyCalorieGoal"]), step=50)
    c3, c4 = st.columns(2)
    with c3:
        save = st.form_submit_button("Save", use_container_width=True, type="primary")
    with c4:
        use_estimate = st.form_submit_button("Save with recommended goal", use_container_width=True)

estimate = estimate_goal(weight, height, int(age), gender, activity)
if not show_error(estimate, "Could not estimate goal"):
    st.caption(f"BMR {estimate['bmr']} kcal · recommended daily intake (TDEE) **{estimate['tdee']} kcal**")

if save or use_estimate:
    fields = {
        "name": name,
        "height": height,
        "weight": weight,
        "age": int(age),
        "gender": gender,
        "activityLevel": activity,
        "dailyCalorieGoal": int(goal),
    }
    if use_estimate and "tdee" in estimate:
        fields["dailyCalorieGoal"] = int(estimate["tdee"])
    res = update_profile(token, **fields)
    if not show_error(res, "Update failed"):
        st.session_state["user"] = res["user"]
        st.success(f"Profile saved. Daily goal: {res['user']['dailyCalorieGoal']} kcal")
