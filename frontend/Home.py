
import streamlit as st

from state import init_state
from ui import app_shell

st.set_page_config(page_title="Canteen Calorie Tracker", page_icon="🥗", layout="centered")
init_state()

app_shell("Canteen Calorie Tracker 🥗", active="home", show_tabs=True)

st.markdown(
    """
    <div style="text-align:center; margin-top:-6px;">
        <h2 style="font-weight:900; margin:6px 0;">Eat smart at the canteen</h2>
        <p style="color:#6b7280; font-size:14px; margin-bottom:12px;">
            Browse the menu, log what you eat and stay on top of your daily calorie goal.
        </p>
    </div>
    """,
    unsafe_allow_html=True,
)

if st.session_state.get("access_token"):
    user = st.session_state.get("user") or {}
    st.success(f"Welcome back, {user.get('name', '')}!")
    c1, c2 = st.columns(2)
    with c1:
        st.page_link("pages/3_Dashboard.py", label="📊 Today's dashboard", use_container_width=True)
    with c2:
        st.page_link("pages/2_Menu.py", label="🍽️ Browse the menu", use_container_width=True)
else:
    c1, c2 = st.columns(2)
    with c1:
        if st.button("🔐 Login", use_container_width=True):
            st.switch_page("pages/1_Login.py")
    with c2:
        if st.button("🧾 Register", use_container_width=True):
            st.switch_page("pages/0_Register.py")
    st.page_link("pages/2_Menu.py", label="Just looking? See today's menu ➜")
