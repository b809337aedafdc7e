import streamlit as st
from state import init_state, sign_in
from ui import app_shell
from api import login

st.set_page_config(page_title="Login", layout="centered")
init_state()

app_shell("🔐 Login", active="auth", show_tabs=False)

if st.session_state.get("access_token"):
    st.switch_page("pages/3_Dashboard.py")

with st.form("login_form", clear_on_submit=False):
    email = st.text_input("Email", placeholder="you@example.com")
    password = st.text_input("Password", type="password")
    submit = st.form_submit_button("Login", use_container_width=True, type="primary")


if submit:
    email = (email or "").strip()

    if not email or not password:
        st.warning("Enter both email and password.")
        st.stop()

    with st.spinner("Signing in..."):
        res = login(email, password)

    err = res.get("error")
    if err:
        st.error(f"Login failed: {err}")
    elif res.get("token"):
        sign_in(res)
        st.success(f"Welcome, {res['user']['name']}!")
        st.switch_page("pages/3_Dashboard.py")
    else:
        st.error("Invalid email or password")


st.divider()
st.page_link("pages/0_Register.py", label="No account yet? ➜ Register")
