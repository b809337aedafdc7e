import streamlit as st
from state import init_state, sign_in
from api import register


st.set_page_config(page_title="Register", layout="centered")
init_state()
from ui import app_shell
app_shell("👤 Register", active="auth", show_tabs=False)


with st.form("register-form", clear_on_submit=False):
    name = st.text_input("Name")
    email = st.text_input("Email")
    col1, col2 = st.columns(2)
    with col1:
        password = st.text_input("Password", type="password")
    with col2:
        confirm = st.text_input("Confirm password", type="password")
    submitted = st.form_submit_button("Create account", use_container_width=True)

if submitted:
    # 1) client-side checks
    if not name or not email or not password:
        st.warning("Name, email and password are required.")
    elif len(password) < 6:
        st.warning("Password must be at least 6 characters.")
    elif password != confirm:
        st.warning("Passwords do not match.")
    else:
        # 2) server call
        with st.spinner("Creating your account..."):
            res = register(email.strip(), password, name.strip())
        if res.get("error"):
            st.error(f"Registration failed: {res['error']}")
        else:
            sign_in(res)
            st.success(res.get("message", "Registered ✅"))
            # 3) next step: set up the body profile so the goal can be estimated
            st.info("Fill in your profile to get a personalised calorie goal.")
            st.page_link("pages/5_Profile.py", label="➡ Go to profile")

st.divider()
st.page_link("pages/1_Login.py", label="Already have an account? ➜ Login")
