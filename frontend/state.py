import streamlit as st


def init_state():
    defaults = {
        "access_token": None,
        "user": None,
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def sign_in(res: dict):
    st.session_state["access_token"] = res.get("token")
    st.session_state["user"] = res.get("user")


def sign_out():
    st.session_state["access_token"] = None
    st.session_state["user"] = None


def is_admin() -> bool:
    return bool((st.session_state.get("user") or {}).get("isAdmin"))
