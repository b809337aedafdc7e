import streamlit as st

from state import is_admin, sign_out

_MOBILE_CSS = """
<style>
.block-container{
  max-width: 720px !important;
  padding-bottom: 88px !important; /* room for the tab bar */
}
:root{
  --txt:#1f2937; --muted:#6b7280; --border:#e5e7eb; --panel:#f9fafb;
  --brand:#065f46; --brand2:#047857; --danger:#b91c1c;
}
.appbar{
  position: sticky; top:0; z-index:50;
  background: var(--brand); color:#ecfdf5;
  padding: 10px 14px; margin: -10px -10px 8px -10px; font-weight:800; font-size:18px; text-align:center;
}
.card{ background: var(--panel); border:1px solid var(--border); border-radius:14px; padding:12px 14px; margin:8px 0 10px; }
.caption {font-size: 12px; color: var(--muted); margin: 0;}
.value-lg {font-size: 22px; font-weight: 800; margin: 2px 0 6px;}
.veg-dot{ display:inline-block; width:10px; height:10px; border-radius:2px; margin-right:6px; }
.veg{ background:#16a34a; } .nonveg{ background:#dc2626; }
.warn{ background:#fee2e2; border:1px solid #fca5a5; color:var(--danger);
  border-radius:12px; padding:10px 14px; font-weight:700; margin:8px 0; }
#MainMenu, footer {visibility:hidden;}
[data-testid="stMetricValue"]{font-size:18px}
</style>
"""

_TABS = [
    ("📊 Dashboard", "pages/3_Dashboard.py", "dashboard"),
    ("🍽️ Menu", "pages/2_Menu.py", "menu"),
    ("📈 History", "pages/4_History.py", "history"),
    ("👤 Profile", "pages/5_Profile.py", "profile"),
]


def app_shell(title: str, active: str = "home", show_tabs: bool = True):
    """
    active: 'dashboard' | 'menu' | 'history' | 'profile' | 'admin' | 'auth'
    Call st.set_page_config(...) at the top of each page before this.
    """
    st.markdown(_MOBILE_CSS, unsafe_allow_html=True)
    st.markdown(f"<div class='appbar'>{title}</div>", unsafe_allow_html=True)

    if not show_tabs or not st.session_state.get("access_token"):
        return

    tabs = list(_TABS)
    if is_admin():
        tabs.append(("🛠️ Admin", "pages/6_Admin.py", "admin"))
    cols = st.columns(len(tabs) + 1)
    for col, (label, page, key) in zip(cols, tabs):
        with col:
            st.page_link(page, label=f"**{label}**" if key == active else label, use_container_width=True)
    with cols[-1]:
        if st.button("Logout", use_container_width=True):
            sign_out()
            st.switch_page("Home.py")


def guard_login():
    if not st.session_state.get("access_token"):
        st.warning("Please log in first.")
        st.page_link("pages/1_Login.py", label="🔐 Go to login", use_container_width=True)
        st.stop()


def guard_admin():
    guard_login()
    if not is_admin():
        st.error("Admin access required.")
        st.stop()


def show_error(res, prefix: str = "Request failed") -> bool:
    """Render an API error; True when ``res`` was one."""
    if isinstance(res, dict) and res.get("error"):
        if res.get("status") == 401:
            sign_out()
            st.warning("Your session has expired. Please log in again.")
            st.page_link("pages/1_Login.py", label="🔐 Go to login")
            st.stop()
        st.error(f"{prefix}: {res['error']}")
        return True
    return False


def veg_badge(is_veg: bool) -> str:
    cls = "veg" if is_veg else "nonveg"
    return f"<span class='veg-dot {cls}'></span>"


def food_card(food: dict):
    with st.container(border=True):
        st.markdown(
            f"{veg_badge(food.get('isVeg', True))}**{food['name']}** · {food['calories']} kcal",
            unsafe_allow_html=True,
        )
        c1, c2, c3 = st.columns(3)
        c1.metric("Protein (g)", f"{float(food['protein']):.1f}")
        c2.metric("Carbs (g)", f"{float(food['carbs']):.1f}")
        c3.metric("Fats (g)", f"{float(food['fats']):.1f}")
