import datetime as dt

import streamlit as st

from state import init_state
from ui import app_shell, food_card, show_error
from api import add_favorite, add_intake, get_favorites, get_menu, remove_favorite

st.set_page_config(page_title="Menu", page_icon="🍽️", layout="centered")
init_state()
app_shell("🍽️ Canteen Menu", active="menu", show_tabs=True)

token = st.session_state.get("access_token")

SORT_OPTIONS = {
    "Name (A-Z)": "name",
    "Calories (low → high)": "calories_asc",
    "Calories (high → low)": "calories_desc",
    "Protein (high → low)": "protein_desc",
}
DIET_OPTIONS = {"All": None, "Veg only": True, "Non-veg only": False}

# ── filters ─────────────────────────────────
with st.expander("🔎 Search & filter", expanded=True):
    search = st.text_input("Search", placeholder="e.g. dosa")
    c1, c2 = st.columns(2)
    with c1:
        diet = st.selectbox("Diet", list(DIET_OPTIONS))
        high_protein = st.checkbox("High protein (≥ 15 g)")
    with c2:
        sort_label = st.selectbox("Sort by", list(SORT_OPTIONS))
        use_range = st.checkbox("Limit calories")
    min_cal = max_cal = None
    if use_range:
        min_cal, max_cal = st.slider("Calories", 0, 1000, (0, 500), step=10)

menu = get_menu(
    search=search or None,
    is_veg=DIET_OPTIONS[diet],
    min_calories=min_cal,
    max_calories=max_cal,
    high_protein=high_protein,
    sort_by=SORT_OPTIONS[sort_label],
)
if show_error(menu, "Could not load the menu"):
    st.stop()

favorite_ids = set()
if token:
    favs = get_favorites(token)
    if not show_error(favs, "Could not load favorites"):
        favorite_ids = {f["id"] for f in favs}

st.caption(f"{len(menu)} item(s)")
if not menu:
    st.info("Nothing matches these filters.")

for food in menu:
    food_card(food)
    if not token:
        continue
    a, b, c = st.columns([1.2, 1.6, 1.2])
    with a:
        qty = st.number_input("Qty", min_value=1, max_value=20, value=1, step=1, key=f"qty-{food['id']}")
    with b:
        day = st.date_input("Date", value=dt.date.today(), max_value=dt.date.today(), key=f"day-{food['id']}")
    with c:
        st.write("")
        if st.button("➕ Log", key=f"log-{food['id']}", use_container_width=True):
            res = add_intake(token, food["id"], int(qty), day.isoformat())
            if not show_error(res, "Could not log intake"):
                st.toast(f"Logged {qty} × {food['name']}")
        is_fav = food["id"] in favorite_ids
        if st.button("★ Unfavorite" if is_fav else "☆ Favorite", key=f"fav-{food['id']}", use_container_width=True):
            res = remove_favorite(token, food["id"]) if is_fav else add_favorite(token, food["id"])
            if not show_error(res, "Could not update favorites"):
                st.rerun()

if not token:
    st.info("Log in to record what you eat and keep favorites.")
    st.page_link("pages/1_Login.py", label="🔐 Login")
