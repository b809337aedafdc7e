import streamlit as st
import pandas as pd

from state import init_state
from ui import app_shell, guard_admin, show_error
from api import create_food, delete_food, get_all_foods_admin, update_food

st.set_page_config(page_title="Admin", page_icon="🛠️", layout="centered")
init_state()
app_shell("🛠️ Catalog Admin", active="admin", show_tabs=True)
guard_admin()

token = st.session_state["access_token"]

# ── add item ────────────────────────────────
with st.expander("➕ Add food item", expanded=False):
    with st.form("add-food", clear_on_submit=True):
        name = st.text_input("Name")
        c1, c2 = st.columns(2)
        with c1:
            calories = st.number_input("Calories", min_value=0, value=200, step=10)
            protein = st.number_input("Protein (g)", min_value=0.0, value=5.0, step=0.5)
        with c2:
            carbs = st.number_input("Carbs (g)", min_value=0.0, value=20.0, step=0.5)
            fats = st.number_input("Fats (g)", min_value=0.0, value=5.0, step=0.5)
        is_veg = st.checkbox("Vegetarian", value=True)
        if st.form_submit_button("Add", use_container_width=True, type="primary"):
            if not name.strip():
                st.warning("Name is required.")
            else:
                res = create_food(token, {
                    "name": name.strip(), "calories": int(calories), "protein": protein,
                    "carbs": carbs, "fats": fats, "isVeg": is_veg,
                })
                if not show_error(res, "Could not add item"):
                    st.success(res["message"])

# ── catalog table ───────────────────────────
foods = get_all_foods_admin(token)
if show_error(foods, "Could not load catalog"):
    st.stop()

st.caption(f"{len(foods)} item(s), including unavailable ones")
if not foods:
    st.stop()

COLUMNS = ["id", "name", "calories", "protein", "carbs", "fats", "isVeg", "isAvailable"]
original = pd.DataFrame(foods)[COLUMNS].set_index("id")
edited = st.data_editor(
    original,
    disabled=["id"],
    use_container_width=True,
    key="catalog-editor",
)

if st.button("💾 Save changes", type="primary"):
    changed = 0
    for food_id, row in edited.iterrows():
        before = original.loc[food_id]
        patch = {
            col: (row[col].item() if hasattr(row[col], "item") else row[col])
            for col in COLUMNS[1:]
            if row[col] != before[col]
        }
        if patch:
            if show_error(update_food(token, int(food_id), patch), f"Update of #{food_id} failed"):
                break
            changed += 1
    st.success(f"{changed} item(s) updated.")
    st.rerun()

st.divider()
to_delete = st.selectbox(
    "Delete item", [None] + list(original.index),
    format_func=lambda i: "-" if i is None else f"#{i} {original.loc[i, 'name']}",
)
st.caption("Deleting an item also removes it from every intake log and favorites list.")
if to_delete is not None and st.button("🗑️ Delete", type="secondary"):
    if not show_error(delete_food(token, int(to_delete)), "Delete failed"):
        st.success("Deleted.")
        st.rerun()
