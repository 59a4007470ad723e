import streamlit as st
from src.storeeditor.config import APP_TITLE, PAGE_ICON
from src.storeeditor.ui.layout import render_sidebar
from custom_pages import home, editor, raw_value, transfer

st.set_page_config(page_title=APP_TITLE, page_icon=PAGE_ICON, layout="wide")

render_sidebar()

page = st.session_state.get("page", "home")

if page == "home":
    home.render()
elif page == "editor":
    editor.render()
elif page == "raw":
    raw_value.render()
elif page == "transfer":
    transfer.render()
else:
    st.error("Unknown page")
