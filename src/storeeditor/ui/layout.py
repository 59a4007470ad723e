import streamlit as st
from ..config import APP_TITLE, LOGO_PATH

PAGES = [
    ("home", "Keys", ":material/key:"),
    ("editor", "Edit records", ":material/edit_note:"),
    ("raw", "Raw value", ":material/data_object:"),
    ("transfer", "Backup / restore", ":material/sync_alt:"),
]


def render_sidebar():
    """Render the global sidebar with logo + navigation."""
    if LOGO_PATH.exists():
        st.sidebar.image(str(LOGO_PATH), width=120)

    if "page" not in st.session_state:
        st.session_state.page = "home"

    sb = st.sidebar
    sb.markdown("### Navigation")

    for page, label, icon in PAGES:
        if sb.button(label, icon=icon, key=f"nav_{page}"):
            st.session_state.page = page


def render_header():
    if LOGO_PATH.exists():
        col1, col2 = st.columns([0.9, 8])
        with col1:
            st.image(str(LOGO_PATH), width=96)
        with col2:
            st.markdown(f"# {APP_TITLE}")
    else:
        st.title(APP_TITLE)


def report(outcome):
    """Show an Outcome returned by an editor action."""
    if not outcome.message:
        return
    if outcome.ok:
        st.success(outcome.message)
    else:
        st.error(outcome.message)
