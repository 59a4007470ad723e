import streamlit as st

from ..session import EditorSession
from ..store import open_default_store


def get_store():
    if "store" not in st.session_state:
        st.session_state.store = open_default_store()
    return st.session_state.store


def get_session() -> EditorSession:
    """The EditorSession kept across reruns for this browser session."""
    if "editor_session" not in st.session_state:
        st.session_state.editor_session = EditorSession(get_store())
    return st.session_state.editor_session
