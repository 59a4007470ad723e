def render():
    import pandas as pd
    import streamlit as st

    from src.storeeditor.config import DB_PATH
    from src.storeeditor.ui.layout import render_header
    from src.storeeditor.ui.state import get_store
    from src.storeeditor.ui.table import key_summary

    render_header()

    st.header("Stored keys")
    st.markdown(
        """
    Use the pages in the sidebar:
    - **Edit records**: pick a key and edit, add or delete its records field by field.
    - **Raw value**: view or replace the JSON stored under a key, or create a new key.
    - **Backup / restore**: download every key as one JSON file, or load one back.
    """
    )
    st.caption(f"Database: {DB_PATH}")

    rows = key_summary(get_store())
    if not rows:
        st.info("The store is empty. Create a key on the Raw value page.")
        return

    df = pd.DataFrame(rows)
    st.dataframe(df[["key", "shape", "records", "size_bytes", "updated_at"]], use_container_width=True, hide_index=True)

    keys = [r["key"] for r in rows]
    sel = st.selectbox("Open key in editor", options=keys)
    if st.button("Edit records", key="home_open"):
        st.session_state.pending_key = sel
        st.session_state.page = "editor"
        st.rerun()
