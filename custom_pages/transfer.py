def render():
    import json
    from datetime import datetime

    import streamlit as st

    from src.storeeditor.codec import parse_json
    from src.storeeditor.config import JSON_INDENT
    from src.storeeditor.transfer import dump_store, load_dump
    from src.storeeditor.ui.layout import render_header
    from src.storeeditor.ui.state import get_session, get_store

    render_header()
    st.header("Backup / restore")

    store = get_store()

    st.subheader("Download")
    data = dump_store(store)
    st.caption(f"{len(data)} key(s) in the store.")
    payload = json.dumps(data, ensure_ascii=False, indent=JSON_INDENT).encode("utf-8")
    st.download_button(
        "Download all keys (JSON)",
        data=payload,
        file_name=f"store-{datetime.now().strftime('%Y%m%d-%H%M%S')}.json",
        mime="application/json",
        disabled=not data,
    )

    st.divider()
    st.subheader("Restore")
    uploaded = st.file_uploader("Upload a backup file", type=["json"])
    replace = st.checkbox("Remove keys that are not in the backup", value=False)

    if uploaded and st.button("Load backup"):
        try:
            incoming = parse_json(uploaded.getvalue().decode("utf-8", errors="replace"))
            n = load_dump(store, incoming, replace=replace)
        except ValueError as e:
            st.error(f"Failed to load backup: {e}")
        else:
            get_session().reload()
            st.success(f"Restored {n} key(s).")
