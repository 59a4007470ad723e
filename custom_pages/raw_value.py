def render():
    import json

    import streamlit as st
    from streamlit_ace import st_ace

    from src.storeeditor.codec import decode, parse_json
    from src.storeeditor.config import JSON_INDENT
    from src.storeeditor.errors import DecodeError
    from src.storeeditor.ui.layout import render_header
    from src.storeeditor.ui.state import get_session, get_store

    render_header()
    st.header("Raw value")

    store = get_store()
    session = get_session()

    keys = store.list_keys()
    new_key_label = "(new key)"
    key_choice = st.selectbox("Key", options=[new_key_label] + keys)

    if key_choice == new_key_label:
        key = st.text_input("New key name", value="").strip()
        raw = "{}"
    else:
        key = key_choice
        raw = store.get(key) or ""

    # Pretty-print valid JSON for editing, keep anything else verbatim
    try:
        shown = json.dumps(parse_json(raw), ensure_ascii=False, indent=JSON_INDENT)
    except DecodeError:
        shown = raw
        if key_choice != new_key_label:
            st.warning("The stored value is not valid JSON. Fix it below and save.")

    text = st_ace(
        value=shown,
        language="json",
        theme="chrome",
        height=320,
        key=f"raw_editor_{key_choice}",
    )

    try:
        rs = decode(text, key=key or None)
        st.success(f"Valid JSON: {rs.shape.value}, {len(rs)} record(s).")
        valid = True
    except DecodeError as e:
        st.warning(str(e))
        valid = False

    col1, col2 = st.columns([1, 1])
    with col1:
        if st.button("Save value", disabled=not (valid and key)):
            compact = json.dumps(parse_json(text), ensure_ascii=False, separators=(",", ":"))
            store.set(key, compact)
            if session.selected_key == key:
                session.reload()
            st.success(f"Saved {key!r}.")
    with col2:
        if st.button("Remove key", disabled=key_choice == new_key_label):
            store.remove(key)
            if session.selected_key == key:
                session.select(None)
            st.success(f"Removed {key!r}.")
            st.rerun()
