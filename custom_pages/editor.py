def render():
    import streamlit as st

    from src.storeeditor.codec import display_value, input_value, record_fields
    from src.storeeditor.errors import StoreEditorError
    from src.storeeditor.ui.layout import render_header, report
    from src.storeeditor.ui.state import get_session

    render_header()
    st.header("Edit records")

    session = get_session()

    # ----------------------------
    # Messages carried over a rerun
    # ----------------------------
    flash = st.session_state.pop("flash", None)
    if flash is not None:
        report(flash)

    if "confirm_delete" not in st.session_state:
        st.session_state.confirm_delete = None
    if "edit_nonce" not in st.session_state:
        st.session_state.edit_nonce = 0

    def _done(outcome):
        st.session_state.flash = outcome
        st.session_state.confirm_delete = None
        st.rerun()

    pending = st.session_state.pop("pending_key", None)
    if pending is not None:
        report(session.select(pending))

    # ----------------------------
    # 1. Select key
    # ----------------------------
    st.subheader("1. Select storage key")
    keys = session.list_keys()
    options = [""] + keys
    current = session.selected_key or ""
    if current and current not in options:
        options.append(current)

    choice = st.selectbox(
        "Storage key",
        options=options,
        index=options.index(current),
        format_func=lambda k: k or "-- Choose a key --",
    )
    if choice != current:
        outcome = session.select(choice or None)
        st.session_state.confirm_delete = None
        report(outcome)

    if st.button("Reload from store", disabled=not session.selected_key):
        report(session.reload())

    key = session.selected_key
    if not key:
        return

    if session.decode_failed:
        st.error(f"The value stored under \"{key}\" is not valid JSON. Fix it on the Raw value page.")
        return

    records = session.records
    if not records:
        st.info("No data found for this key.")
        if st.button("Add first record", key="add_first"):
            session.add_record()
            st.session_state.edit_nonce += 1
            st.rerun()
        return

    # ----------------------------
    # 2. Records
    # ----------------------------
    st.subheader(f'2. Edit data from "{key}"')
    st.caption(f"Stored as: {session.shape.value} · {len(records)} record(s)")

    for index, item in enumerate(records):
        with st.container(border=True):
            if session.is_editing(index):
                st.markdown(f"**Editing item {index + 1}**")
                draft = session.draft
                typed = {}
                cols = st.columns(2)
                for n, field in enumerate(list(draft.keys())):
                    with cols[n % 2]:
                        typed[field] = st.text_input(
                            field or "(value)",
                            value=input_value(draft[field]),
                            key=f"field_{st.session_state.edit_nonce}_{index}_{field}",
                            placeholder=f"Enter {field or 'value'}",
                        )

                c1, c2, _ = st.columns([1, 1, 4])
                with c1:
                    if st.button("Save changes", key=f"save_{index}", type="primary"):
                        for field, text in typed.items():
                            if text != input_value(draft[field]):
                                session.change_field(field, text)
                        _done(session.save())
                with c2:
                    if st.button("Cancel", key=f"cancel_{index}"):
                        session.cancel_edit()
                        st.rerun()
                continue

            st.markdown(f"**Item {index + 1}**")
            fields = record_fields(item)
            cols = st.columns(3)
            for n, (field, value) in enumerate(fields.items()):
                with cols[n % 3]:
                    st.caption(f"{field or '(value)'}:")
                    st.text(display_value(value))

            if st.session_state.confirm_delete == index:
                st.warning("Are you sure you want to delete this item?")
                c1, c2, _ = st.columns([1, 1, 4])
                with c1:
                    if st.button("Yes, delete", key=f"confirm_{index}", type="primary"):
                        try:
                            _done(session.delete(index))
                        except StoreEditorError as e:
                            st.error(str(e))
                with c2:
                    if st.button("Keep", key=f"keep_{index}"):
                        st.session_state.confirm_delete = None
                        st.rerun()
                continue

            c1, c2, _ = st.columns([1, 1, 4])
            with c1:
                if st.button("Edit", key=f"edit_{index}"):
                    session.begin_edit(index)
                    st.session_state.edit_nonce += 1
                    st.session_state.confirm_delete = None
                    st.rerun()
            with c2:
                if st.button("Delete", key=f"delete_{index}"):
                    st.session_state.confirm_delete = index
                    st.rerun()

    st.divider()
    if st.button("Add record", key="add_record"):
        outcome = session.add_record()
        st.session_state.edit_nonce += 1
        _done(outcome)
