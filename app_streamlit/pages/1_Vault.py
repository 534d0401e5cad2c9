# --------------------------------------------------------------
# File: 1_Vault.py
# Description: Vista del vault: subida, listado y borrado de archivos y notas.
# --------------------------------------------------------------

import streamlit as st

from app_streamlit.shell import page, render_footer, run
from core.formatting import file_type_icon, file_type_label, format_created_at, selection_summary
from core.models import NOTE_TYPE, UploadBlob

ctx = page("/vault", "Vault")
vault = ctx["vault"]

# El vault se recarga cada vez que se llega desde otra página; los reruns no recargan.
if ctx["entered"] or not vault.loaded:
    with st.spinner("Loading your vault..."):
        run(vault.refresh())

st.title("🗄️ Your Secure Vault")
st.caption("Your files and notes are securely stored and accessible only with your access key.")

if vault.error:
    st.error(vault.error)
if st.session_state.pop("vault_saved", False):
    st.success("Successfully saved to your vault!")

# El sufijo de las claves de los widgets cambia tras guardar para vaciar el formulario.
nonce = st.session_state.setdefault("upload_nonce", 0)

col_form, col_items = st.columns([1, 2], gap="large")

with col_form:
    with st.container(border=True):
        st.subheader("Add to Your Vault")
        uploads = st.file_uploader(
            "Upload Files",
            accept_multiple_files=True,
            help="Images, videos, PDFs up to 10MB",
            key=f"uploads_{nonce}",
        )
        if uploads:
            st.caption(selection_summary(uploads))
            for uploaded in uploads:
                st.caption(f"• {uploaded.name}")
        note = st.text_area(
            "Add Text Note", height=120, placeholder="Type your secure note here...", key=f"note_{nonce}"
        )

        if st.button("Save to Vault", type="primary", use_container_width=True):
            blobs = [UploadBlob.from_uploaded(uploaded) for uploaded in uploads or []]
            with st.spinner("Saving..."):
                outcome = run(vault.save(blobs, note))
            if outcome.success:
                st.session_state["upload_nonce"] = nonce + 1
                st.session_state["vault_saved"] = True
            st.rerun()

    if not vault.is_empty:
        with st.popover("Clear All Files & Notes", use_container_width=True):
            st.warning("Are you sure you want to delete all files and notes? This cannot be undone.")
            if st.button("Yes, delete everything", key="btn_clear_all", type="primary"):
                run(vault.remove_all())
                st.rerun()

with col_items:
    if vault.is_empty:
        st.info(f"Your vault is empty. {vault.empty_state_message()}")
    else:
        st.subheader("Your Stored Files & Notes")

        for item in vault.files:
            with st.container(border=True):
                head, action = st.columns([6, 1])
                with head:
                    st.markdown(f"{file_type_icon(item.file_type)} **{item.original_filename}**")
                    st.caption(f"{format_created_at(item.created_at)} · {file_type_label(item.file_type)}")
                with action:
                    with st.popover("🗑️"):
                        st.write("Are you sure you want to delete this file?")
                        if st.button("Delete", key=f"del_file_{item.id}"):
                            run(vault.remove_one(item.id, item.server_type or item.file_type))
                            st.rerun()
                if item.file_type == "image":
                    st.image(item.file_path, caption=item.original_filename)
                elif item.file_type == "video":
                    st.video(item.file_path)
                st.link_button("View/Download", item.file_path)

        for note_item in vault.notes:
            with st.container(border=True):
                head, action = st.columns([6, 1])
                with head:
                    st.markdown(f"{file_type_icon(NOTE_TYPE)} **Text Note**")
                    st.caption(format_created_at(note_item.created_at))
                with action:
                    with st.popover("🗑️"):
                        st.write("Are you sure you want to delete this note?")
                        if st.button("Delete", key=f"del_note_{note_item.id}"):
                            run(vault.remove_one(note_item.id, NOTE_TYPE))
                            st.rerun()
                st.text(note_item.content)

render_footer()
