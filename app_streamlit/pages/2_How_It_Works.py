# --------------------------------------------------------------
# File: 2_How_It_Works.py
# Description: Explica en tres pasos cómo se usa VaultDrop.
# --------------------------------------------------------------

import streamlit as st

from app_streamlit.shell import page, render_footer

page("/how-it-works", "How It Works", icon="❓")

st.title("❓ How It Works")
st.caption("Simple, secure, and straightforward file storage")

# Paso 1: elegir o introducir la key.
with st.container(border=True):
    st.subheader("1. Enter your access key")
    st.write(
        "On the home page, enter any key of your choice to create a new vault. This key will be your "
        "unique identifier to access your files in the future. If you've already created a vault, "
        "simply enter your existing key to access your files."
    )
    st.warning(
        "Remember your key! There is no account and no password reset, so a lost key cannot be "
        "recovered. If you forget it, you won't be able to access your files."
    )

# Paso 2: subir contenido.
with st.container(border=True):
    st.subheader("2. Upload files and notes")
    st.write(
        "Once you've entered your key, you'll be taken to your vault. Here, you can upload images, "
        "videos, PDFs, or create text notes. Simply select the files you want to store. For text "
        "notes, use the text editor to write and save your content."
    )
    cols = st.columns(4)
    for col, (icon, label) in zip(cols, [("🖼️", "Images"), ("🎬", "Videos"), ("📄", "PDFs"), ("📝", "Text Notes")]):
        col.metric(label, icon)

# Paso 3: volver cuando se necesite.
with st.container(border=True):
    st.subheader("3. Access from anywhere")
    st.write(
        "Come back any time with the same key to see, download or delete what you stored. "
        "Log out when you are done so nobody else can open your vault from this browser."
    )

render_footer()
