# --------------------------------------------------------------
# File: 3_About.py
# Description: Página informativa sobre la misión y las ventajas de VaultDrop.
# --------------------------------------------------------------

import streamlit as st

from app_streamlit.shell import page, render_footer

page("/about", "About", icon="ℹ️")

st.title("ℹ️ About VaultDrop")
st.caption("Secure, simple file storage with no registration required")

st.subheader("Our Mission")
st.write(
    "At VaultDrop, we believe that secure file storage should be accessible to everyone without the "
    "hassle of creating accounts or remembering complex passwords. Our mission is to provide a simple "
    "yet powerful solution for storing and accessing your important files using just a single access key."
)

st.subheader("Key Features")
features = [
    ("🔑 Key-Based Access", "No usernames or passwords to remember. Just enter your unique access key to retrieve your files."),
    ("🗂️ Multiple File Types", "Upload images, videos, PDFs, and text notes all in one secure location."),
    ("🛡️ Secure Storage", "Your files are stored securely and are only accessible with your unique key."),
    ("🌍 Access Anywhere", "Access your files from any device with an internet connection and your access key."),
]
for row in (features[:2], features[2:]):
    for col, (title, description) in zip(st.columns(2), row):
        with col.container(border=True):
            st.markdown(f"**{title}**")
            st.write(description)

st.subheader("Why Choose Us")
for title, description in [
    ("No Registration Required", "Access your files instantly without creating an account."),
    ("Simple Interface", "Our intuitive design makes file management easy for everyone."),
    ("Privacy Focused", "We prioritize your privacy and the security of your files."),
    ("Free to Use", "VaultDrop is completely free for personal use."),
]:
    st.markdown(f"- **{title}**: {description}")

render_footer()
