# --------------------------------------------------------------
# File: Home.py
# Description: Página principal con la presentación y el formulario de access key.
# --------------------------------------------------------------

import streamlit as st

from app_streamlit.shell import VAULT_PAGE, page, render_footer, reset_vault, run

ctx = page("/", "Home")

left, right = st.columns([3, 2], gap="large")

# Presenta el nombre del producto y su propósito general.
with left:
    st.title("🔐 VaultDrop")
    st.subheader("Your files, your key.")
    st.write(
        "Secure file storage with key-based access. No account needed, no data shared. "
        "Your files, your control."
    )
    st.markdown("✅ No Registration &nbsp;&nbsp; ✅ Simple & Secure")

# Formulario de acceso: una key nueva crea el vault, una existente lo abre.
with right:
    with st.container(border=True):
        st.markdown("#### Access your files or create a new vault")
        with st.form("access_key_form"):
            key = st.text_input("Access key", type="password", placeholder="Enter your access key")
            submitted = st.form_submit_button("Access Vault", use_container_width=True)

        if submitted:
            with st.spinner("Checking key..."):
                outcome = run(ctx["gate"].unlock(key))
            if outcome.success:
                reset_vault(ctx)
                st.switch_page(VAULT_PAGE)
            else:
                st.error(outcome.message)

        st.caption(
            "Keep your key safe: it is the only way to open your vault and it cannot be recovered."
        )

render_footer()
