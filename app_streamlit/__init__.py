# --------------------------------------------------------------
# File: __init__.py
# Description: Paquete de la interfaz Streamlit de VaultDrop.
# --------------------------------------------------------------
"""Inicializa el paquete `app_streamlit`."""
