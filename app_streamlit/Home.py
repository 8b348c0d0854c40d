# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de utilidades.
# --------------------------------------------------------------

import streamlit as st

from cryptoutil import __version__
from cryptoutil.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="cryptoutil", page_icon="🔐", layout="centered")

# Presenta el nombre de la librería y su propósito general.
st.title("🔐 cryptoutil")
st.caption(f"Versión {__version__}")
st.write(
    "Banco de pruebas para resúmenes SHA-256/512 con salt, cifrado AES-CBC "
    "con passphrase y cifrado RSA PKCS#1 v1.5."
)
st.info("Elige una de las páginas laterales: **Resumen SHA**, **Cifrado AES** o **Claves RSA**.")
