# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de servicios.
# --------------------------------------------------------------

import streamlit as st

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="CryptoManager", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y sus dos servicios.
st.title("🔐 CryptoManager")
st.write(
    "Cifrado de texto con AES-256-CBC + HMAC-SHA256 bajo passphrase y "
    "hash de contraseñas con PBKDF2-SHA256."
)
st.markdown(
    "- **Cifrar y descifrar**: paquete `SALT(16) | IV(16) | CIPHER | HMAC(32)` en Base64.\n"
    "- **Hash de contraseñas**: paquete `SALT(16) | HASH(32)` en Base64."
)
st.info("Las passphrases no se guardan: cada operación deriva una clave nueva.")
