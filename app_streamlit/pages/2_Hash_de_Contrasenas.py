# --------------------------------------------------------------
# File: 2_Hash_de_Contrasenas.py
# Description: Vistas para generar y verificar hashes de contraseñas.
# --------------------------------------------------------------

import streamlit as st

from api import services

st.title("🧂 Hash de contraseñas")

tab_hash, tab_verify = st.tabs(["Generar hash", "Verificar"])

with tab_hash:
    password = st.text_input("Contraseña", type="password", key="hash_pass")

    if st.button("Generar hash", disabled=not password, key="btn_hash"):
        ok, msg, stored = services.hash_secret(password)
        if ok:
            st.success(msg)
            st.code(stored)
        else:
            st.error(msg)

with tab_verify:
    candidate = st.text_input("Contraseña", type="password", key="verify_pass")
    stored_in = st.text_input("Hash almacenado (Base64)", key="verify_stored")

    if st.button("Verificar", key="btn_verify"):
        _, msg, match = services.verify_secret(candidate, stored_in)
        if match:
            st.success(msg)
        else:
            st.warning(msg)
