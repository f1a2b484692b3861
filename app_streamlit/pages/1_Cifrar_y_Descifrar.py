# --------------------------------------------------------------
# File: 1_Cifrar_y_Descifrar.py
# Description: Vistas de cifrado y descifrado de texto bajo passphrase.
# --------------------------------------------------------------

import streamlit as st

from api import services

# Presenta el título general de la página.
st.title("🔒 Cifrar y descifrar")

# Separa la pantalla en pestañas para cada sentido de la operación.
tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

with tab_enc:
    plaintext = st.text_area("Texto en claro", key="enc_text")
    secret = st.text_input("Passphrase", type="password", key="enc_pass")

    if st.button("Cifrar", disabled=not secret, key="btn_encrypt"):
        ok, msg, package = services.encrypt_text(plaintext, secret)
        if ok:
            st.success(msg)
            st.code(package)
        else:
            st.error(msg)

with tab_dec:
    package_in = st.text_area("Paquete Base64", key="dec_package")
    secret_d = st.text_input("Passphrase", type="password", key="dec_pass")

    if st.button("Descifrar", disabled=not package_in, key="btn_decrypt"):
        ok, msg, recovered = services.decrypt_text(package_in, secret_d)
        if ok:
            st.success(msg)
            st.code(recovered)
        else:
            # SECURITY: un IntegrityError implica no confiar en los datos.
            st.error(msg)
