# --------------------------------------------------------------
# File: 3_Claves_RSA.py
# Description: Genera pares RSA y cifra/descifra mensajes PKCS#1 v1.5 en Streamlit.
# --------------------------------------------------------------

import base64
import binascii

import streamlit as st

from cryptoutil import LibError, RsaBitSize, rsa_decrypt, rsa_encrypt, rsa_encrypt_with_fresh_key
from cryptoutil.config import DEFAULT_RSA_BIT_SIZE

# Presenta el título de la sección de cifrado asimétrico.
st.title("🗝️ Claves RSA")

sizes = list(RsaBitSize)
bit_size = st.selectbox(
    "Tamaño de módulo",
    sizes,
    index=sizes.index(RsaBitSize(DEFAULT_RSA_BIT_SIZE)),
    format_func=lambda size: f"{int(size)} bits",
)
if bit_size >= RsaBitSize.BITS_4096:
    st.caption("La generación de claves grandes puede tardar varios segundos.")

plaintext = st.text_input("Mensaje", help="Debe ser más corto que el módulo menos 11 bytes.")

# Genera un par nuevo y cifra el mensaje en un solo paso.
if st.button("Generar par y cifrar"):
    try:
        with st.spinner("Generando clave RSA..."):
            bundle = rsa_encrypt_with_fresh_key(plaintext, bit_size)
    except LibError as exc:
        st.error(f"{exc.kind_name()}: {exc.message()}")
    else:
        st.session_state["rsa_bundle"] = bundle
        st.success(f"{bundle.transformation} | cifrado={len(bundle.ciphertext)} bytes")

bundle = st.session_state.get("rsa_bundle")
if bundle is not None:
    st.markdown("### Clave pública")
    st.code(bundle.public_key_pem.decode("ascii"))
    with st.expander("Clave privada (PKCS#8)"):
        st.code(bundle.private_key_pem.decode("ascii"))
    st.write("**Módulo (hex):**", bundle.public_modulus.hex())
    st.write("**Exponente público:**", int.from_bytes(bundle.public_exponent, "big"))

    ct_b64 = st.text_area(
        "Ciphertext (base64)", value=base64.b64encode(bundle.ciphertext or b"").decode("ascii")
    )
    col_enc, col_dec = st.columns(2)

    # Vuelve a cifrar el mensaje con la clave pública ya generada.
    if col_enc.button("Cifrar de nuevo"):
        try:
            ct = rsa_encrypt(plaintext, bundle.public_key_pem)
        except LibError as exc:
            st.error(f"{exc.kind_name()}: {exc.message()}")
        else:
            st.code(base64.b64encode(ct).decode("ascii"))

    # Descifra el texto indicado con la clave privada del par.
    if col_dec.button("Descifrar"):
        try:
            recovered = rsa_decrypt(base64.b64decode(ct_b64, validate=True), bundle.private_key_pem)
        except binascii.Error:
            st.error("El ciphertext no es base64 válido.")
        except LibError as exc:
            st.error(f"{exc.kind_name()}: {exc.message()}")
        else:
            st.success("Mensaje descifrado.")
            st.code(recovered.decode("utf-8", errors="replace"))
