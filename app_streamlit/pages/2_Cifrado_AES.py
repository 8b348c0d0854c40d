# --------------------------------------------------------------
# File: 2_Cifrado_AES.py
# Description: Cifra y descifra textos con AES-CBC y passphrase mediante Streamlit.
# --------------------------------------------------------------

import base64
import binascii
import os

import streamlit as st

from cryptoutil import CipherStrength, LibError, decrypt, encrypt
from cryptoutil.config import KDF_ITERATIONS


def b64u(data: bytes) -> str:
    """Convierte bytes a base64 url-safe sin relleno.

    Args:
        data (bytes): Bloque binario a codificar.

    Returns:
        str: Representación en base64 url-safe sin caracteres de relleno.
    """
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def unb64u(value: str) -> bytes:
    """Decodifica base64 url-safe tolerando la ausencia de relleno."""
    value = value.strip()
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


# Presenta el título de la sección de cifrado simétrico.
st.title("🔑 Cifrado AES-CBC")

strength = st.radio(
    "Fortaleza", list(CipherStrength), format_func=lambda s: s.value, horizontal=True
)
secret = st.text_input("Passphrase", type="password")
iterations = st.number_input("Iteraciones MD5 por bloque", min_value=1, value=KDF_ITERATIONS)

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

# Sección de cifrado con salt aleatoria de 8 bytes.
with tab_enc:
    plaintext = st.text_area("Texto en claro")
    if st.button("Cifrar", key="btn_encrypt"):
        salt = os.urandom(8)
        try:
            result = encrypt(strength, plaintext, secret, salt, int(iterations))
        except LibError as exc:
            st.error(f"{exc.kind_name()}: {exc.message()}")
        else:
            # Conserva el resultado para poder descifrarlo en la otra pestaña.
            st.session_state["aes_result"] = {
                "ct": b64u(result.ciphertext),
                "iv": b64u(result.iv),
                "salt": b64u(result.salt),
            }
            st.success(f"Texto cifrado ({result.transformation}).")
            st.json(st.session_state["aes_result"])

# Sección de descifrado a partir del triple (ciphertext, iv, salt).
with tab_dec:
    last = st.session_state.get("aes_result", {})
    ct_in = st.text_input("Ciphertext (base64url)", value=last.get("ct", ""))
    iv_in = st.text_input("IV (base64url)", value=last.get("iv", ""))
    salt_in = st.text_input("Salt (base64url)", value=last.get("salt", ""))
    if st.button("Descifrar", key="btn_decrypt"):
        try:
            recovered = decrypt(
                strength, unb64u(ct_in), secret, unb64u(iv_in), unb64u(salt_in), int(iterations)
            )
        except binascii.Error:
            st.error("Alguno de los campos no es base64 válido.")
        except LibError as exc:
            st.error(f"{exc.kind_name()}: {exc.message()}")
        else:
            st.success("Texto descifrado.")
            st.code(recovered.decode("utf-8", errors="replace"))
