# --------------------------------------------------------------
# File: 1_Resumen_SHA.py
# Description: Calcula resúmenes SHA-256/SHA-512 con salt opcional en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptoutil import DigestAlgorithm, LibError, digest_hex

# Presenta el título de la sección de resúmenes.
st.title("#️⃣ Resumen SHA")

algorithm = st.radio(
    "Algoritmo", list(DigestAlgorithm), format_func=lambda alg: alg.value, horizontal=True
)
target = st.text_area("Texto a resumir")
salt = st.text_input("Salt (opcional)", help="Se concatena al final del texto antes de resumir.")
uppercase = st.checkbox("Hexadecimal en mayúsculas")

if st.button("Calcular resumen"):
    try:
        result = digest_hex(algorithm, target, salt or None, uppercase=uppercase)
    except LibError as exc:
        st.error(f"{exc.kind_name()}: {exc.message()}")
    else:
        st.success(f"{algorithm.value} ({algorithm.digest_size * 8} bits)")
        st.code(result)
