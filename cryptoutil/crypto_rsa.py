# --------------------------------------------------------------
# File: crypto_rsa.py
# Description: Generación de pares RSA y cifrado/descifrado PKCS#1 v1.5.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación de claves RSA y cifrado asimétrico."""

import logging
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cryptoutil import config
from cryptoutil.errors import CryptoError
from cryptoutil.models import RsaBitSize, RsaKeypairBundle
from cryptoutil.validation import BytesLike, require_bytes, require_enum, require_present

logger = logging.getLogger(__name__)

# Excepciones de `cryptography` que se traducen a CryptoError.
_PRIMITIVE_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


def _int_to_bytes(value: int) -> bytes:
    """Codifica un entero sin signo en big-endian con la longitud mínima."""

    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def _bundle_from_key(
    private_key: rsa.RSAPrivateKey, bit_size: RsaBitSize, ciphertext: Optional[bytes] = None
) -> RsaKeypairBundle:
    """Exporta un par RSA a PEM y componentes numéricos."""

    public_key = private_key.public_key()
    try:
        priv_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        pub_pem = public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    except _PRIMITIVE_ERRORS as exc:
        raise CryptoError(f"No se ha podido exportar el par de claves a PEM: {exc}") from exc

    private_numbers = private_key.private_numbers()
    public_numbers = public_key.public_numbers()
    return RsaKeypairBundle(
        bit_size=bit_size,
        public_key_pem=pub_pem,
        private_key_pem=priv_pem,
        public_modulus=_int_to_bytes(public_numbers.n),
        public_exponent=_int_to_bytes(public_numbers.e),
        private_modulus=_int_to_bytes(private_numbers.public_numbers.n),
        private_exponent=_int_to_bytes(private_numbers.d),
        ciphertext=ciphertext,
    )


def _generate_private_key(bit_size: RsaBitSize) -> rsa.RSAPrivateKey:
    try:
        return rsa.generate_private_key(
            public_exponent=config.RSA_PUBLIC_EXPONENT, key_size=int(bit_size)
        )
    except _PRIMITIVE_ERRORS as exc:
        logger.debug("[RSA] fallo al generar la clave de %d bits: %s", bit_size, exc)
        raise CryptoError(f"No se ha podido generar la clave RSA: {exc}") from exc


def generate_keypair(bit_size: Union[RsaBitSize, int, None] = None) -> RsaKeypairBundle:
    """Genera un par de claves RSA nuevo.

    Args:
        bit_size (Union[RsaBitSize, int, None]): Tamaño del módulo; ``None``
            usa ``config.DEFAULT_RSA_BIT_SIZE``.

    Returns:
        RsaKeypairBundle: Claves en PEM y sus componentes numéricos.

    Raises:
        InvalidArgumentError: Si el tamaño no está soportado.
        CryptoError: Si la generación o la exportación fallan.

    """

    if bit_size is None:
        bit_size = config.DEFAULT_RSA_BIT_SIZE
    size = require_enum(bit_size, RsaBitSize, "bit_size")

    private_key = _generate_private_key(size)
    logger.debug("[RSA] par de %d bits generado", size)
    return _bundle_from_key(private_key, size)


def rsa_encrypt(target: Optional[BytesLike], public_key_pem: Optional[BytesLike]) -> bytes:
    """Cifra ``target`` con la clave pública PEM y relleno PKCS#1 v1.5.

    Args:
        target (Optional[BytesLike]): Mensaje en claro, menor que el módulo menos 11 bytes.
        public_key_pem (Optional[BytesLike]): Clave pública RSA en PEM.

    Returns:
        bytes: Texto cifrado con la misma longitud que el módulo en bytes.

    Raises:
        MissingArgumentError: Si falta el mensaje o la clave.
        InvalidArgumentError: Si el mensaje o la clave están vacíos.
        CryptoError: Si la clave no se puede leer, no es RSA o el cifrado falla.

    """

    require_present(target=target, public_key_pem=public_key_pem)
    plaintext = require_bytes(target, "target")
    pem = require_bytes(public_key_pem, "public_key_pem")

    try:
        public_key = serialization.load_pem_public_key(pem)
    except _PRIMITIVE_ERRORS as exc:
        logger.debug("[RSA] clave pública ilegible: %s", exc)
        raise CryptoError(f"No se ha podido leer la clave pública: {exc}") from exc
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise CryptoError("La clave pública indicada no es una clave RSA.")

    try:
        ciphertext = public_key.encrypt(plaintext, padding.PKCS1v15())
    except _PRIMITIVE_ERRORS as exc:
        logger.debug("[RSA] fallo al cifrar: %s", exc)
        raise CryptoError(f"No se ha podido cifrar con RSA: {exc}") from exc

    logger.debug("[RSA] cifrado %d bits claro=%d", public_key.key_size, len(plaintext))
    return ciphertext


def rsa_decrypt(target: Optional[BytesLike], private_key_pem: Optional[BytesLike]) -> bytes:
    """Descifra ``target`` con la clave privada PEM y retira el relleno PKCS#1 v1.5.

    Args:
        target (Optional[BytesLike]): Texto cifrado.
        private_key_pem (Optional[BytesLike]): Clave privada RSA en PEM sin cifrar.

    Returns:
        bytes: Mensaje original, sin relleno.

    Raises:
        MissingArgumentError: Si falta el texto cifrado o la clave.
        InvalidArgumentError: Si el texto cifrado o la clave están vacíos.
        CryptoError: Si la clave no se puede leer, no es RSA o el descifrado falla.

    """

    require_present(target=target, private_key_pem=private_key_pem)
    ciphertext = require_bytes(target, "target")
    pem = require_bytes(private_key_pem, "private_key_pem")

    try:
        private_key = serialization.load_pem_private_key(pem, password=None)
    except _PRIMITIVE_ERRORS as exc:
        logger.debug("[RSA] clave privada ilegible: %s", exc)
        raise CryptoError(f"No se ha podido leer la clave privada: {exc}") from exc
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise CryptoError("La clave privada indicada no es una clave RSA.")

    try:
        plaintext = private_key.decrypt(ciphertext, padding.PKCS1v15())
    except _PRIMITIVE_ERRORS as exc:
        logger.debug("[RSA] fallo al descifrar: %s", exc)
        raise CryptoError(f"No se ha podido descifrar con RSA: {exc}") from exc

    logger.debug("[RSA] descifrado %d bits claro=%d", private_key.key_size, len(plaintext))
    return plaintext


def rsa_encrypt_with_fresh_key(
    target: Optional[BytesLike], bit_size: Union[RsaBitSize, int, None] = None
) -> RsaKeypairBundle:
    """Genera un par RSA nuevo y cifra ``target`` con su clave pública.

    Cada llamada produce claves distintas; el resultado incluye todo lo
    necesario para descifrar después con :func:`rsa_decrypt`.

    """

    require_present(target=target)
    require_bytes(target, "target")
    bundle = generate_keypair(bit_size)
    ciphertext = rsa_encrypt(target, bundle.public_key_pem)
    return bundle.model_copy(update={"ciphertext": ciphertext})
