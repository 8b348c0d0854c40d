# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-CBC para cifrado y descifrado simétrico con passphrase.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico AES-CBC con clave derivada de un secreto y una salt."""

import logging
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptoutil.crypto_kdf import derive_key_iv
from cryptoutil.errors import CryptoError, InvalidArgumentError
from cryptoutil.models import (
    AES_BLOCK_SIZE,
    SALT_LENGTH,
    CipherStrength,
    SymmetricEncryptionResult,
)
from cryptoutil.validation import (
    BytesLike,
    require_bytes,
    require_enum,
    require_length,
    require_present,
)

logger = logging.getLogger(__name__)


def _cbc_cipher(key: bytes, iv: bytes) -> Cipher:
    """Inicializa AES-CBC envolviendo los fallos de inicialización en ``CryptoError``."""

    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except (ValueError, TypeError) as exc:
        logger.debug("[AES] fallo al inicializar el cifrador: %s", exc)
        raise CryptoError(f"No se ha podido inicializar AES-CBC: {exc}") from exc


def encrypt(
    strength: CipherStrength,
    target: Optional[BytesLike],
    secret: Optional[BytesLike],
    salt: Optional[BytesLike],
    iteration_count: Optional[int] = None,
) -> SymmetricEncryptionResult:
    """Cifra datos con AES-CBC y relleno PKCS#7.

    Args:
        strength (CipherStrength): AES-128 o AES-256.
        target (Optional[BytesLike]): Datos en claro; no pueden estar vacíos.
        secret (Optional[BytesLike]): Secreto del que se deriva la clave.
        salt (Optional[BytesLike]): Salt obligatoria de 8 bytes.
        iteration_count (Optional[int]): Rondas de derivación; ``None`` usa la
            configuración por defecto.

    Returns:
        SymmetricEncryptionResult: Resultado con `ciphertext`, `iv` y `salt`.

    Raises:
        MissingArgumentError: Si falta algún argumento obligatorio.
        InvalidArgumentError: Si ``target`` está vacío o la salt no mide 8 bytes.
        CryptoError: Si falla la derivación o el cifrador.

    """

    require_present(strength=strength, target=target, secret=secret, salt=salt)
    strength = require_enum(strength, CipherStrength, "strength")
    plaintext = require_bytes(target, "target")
    salt_bytes = require_length(salt, "salt", SALT_LENGTH)

    key, iv = derive_key_iv(strength, secret, salt_bytes, iteration_count)

    cipher = _cbc_cipher(key, iv)
    try:
        padder = padding.PKCS7(AES_BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = cipher.encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    except ValueError as exc:
        logger.debug("[AES] fallo al cifrar: %s", exc)
        raise CryptoError(f"No se ha podido cifrar: {exc}") from exc

    logger.debug("[AES] cifrado %s claro=%d cifrado=%d", strength.value, len(plaintext), len(ciphertext))
    return SymmetricEncryptionResult(salt=salt_bytes, iv=iv, ciphertext=ciphertext)


def decrypt(
    strength: CipherStrength,
    target: Optional[BytesLike],
    secret: Optional[BytesLike],
    iv: Optional[BytesLike],
    salt: Optional[BytesLike],
    iteration_count: Optional[int] = None,
) -> bytes:
    """Descifra datos AES-CBC producidos por :func:`encrypt`.

    La clave se vuelve a derivar de ``secret``, ``salt`` e ``iteration_count``;
    el IV se recibe explícitamente porque acompaña al texto cifrado.

    Args:
        strength (CipherStrength): Fortaleza usada al cifrar.
        target (Optional[BytesLike]): Texto cifrado.
        secret (Optional[BytesLike]): Secreto usado al cifrar.
        iv (Optional[BytesLike]): IV devuelto por el cifrado.
        salt (Optional[BytesLike]): Salt de 8 bytes usada al cifrar.
        iteration_count (Optional[int]): Rondas de derivación usadas al cifrar.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        MissingArgumentError: Si falta algún argumento obligatorio.
        InvalidArgumentError: Si el texto cifrado está vacío, la salt no mide
            8 bytes o el descifrado rechaza los datos (relleno incorrecto,
            clave errónea o longitud truncada).
        CryptoError: Si falla la derivación o la inicialización del cifrador.

    """

    require_present(strength=strength, target=target, secret=secret, iv=iv, salt=salt)
    strength = require_enum(strength, CipherStrength, "strength")
    ciphertext = require_bytes(target, "target")
    iv_bytes = require_bytes(iv, "iv")
    salt_bytes = require_length(salt, "salt", SALT_LENGTH)

    key, _ = derive_key_iv(strength, secret, salt_bytes, iteration_count)

    cipher = _cbc_cipher(key, iv_bytes)
    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(AES_BLOCK_SIZE * 8).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        logger.debug("[AES] texto cifrado rechazado: %s", exc)
        raise InvalidArgumentError(f"No se ha podido descifrar: {exc}") from exc

    logger.debug("[AES] descifrado %s cifrado=%d claro=%d", strength.value, len(ciphertext), len(plaintext))
    return plaintext
