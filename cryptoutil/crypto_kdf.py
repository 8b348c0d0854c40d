# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de clave e IV compatible con EVP_BytesToKey (MD5).
# --------------------------------------------------------------
"""Derivación determinista de clave simétrica e IV a partir de un secreto y una salt."""

import logging
from typing import Optional, Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from cryptoutil import config
from cryptoutil.errors import CryptoError
from cryptoutil.models import IV_LENGTH, SALT_LENGTH, CipherStrength
from cryptoutil.validation import (
    BytesLike,
    require_bytes,
    require_enum,
    require_length,
    require_positive_int,
    require_present,
)

logger = logging.getLogger(__name__)


def _md5(data: bytes) -> bytes:
    """Calcula MD5 con la implementación de ``cryptography``."""

    hasher = hashes.Hash(hashes.MD5())
    hasher.update(data)
    return hasher.finalize()


def _bytes_to_key(secret: bytes, salt: bytes, count: int, needed: int) -> bytes:
    """Acumula bloques ``D_i = MD5^count(D_{i-1} || secret || salt)`` hasta ``needed`` bytes."""

    material = b""
    block = b""
    while len(material) < needed:
        block = _md5(block + secret + salt)
        for _ in range(count - 1):
            block = _md5(block)
        material += block
    return material[:needed]


def derive_key_iv(
    strength: CipherStrength,
    secret: Optional[BytesLike],
    salt: Optional[BytesLike],
    iteration_count: Optional[int] = None,
) -> Tuple[bytes, bytes]:
    """Deriva la clave AES y el IV de CBC a partir de ``secret`` y ``salt``.

    Equivale a ``EVP_BytesToKey`` de OpenSSL con MD5: cada bloque de 16 bytes
    se obtiene aplicando ``iteration_count`` rondas de MD5, y los bloques se
    concatenan hasta cubrir la longitud de clave más los 16 bytes del IV.

    Args:
        strength (CipherStrength): Fortaleza AES que fija la longitud de clave.
        secret (Optional[BytesLike]): Secreto o passphrase del usuario.
        salt (Optional[BytesLike]): Salt de exactamente 8 bytes.
        iteration_count (Optional[int]): Rondas MD5 por bloque; ``None`` usa
            ``config.KDF_ITERATIONS``.

    Returns:
        Tuple[bytes, bytes]: Clave de 16/32 bytes e IV de 16 bytes.

    Raises:
        MissingArgumentError: Si falta el secreto o la salt.
        InvalidArgumentError: Si la salt no mide 8 bytes o las iteraciones no son válidas.
        CryptoError: Si la primitiva de resumen falla.

    """

    require_present(strength=strength, secret=secret, salt=salt)
    strength = require_enum(strength, CipherStrength, "strength")
    secret_bytes = require_bytes(secret, "secret")
    salt_bytes = require_length(salt, "salt", SALT_LENGTH)
    if iteration_count is None:
        iteration_count = config.KDF_ITERATIONS
    count = require_positive_int(iteration_count, "iteration_count")

    key_len = strength.key_length
    try:
        material = _bytes_to_key(secret_bytes, salt_bytes, count, key_len + IV_LENGTH)
    except (UnsupportedAlgorithm, ValueError) as exc:
        logger.debug("[KDF] fallo en la derivación: %s", exc)
        raise CryptoError(f"No se ha podido derivar la clave: {exc}") from exc

    logger.debug("[KDF] %s md5 rondas=%d", strength.value, count)
    return material[:key_len], material[key_len:]
