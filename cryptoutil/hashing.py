# --------------------------------------------------------------
# File: hashing.py
# Description: Resúmenes SHA-256/SHA-512 con salt opcional y utilidades hex.
# --------------------------------------------------------------
"""Cálculo de resúmenes salados compatibles con los hashes ya almacenados."""

import hashlib
import logging
from typing import Callable, Dict, Optional

from cryptoutil.models import DigestAlgorithm
from cryptoutil.validation import (
    BytesLike,
    optional_bytes,
    require_bytes,
    require_enum,
    require_present,
    to_bytes,
)

logger = logging.getLogger(__name__)

_DIGESTS: Dict[DigestAlgorithm, Callable] = {
    DigestAlgorithm.SHA256: hashlib.sha256,
    DigestAlgorithm.SHA512: hashlib.sha512,
}


def digest(
    algorithm: DigestAlgorithm,
    target: Optional[BytesLike],
    salt: Optional[BytesLike] = None,
) -> bytes:
    """Calcula el resumen de ``target`` concatenando la salt al final.

    La salt se añade tras el objetivo en una única pasada (no es HMAC); el
    orden es significativo para reproducir los resúmenes existentes.

    Args:
        algorithm (DigestAlgorithm): Algoritmo SHA a utilizar.
        target (Optional[BytesLike]): Datos a resumir; ``str`` se codifica en UTF-8.
        salt (Optional[BytesLike]): Salt opcional; vacía equivale a ausente.

    Returns:
        bytes: Resumen de 32 o 64 bytes según el algoritmo.

    Raises:
        MissingArgumentError: Si ``target`` es ``None``.
        InvalidArgumentError: Si ``target`` está vacío o el algoritmo no existe.

    """

    require_present(algorithm=algorithm, target=target)
    algorithm = require_enum(algorithm, DigestAlgorithm, "algorithm")
    data = require_bytes(target, "target")
    salt_bytes = optional_bytes(salt, "salt")

    hasher = _DIGESTS[algorithm]()
    hasher.update(data)
    if salt_bytes is not None:
        hasher.update(salt_bytes)

    logger.debug(
        "[HASH] %s len=%d salt=%s", algorithm.value, len(data), "sí" if salt_bytes else "no"
    )
    return hasher.digest()


def to_hex(data: Optional[BytesLike], uppercase: bool = False) -> Optional[str]:
    """Representa ``data`` en hexadecimal, dos caracteres por byte y sin separadores."""

    if data is None:
        return None
    rendered = to_bytes(data, "data").hex()
    return rendered.upper() if uppercase else rendered


def digest_hex(
    algorithm: DigestAlgorithm,
    target: Optional[BytesLike],
    salt: Optional[BytesLike] = None,
    uppercase: bool = False,
) -> str:
    """Igual que :func:`digest` pero devuelve el resumen en hexadecimal."""

    return to_hex(digest(algorithm, target, salt), uppercase=uppercase)
