# --------------------------------------------------------------
# File: models.py
# Description: Enumeraciones y modelos de datos comunes de la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic y enumeraciones que describen algoritmos y resultados."""

from enum import Enum, IntEnum
from typing import Dict, Optional

from pydantic import BaseModel

# Tamaño de bloque AES y longitud del IV en modo CBC.
AES_BLOCK_SIZE = 16
IV_LENGTH = 16

# Longitud fija de la salt para las operaciones simétricas.
SALT_LENGTH = 8


class Transformation(Enum):
    """Nombres de transformación utilizados por la librería original."""

    RSA_ECB_PKCS1PADDING = "RSA/ECB/PKCS1Padding"
    AES_CBC_PKCS5PADDING = "AES/CBC/PKCS5Padding"
    # Alias de RSA_ECB_PKCS1PADDING.
    RSA = "RSA/ECB/PKCS1Padding"


class DigestAlgorithm(Enum):
    """Algoritmos de resumen soportados."""

    SHA256 = "SHA-256"
    SHA512 = "SHA-512"

    @property
    def digest_size(self) -> int:
        """Longitud en bytes del resumen producido."""

        return _DIGEST_SIZES[self]


class CipherStrength(Enum):
    """Fortaleza AES en modo CBC."""

    AES128 = "AES-128"
    AES256 = "AES-256"

    @property
    def key_length(self) -> int:
        """Longitud en bytes de la clave simétrica."""

        return _KEY_LENGTHS[self]


class RsaBitSize(IntEnum):
    """Tamaños de módulo RSA soportados, en bits."""

    BITS_1024 = 1024
    BITS_2048 = 2048
    BITS_4096 = 4096
    BITS_8192 = 8192

    @property
    def ciphertext_length(self) -> int:
        """Longitud fija del texto cifrado PKCS#1 v1.5 para este módulo."""

        return _RSA_CIPHERTEXT_LENGTHS[self]


_DIGEST_SIZES: Dict[DigestAlgorithm, int] = {
    DigestAlgorithm.SHA256: 32,
    DigestAlgorithm.SHA512: 64,
}

_KEY_LENGTHS: Dict[CipherStrength, int] = {
    CipherStrength.AES128: 16,
    CipherStrength.AES256: 32,
}

_RSA_CIPHERTEXT_LENGTHS: Dict[RsaBitSize, int] = {
    RsaBitSize.BITS_1024: 128,
    RsaBitSize.BITS_2048: 256,
    RsaBitSize.BITS_4096: 512,
    RsaBitSize.BITS_8192: 1024,
}


class SymmetricEncryptionResult(BaseModel):
    """Representa el resultado de un cifrado AES-CBC.

    Attributes:
        salt (Optional[bytes]): Salt de 8 bytes utilizada en la derivación.
        iv (bytes): Vector de inicialización derivado (16 bytes).
        ciphertext (bytes): Datos cifrados con relleno PKCS#7.
        transformation (str): Nombre de la transformación aplicada.

    """

    salt: Optional[bytes] = None
    iv: bytes
    ciphertext: bytes
    transformation: str = Transformation.AES_CBC_PKCS5PADDING.value


class RsaKeypairBundle(BaseModel):
    """Par de claves RSA exportado y, opcionalmente, el texto cifrado asociado.

    Attributes:
        bit_size (RsaBitSize): Tamaño del módulo en bits.
        public_key_pem (bytes): Clave pública en PEM SubjectPublicKeyInfo.
        private_key_pem (bytes): Clave privada en PEM PKCS#8 sin cifrar.
        public_modulus (bytes): Módulo público ``n`` en big-endian.
        public_exponent (bytes): Exponente público ``e`` en big-endian.
        private_modulus (bytes): Módulo de la clave privada ``n`` en big-endian.
        private_exponent (bytes): Exponente privado ``d`` en big-endian.
        ciphertext (Optional[bytes]): Texto cifrado cuando el par se generó
            para cifrar un mensaje concreto.
        transformation (str): Nombre de la transformación aplicada.

    """

    bit_size: RsaBitSize
    public_key_pem: bytes
    private_key_pem: bytes
    public_modulus: bytes
    public_exponent: bytes
    private_modulus: bytes
    private_exponent: bytes
    ciphertext: Optional[bytes] = None
    transformation: str = Transformation.RSA_ECB_PKCS1PADDING.value
