# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptoutil.
# --------------------------------------------------------------
"""Resúmenes SHA salados, cifrado AES-CBC con passphrase y cifrado RSA PKCS#1 v1.5."""

from cryptoutil.crypto_kdf import derive_key_iv
from cryptoutil.crypto_rsa import (
    generate_keypair,
    rsa_decrypt,
    rsa_encrypt,
    rsa_encrypt_with_fresh_key,
)
from cryptoutil.crypto_sym import decrypt, encrypt
from cryptoutil.errors import CryptoError, InvalidArgumentError, LibError, MissingArgumentError
from cryptoutil.hashing import digest, digest_hex, to_hex
from cryptoutil.models import (
    CipherStrength,
    DigestAlgorithm,
    RsaBitSize,
    RsaKeypairBundle,
    SymmetricEncryptionResult,
    Transformation,
)

__version__ = "0.2.5"

__all__ = [
    "CipherStrength",
    "CryptoError",
    "DigestAlgorithm",
    "InvalidArgumentError",
    "LibError",
    "MissingArgumentError",
    "RsaBitSize",
    "RsaKeypairBundle",
    "SymmetricEncryptionResult",
    "Transformation",
    "decrypt",
    "derive_key_iv",
    "digest",
    "digest_hex",
    "encrypt",
    "generate_keypair",
    "rsa_decrypt",
    "rsa_encrypt",
    "rsa_encrypt_with_fresh_key",
    "to_hex",
]
