# --------------------------------------------------------------
# File: test_hashing.py
# Description: Pruebas de los resúmenes SHA-256/SHA-512 con salt.
# --------------------------------------------------------------

import hashlib

import pytest

from cryptoutil import (
    DigestAlgorithm,
    InvalidArgumentError,
    MissingArgumentError,
    digest,
    digest_hex,
    to_hex,
)

SHA256_TEST_SALT = "4edf07edc95b2fdcbcaf2378fd12d8ac212c2aa6e326c59c3e629be3039d6432"
SHA512_TEST_SALT = (
    "6c838e934e3feefae6cfa53af11375d4954f85c6f5ed888c02cd7806a71696d1"
    "cb449f2be78e9e6ea301a95c81f28ad8766f3ae582f9beaac33c7dc2b7ba9187"
)


def test_sha256_regression_vector():
    """Comprueba el vector conocido SHA-256("test" + "salt").

    Returns:
        None: Las aserciones comparan el hexadecimal con el valor almacenado.
    """
    assert digest_hex(DigestAlgorithm.SHA256, b"test", salt=b"salt") == SHA256_TEST_SALT


def test_sha512_regression_vector():
    """Comprueba el vector conocido SHA-512("test" + "salt").

    Returns:
        None: Las aserciones comparan el hexadecimal con el valor almacenado.
    """
    assert digest_hex(DigestAlgorithm.SHA512, "test", salt="salt") == SHA512_TEST_SALT


@pytest.mark.parametrize(
    "algorithm, size",
    [(DigestAlgorithm.SHA256, 32), (DigestAlgorithm.SHA512, 64)],
)
def test_digest_width(algorithm, size):
    """Verifica la longitud del resumen según el algoritmo.

    Args:
        algorithm (DigestAlgorithm): Algoritmo parametrizado.
        size (int): Longitud esperada en bytes.

    Returns:
        None: Las aserciones comparan longitudes.
    """
    result = digest(algorithm, b"payload")
    assert len(result) == size == algorithm.digest_size


def test_salt_is_appended_after_target():
    """Garantiza que la salt se concatene tras el objetivo en una sola pasada.

    Returns:
        None: Las aserciones comparan contra hashlib directamente.
    """
    assert digest(DigestAlgorithm.SHA256, b"abc", b"xyz") == hashlib.sha256(b"abcxyz").digest()
    assert digest(DigestAlgorithm.SHA256, b"abc", b"xyz") != hashlib.sha256(b"xyzabc").digest()


def test_missing_or_empty_salt_is_plain_digest():
    """Comprueba que una salt ausente o vacía equivalga a no usar salt.

    Returns:
        None: Las aserciones comparan los tres resúmenes.
    """
    plain = hashlib.sha512(b"data").digest()
    assert digest(DigestAlgorithm.SHA512, b"data") == plain
    assert digest(DigestAlgorithm.SHA512, b"data", b"") == plain


def test_salt_sensitivity():
    """Verifica que salts distintas produzcan resúmenes distintos.

    Returns:
        None: Las aserciones comparan ambos resúmenes.
    """
    for algorithm in DigestAlgorithm:
        assert digest(algorithm, b"target", b"salt-a") != digest(algorithm, b"target", b"salt-b")


def test_missing_target_rejected():
    """Comprueba que un objetivo ausente se notifique como argumento faltante.

    Returns:
        None: Se espera MissingArgumentError.
    """
    with pytest.raises(MissingArgumentError):
        digest(DigestAlgorithm.SHA256, None)


@pytest.mark.parametrize("target", [b"", ""])
def test_empty_target_rejected(target):
    """Comprueba que un objetivo vacío se rechace como argumento no válido.

    Args:
        target (Union[bytes, str]): Objetivo vacío parametrizado.

    Returns:
        None: Se espera InvalidArgumentError.
    """
    with pytest.raises(InvalidArgumentError):
        digest(DigestAlgorithm.SHA256, target)


def test_unknown_algorithm_rejected():
    """Verifica que un algoritmo desconocido se rechace antes de resumir.

    Returns:
        None: Se espera InvalidArgumentError.
    """
    with pytest.raises(InvalidArgumentError):
        digest("MD4", b"data")


def test_algorithm_accepts_enum_value():
    """Comprueba que el valor textual del algoritmo sea equivalente al miembro.

    Returns:
        None: Las aserciones comparan ambos resúmenes.
    """
    assert digest("SHA-256", b"data") == digest(DigestAlgorithm.SHA256, b"data")


def test_to_hex_formats():
    """Verifica la representación hexadecimal en minúsculas y mayúsculas.

    Returns:
        None: Las aserciones comparan las cadenas generadas.
    """
    assert to_hex(b"\x00\x0f\xab") == "000fab"
    assert to_hex(b"\x00\x0f\xab", uppercase=True) == "000FAB"
    assert to_hex(None) is None
    assert digest_hex(DigestAlgorithm.SHA256, b"test", b"salt", uppercase=True) == SHA256_TEST_SALT.upper()
