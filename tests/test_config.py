# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la lectura de parámetros por defecto desde el entorno.
# --------------------------------------------------------------

import logging

from cryptoutil import RsaBitSize, generate_keypair


def test_defaults_without_environment(reload_config):
    """Comprueba los valores por defecto cuando no hay variables definidas.

    Args:
        reload_config (Callable): Fixture que recarga la configuración.

    Returns:
        None: Las aserciones revisan cada constante.
    """
    config = reload_config()
    assert config.KDF_ITERATIONS == 1000
    assert config.RSA_PUBLIC_EXPONENT == 65537
    assert config.DEFAULT_RSA_BIT_SIZE == 2048
    assert config.LOG_LEVEL == "WARNING"


def test_environment_overrides(reload_config):
    """Verifica que las variables de entorno sustituyan a los valores por defecto.

    Args:
        reload_config (Callable): Fixture que recarga la configuración.

    Returns:
        None: Las aserciones revisan los valores leídos.
    """
    config = reload_config(
        CRYPTOUTIL_KDF_ITERATIONS="25",
        CRYPTOUTIL_RSA_BIT_SIZE="1024",
        CRYPTOUTIL_LOG_LEVEL="debug",
    )
    assert config.KDF_ITERATIONS == 25
    assert config.DEFAULT_RSA_BIT_SIZE == 1024
    assert config.LOG_LEVEL == "DEBUG"


def test_invalid_values_fall_back(reload_config):
    """Garantiza que los valores no válidos vuelvan al valor por defecto.

    Args:
        reload_config (Callable): Fixture que recarga la configuración.

    Returns:
        None: Las aserciones revisan los valores saneados.
    """
    config = reload_config(
        CRYPTOUTIL_KDF_ITERATIONS="muchas",
        CRYPTOUTIL_RSA_PUBLIC_EXPONENT="4",
        CRYPTOUTIL_RSA_BIT_SIZE="3000",
        CRYPTOUTIL_LOG_LEVEL="verbose",
    )
    assert config.KDF_ITERATIONS == 1000
    assert config.RSA_PUBLIC_EXPONENT == 65537
    assert config.DEFAULT_RSA_BIT_SIZE == 2048
    assert config.LOG_LEVEL == "WARNING"


def test_default_bit_size_used_by_generate_keypair(reload_config):
    """Comprueba que generate_keypair() sin argumentos use el tamaño configurado.

    Args:
        reload_config (Callable): Fixture que recarga la configuración.

    Returns:
        None: Las aserciones revisan el tamaño del par generado.
    """
    reload_config(CRYPTOUTIL_RSA_BIT_SIZE="1024")
    bundle = generate_keypair()
    assert bundle.bit_size == RsaBitSize.BITS_1024
    assert len(bundle.public_modulus) == 128


def test_operations_log_at_debug(caplog):
    """Verifica que las operaciones dejen traza DEBUG sin exponer secretos.

    Args:
        caplog (pytest.LogCaptureFixture): Captura de registros.

    Returns:
        None: Las aserciones revisan los mensajes capturados.
    """
    from cryptoutil import CipherStrength, encrypt

    with caplog.at_level(logging.DEBUG, logger="cryptoutil"):
        encrypt(CipherStrength.AES128, b"secreto-en-claro", "abcdefgh", b"saltsalt", 2)
    assert any("[AES]" in record.getMessage() for record in caplog.records)
    assert all("secreto-en-claro" not in record.getMessage() for record in caplog.records)
