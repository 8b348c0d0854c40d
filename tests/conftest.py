# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para reutilizar claves RSA y aislar la configuración.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

from cryptoutil import RsaBitSize, generate_keypair

_CONFIG_VARS = (
    "CRYPTOUTIL_KDF_ITERATIONS",
    "CRYPTOUTIL_RSA_PUBLIC_EXPONENT",
    "CRYPTOUTIL_RSA_BIT_SIZE",
    "CRYPTOUTIL_LOG_LEVEL",
)


@pytest.fixture(scope="session")
def rsa_1024():
    """Par RSA de 1024 bits generado una sola vez por sesión.

    Returns:
        RsaKeypairBundle: Claves reutilizadas por las pruebas de cifrado RSA.
    """
    return generate_keypair(RsaBitSize.BITS_1024)


@pytest.fixture(scope="session")
def rsa_2048():
    """Par RSA de 2048 bits generado una sola vez por sesión.

    Returns:
        RsaKeypairBundle: Claves reutilizadas por las pruebas de cifrado RSA.
    """
    return generate_keypair(RsaBitSize.BITS_2048)


@pytest.fixture
def reload_config(monkeypatch) -> Iterator:
    """Recarga cryptoutil.config tras ajustar variables de entorno.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[Callable[..., ModuleType]]: Función que fija el entorno y
        devuelve el módulo recargado; al terminar se restaura la configuración.
    """
    import cryptoutil.config as config_module

    # Evita que un .env local interfiera con los valores esperados.
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)

    def _reload(**env):
        for name in _CONFIG_VARS:
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config_module)
