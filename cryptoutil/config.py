# --------------------------------------------------------------
# File: config.py
# Description: Parámetros por defecto de la librería leídos del entorno (.env).
# --------------------------------------------------------------
"""Configuración de valores por defecto para KDF, RSA y logging."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Lee un entero del entorno devolviendo el valor por defecto si no es válido."""

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Número de rondas MD5 por bloque en la derivación de clave/IV.
KDF_ITERATIONS = max(1, _env_int("CRYPTOUTIL_KDF_ITERATIONS", 1000))

RSA_PUBLIC_EXPONENT = _env_int("CRYPTOUTIL_RSA_PUBLIC_EXPONENT", 65537)
if RSA_PUBLIC_EXPONENT not in (3, 65537):
    RSA_PUBLIC_EXPONENT = 65537

DEFAULT_RSA_BIT_SIZE = _env_int("CRYPTOUTIL_RSA_BIT_SIZE", 2048)
if DEFAULT_RSA_BIT_SIZE not in (1024, 2048, 4096, 8192):
    DEFAULT_RSA_BIT_SIZE = 2048

LOG_LEVEL = os.getenv("CRYPTOUTIL_LOG_LEVEL", "WARNING").upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    LOG_LEVEL = "WARNING"


def configure_logging() -> None:
    """Configura el logging raíz para aplicaciones que usan la librería."""

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
