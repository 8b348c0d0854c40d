# --------------------------------------------------------------
# File: validation.py
# Description: Comprobaciones de argumentos comunes a todas las operaciones.
# --------------------------------------------------------------
"""Validación previa de argumentos antes de cualquier trabajo criptográfico."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar, Union

from cryptoutil.errors import InvalidArgumentError, MissingArgumentError

BytesLike = Union[bytes, bytearray, memoryview, str]

E = TypeVar("E", bound=Enum)


def to_bytes(value: BytesLike, name: str) -> bytes:
    """Normaliza ``value`` a ``bytes`` codificando las cadenas en UTF-8."""

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgumentError(f"'{name}' debe ser bytes o str, no {type(value).__name__}.")


def require_present(**values: object) -> None:
    """Comprueba que ningún argumento obligatorio sea ``None``.

    Se ejecuta antes que el resto de validaciones para que la ausencia de un
    valor se notifique siempre como ``MissingArgumentError``.

    """

    for name, value in values.items():
        if value is None:
            raise MissingArgumentError(f"No se ha indicado '{name}'.")


def require_bytes(value: Optional[BytesLike], name: str) -> bytes:
    """Exige un valor presente y no vacío.

    Args:
        value (Optional[BytesLike]): Valor recibido del llamador.
        name (str): Nombre del argumento para los mensajes de error.

    Returns:
        bytes: Valor normalizado a ``bytes``.

    Raises:
        MissingArgumentError: Si ``value`` es ``None``.
        InvalidArgumentError: Si ``value`` está vacío o no es de un tipo válido.

    """

    if value is None:
        raise MissingArgumentError(f"No se ha indicado '{name}'.")
    data = to_bytes(value, name)
    if not data:
        raise InvalidArgumentError(f"'{name}' está vacío.")
    return data


def optional_bytes(value: Optional[BytesLike], name: str) -> Optional[bytes]:
    """Normaliza un valor opcional; ``None`` y vacío se tratan como ausentes."""

    if value is None:
        return None
    data = to_bytes(value, name)
    return data or None


def require_length(value: Optional[BytesLike], name: str, length: int) -> bytes:
    """Exige un valor presente de longitud exacta ``length`` bytes."""

    if value is None:
        raise MissingArgumentError(f"No se ha indicado '{name}'.")
    data = to_bytes(value, name)
    if len(data) != length:
        raise InvalidArgumentError(
            f"'{name}' debe tener exactamente {length} bytes (recibidos {len(data)})."
        )
    return data


def require_positive_int(value: object, name: str) -> int:
    """Exige un entero estrictamente positivo (los booleanos no se aceptan)."""

    if value is None:
        raise MissingArgumentError(f"No se ha indicado '{name}'.")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"'{name}' debe ser un entero.")
    if value < 1:
        raise InvalidArgumentError(f"'{name}' debe ser mayor que cero.")
    return value


def require_enum(value: object, enum_type: Type[E], name: str) -> E:
    """Convierte ``value`` en un miembro de ``enum_type``.

    Acepta tanto el miembro como su valor (``2048`` o ``"SHA-256"``).

    """

    if value is None:
        raise MissingArgumentError(f"No se ha indicado '{name}'.")
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Valor no soportado para '{name}': {value!r}.") from exc
