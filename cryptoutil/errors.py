# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores compartida por todas las operaciones criptográficas.
# --------------------------------------------------------------
"""Errores tipados que distinguen el mal uso del llamador de los fallos criptográficos."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "LibError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "CryptoError",
]


class LibError(Exception):
    """Error base de la librería.

    Todas las variantes exponen ``message()`` con el texto legible y
    ``kind_name()`` con un discriminante estable, de modo que el llamador pueda
    ramificar por tipo de error sin depender de la clase concreta.

    """

    default_message = "Error en la librería criptográfica."

    def __init__(self, message: Optional[str] = None) -> None:
        self._message = message if message is not None else self.default_message
        super().__init__(self._message)

    def message(self) -> str:
        """Devuelve el mensaje legible asociado al error."""

        return self._message

    def kind_name(self) -> str:
        """Devuelve el nombre estable del tipo de error."""

        return type(self).__name__

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{self.kind_name()}({self._message!r})"


class MissingArgumentError(LibError):
    """Un valor obligatorio no se proporcionó en absoluto."""

    default_message = "Falta un argumento obligatorio."


class InvalidArgumentError(LibError):
    """Un valor presente incumple una precondición (vacío, longitud incorrecta...)."""

    default_message = "Argumento no válido."


class CryptoError(LibError):
    """La primitiva criptográfica subyacente informó de un fallo."""

    default_message = "Error en la operación criptográfica."
