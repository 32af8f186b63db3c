# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del paquete passutil.
# --------------------------------------------------------------
"""Errores de dominio lanzados por el generador, el evaluador y el digester."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "PasswordUtilError",
    "RandomSourceError",
    "TooShortError",
    "InvalidSaltLengthError",
    "ExhaustedError",
    "UnratableScoreError",
    "DictionaryUnavailableError",
]


class PasswordUtilError(Exception):
    """Excepción base de todos los errores de passutil."""


class RandomSourceError(PasswordUtilError):
    """La fuente de aleatoriedad segura no pudo entregar los bytes pedidos."""


class TooShortError(PasswordUtilError):
    """La contraseña no alcanza la longitud mínima evaluable."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            f"La contraseña no es suficientemente larga para evaluarla "
            f"({length} < {minimum})."
        )
        self.length = length
        self.minimum = minimum


class InvalidSaltLengthError(PasswordUtilError):
    """La longitud de salt solicitada no es positiva."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Longitud de salt inválida: {length}.")
        self.length = length


class ExhaustedError(PasswordUtilError):
    """Se agotaron los intentos buscando una contraseña con la puntuación mínima.

    Attributes:
        attempts (int): Intentos realizados antes de rendirse.
        best_score (Optional[int]): Mejor puntuación observada, si hubo alguna.

    """

    def __init__(self, attempts: int, minimum_score: int, best_score: Optional[int]) -> None:
        super().__init__(
            f"Sin contraseña con puntuación >= {minimum_score} tras {attempts} intentos "
            f"(mejor: {best_score})."
        )
        self.attempts = attempts
        self.minimum_score = minimum_score
        self.best_score = best_score


class UnratableScoreError(PasswordUtilError):
    """La puntuación cae fuera de la tabla de valoraciones."""

    def __init__(self, score: int) -> None:
        super().__init__(f"Puntuación sin valoración definida: {score}.")
        self.score = score


class DictionaryUnavailableError(PasswordUtilError):
    """El diccionario de palabras comunes no está disponible."""
