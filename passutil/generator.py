# --------------------------------------------------------------
# File: generator.py
# Description: Generación de contraseñas aleatorias con la fuente segura del SO.
# --------------------------------------------------------------
"""Generación de contraseñas a partir de un alfabeto ASCII fijo.

Cada byte aleatorio se proyecta sobre el alfabeto con `byte % len(alphabet)`.
Con los 87 caracteres del alfabeto por defecto, 256 % 87 = 82: los 82 primeros
salen con probabilidad 3/256 y los 5 últimos con 2/256. Se acepta
ese sesgo; no se aplica muestreo por rechazo.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from passutil import config
from passutil.errors import (
    ExhaustedError,
    RandomSourceError,
    TooShortError,
    UnratableScoreError,
)
from passutil.models import MAX_SCORE, MIN_SCORE, Password
from passutil.scorer import MIN_LENGTH, SPECIAL_CHARACTERS, score

__all__ = ["ALPHABET", "generate", "generate_with_minimum_score"]

logger = logging.getLogger(__name__)

ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    + SPECIAL_CHARACTERS
)

RandomSource = Callable[[int], bytes]


def _random_bytes(source: RandomSource, count: int) -> bytes:
    try:
        data = source(count)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"Fuente aleatoria segura no disponible: {exc}") from exc
    if len(data) != count:
        raise RandomSourceError(
            f"La fuente aleatoria devolvió {len(data)} bytes de {count} solicitados."
        )
    return data


def generate(
    length: int,
    *,
    alphabet: str = ALPHABET,
    source: RandomSource = os.urandom,
) -> Password:
    """Genera una contraseña aleatoria de la longitud indicada.

    Args:
        length (int): Número de caracteres, al menos 1.
        alphabet (str): Caracteres permitidos.
        source (RandomSource): Fuente de bytes criptográficamente segura.

    Returns:
        Password: Contraseña con exactamente `length` caracteres del alfabeto.

    Raises:
        ValueError: Si `length` es menor que 1 o el alfabeto está vacío.
        RandomSourceError: Si la fuente no entrega los bytes solicitados.

    """

    if length < 1:
        raise ValueError("length debe ser >= 1")
    if not alphabet:
        raise ValueError("El alfabeto no puede estar vacío.")

    size = len(alphabet)
    raw = _random_bytes(source, length)
    return Password(text="".join(alphabet[byte % size] for byte in raw))


def generate_with_minimum_score(
    length: int,
    minimum_score: int,
    *,
    max_attempts: Optional[int] = None,
    alphabet: str = ALPHABET,
    source: RandomSource = os.urandom,
) -> Password:
    """Genera contraseñas hasta que una alcance la puntuación mínima.

    Args:
        length (int): Longitud de cada candidata; debe ser evaluable.
        minimum_score (int): Puntuación mínima exigida, entre 0 y 4.
        max_attempts (Optional[int]): Límite de intentos. Por defecto
            `PASSUTIL_MAX_ATTEMPTS`.
        alphabet (str): Caracteres permitidos.
        source (RandomSource): Fuente de bytes criptográficamente segura.

    Returns:
        Password: Primera candidata con puntuación >= `minimum_score`.

    Raises:
        UnratableScoreError: Si `minimum_score` está fuera de 0..4.
        TooShortError: Si `length` no llega a la longitud mínima evaluable.
        ExhaustedError: Si se agotan los intentos.

    """

    if not MIN_SCORE <= minimum_score <= MAX_SCORE:
        raise UnratableScoreError(minimum_score)
    if length < MIN_LENGTH:
        raise TooShortError(length, MIN_LENGTH)
    if max_attempts is None:
        max_attempts = config.MAX_ATTEMPTS
    if max_attempts < 1:
        raise ValueError("max_attempts debe ser >= 1")

    best: Optional[int] = None
    for attempt in range(1, max_attempts + 1):
        candidate = generate(length, alphabet=alphabet, source=source)
        current = score(candidate).score
        if current >= minimum_score:
            logger.debug("Contraseña con puntuación %d tras %d intentos.", current, attempt)
            return candidate
        best = current if best is None else max(best, current)

    logger.warning(
        "Sin contraseña con puntuación >= %d tras %d intentos.", minimum_score, max_attempts
    )
    raise ExhaustedError(max_attempts, minimum_score, best)
