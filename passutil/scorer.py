# --------------------------------------------------------------
# File: scorer.py
# Description: Evaluación de la complejidad de contraseñas por clases de caracteres.
# --------------------------------------------------------------
"""Puntuación de contraseñas según las clases de caracteres que contienen.

Cada clase presente (minúsculas, mayúsculas, dígitos y símbolos especiales)
suma un punto. Si se proporciona un diccionario y la contraseña contiene una
palabra común se resta un punto, sin bajar nunca de cero.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from passutil import config
from passutil.errors import DictionaryUnavailableError, TooShortError
from passutil.models import MAX_SCORE, MIN_SCORE, ComplexityReport, Password, rating_for
from passutil.wordlist import DictionaryOracle

__all__ = ["MIN_LENGTH", "SPECIAL_CHARACTERS", "score", "rating_for"]

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+,.?/:;{}[]~"

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


def _consult_dictionary(
    dictionary: DictionaryOracle, text: str, strict: bool
) -> Optional[bool]:
    """Pregunta al diccionario por la contraseña en minúsculas.

    Returns:
        Optional[bool]: Resultado del diccionario, o `None` si se omitió la
        comprobación en modo no estricto.

    """

    try:
        return bool(dictionary.is_common_word(text.lower()))
    except (DictionaryUnavailableError, OSError) as exc:
        if strict:
            if isinstance(exc, DictionaryUnavailableError):
                raise
            raise DictionaryUnavailableError(str(exc)) from exc
        logger.warning("Diccionario no disponible, se omite la comprobación: %s", exc)
        return None


def score(
    p: Password,
    dictionary: Optional[DictionaryOracle] = None,
    *,
    strict: Optional[bool] = None,
) -> ComplexityReport:
    """Evalúa la contraseña y devuelve su informe de complejidad.

    Args:
        p (Password): Contraseña a evaluar.
        dictionary (Optional[DictionaryOracle]): Diccionario de palabras
            comunes; si falta no se aplica penalización.
        strict (Optional[bool]): Si es falso, un diccionario caído se ignora
            en lugar de propagar el error. Por defecto
            `PASSUTIL_DICTIONARY_STRICT`.

    Returns:
        ComplexityReport: Informe con puntuación entre 0 y 4.

    Raises:
        TooShortError: Si la contraseña tiene menos de 8 caracteres.
        DictionaryUnavailableError: Si el diccionario falla en modo estricto.

    """

    # La longitud mínima se comprueba antes que cualquier clase.
    if p.length < MIN_LENGTH:
        logger.info("Contraseña demasiado corta para evaluarla (%d < %d).", p.length, MIN_LENGTH)
        raise TooShortError(p.length, MIN_LENGTH)

    has_lower = LOWER.search(p.text) is not None
    has_upper = UPPER.search(p.text) is not None
    has_number = DIGIT.search(p.text) is not None
    has_special = SPECIAL.search(p.text) is not None
    value = sum([has_lower, has_upper, has_number, has_special])

    is_dictionary_word: Optional[bool] = None
    if dictionary is not None:
        if strict is None:
            strict = config.DICTIONARY_STRICT
        is_dictionary_word = _consult_dictionary(dictionary, p.text, strict)
        if is_dictionary_word:
            logger.debug("Contraseña basada en palabra de diccionario, se penaliza.")
            value = max(MIN_SCORE, value - 1)

    return ComplexityReport(
        length=p.length,
        score=min(MAX_SCORE, value),
        has_upper=has_upper,
        has_lower=has_lower,
        has_number=has_number,
        has_special=has_special,
        is_dictionary_word=is_dictionary_word,
    )
