# --------------------------------------------------------------
# File: wordlist.py
# Description: Diccionario de palabras comunes respaldado por un fichero de texto.
# --------------------------------------------------------------
"""Oráculo de diccionario para penalizar contraseñas basadas en palabras comunes."""

from __future__ import annotations

import os
from typing import FrozenSet, Iterable, Optional, Protocol

from passutil import config
from passutil.errors import DictionaryUnavailableError

__all__ = ["COMMON_WORDS", "DictionaryOracle", "WordList", "default_dictionary"]

COMMON_WORDS = frozenset(
    {
        "123456",
        "123456789",
        "12345678",
        "qwerty",
        "password",
        "111111",
        "123123",
        "000000",
        "abc123",
        "letmein",
        "iloveyou",
        "admin",
        "welcome",
        "monkey",
        "dragon",
        "football",
        "baseball",
        "princess",
        "qwertyuiop",
        "passw0rd",
    }
)


class DictionaryOracle(Protocol):
    """Contrato del diccionario externo consultado por el evaluador."""

    def is_common_word(self, candidate: str) -> bool:
        """Indica si el candidato es (o contiene) una palabra conocida."""


class WordList:
    """Lista de palabras, una por línea, comparada sin distinguir mayúsculas.

    Un candidato se considera común cuando *contiene* alguna palabra de la
    lista. Las palabras más cortas que `min_word_length` se descartan.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        words: Optional[Iterable[str]] = None,
        min_word_length: int = 4,
    ) -> None:
        if path is None and words is None:
            raise ValueError("Se necesita una ruta o una colección de palabras.")
        self.path = path
        self.min_word_length = min_word_length
        self._words: Optional[FrozenSet[str]] = (
            None if words is None else self._normalize(words)
        )

    @classmethod
    def from_words(cls, words: Iterable[str], *, min_word_length: int = 4) -> "WordList":
        return cls(words=words, min_word_length=min_word_length)

    def _normalize(self, words: Iterable[str]) -> FrozenSet[str]:
        cleaned = (word.strip().lower() for word in words)
        return frozenset(word for word in cleaned if len(word) >= self.min_word_length)

    def _load(self) -> FrozenSet[str]:
        try:
            with open(os.fspath(self.path), "r", encoding="utf-8") as handler:
                return self._normalize(handler)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryUnavailableError(
                f"No se puede leer el diccionario {self.path}: {exc}"
            ) from exc

    @property
    def words(self) -> FrozenSet[str]:
        # Carga perezosa; repetirla produce el mismo conjunto.
        if self._words is None:
            self._words = self._load()
        return self._words

    def is_common_word(self, candidate: str) -> bool:
        lowered = candidate.lower()
        return any(word in lowered for word in self.words)


def default_dictionary() -> Optional[WordList]:
    """Devuelve el diccionario configurado en `PASSUTIL_WORDLIST_PATH`, si existe."""

    if not config.WORDLIST_PATH:
        return None
    return WordList(config.WORDLIST_PATH)
