# --------------------------------------------------------------
# File: __init__.py
# Description: Superficie pública del paquete passutil.
# --------------------------------------------------------------
"""Generación, evaluación y digest de contraseñas."""

from passutil.digester import digest, salted_input, verify
from passutil.errors import (
    DictionaryUnavailableError,
    ExhaustedError,
    InvalidSaltLengthError,
    PasswordUtilError,
    RandomSourceError,
    TooShortError,
    UnratableScoreError,
)
from passutil.generator import ALPHABET, generate, generate_with_minimum_score
from passutil.models import (
    ComplexityReport,
    DigestAlgorithm,
    DigestResult,
    Password,
    SaltSpec,
    new_password,
    rating_for,
)
from passutil.scorer import MIN_LENGTH, SPECIAL_CHARACTERS, score
from passutil.wordlist import DictionaryOracle, WordList, default_dictionary

__all__ = [
    "ALPHABET",
    "MIN_LENGTH",
    "SPECIAL_CHARACTERS",
    "ComplexityReport",
    "DictionaryOracle",
    "DictionaryUnavailableError",
    "DigestAlgorithm",
    "DigestResult",
    "ExhaustedError",
    "InvalidSaltLengthError",
    "Password",
    "PasswordUtilError",
    "RandomSourceError",
    "SaltSpec",
    "TooShortError",
    "UnratableScoreError",
    "WordList",
    "default_dictionary",
    "digest",
    "generate",
    "generate_with_minimum_score",
    "new_password",
    "rating_for",
    "salted_input",
    "score",
    "verify",
]
