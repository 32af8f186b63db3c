# --------------------------------------------------------------
# File: models.py
# Description: Objetos de valor inmutables compartidos por passutil.
# --------------------------------------------------------------
"""Modelos Pydantic para contraseñas, informes de complejidad y digests."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from passutil import config
from passutil.errors import UnratableScoreError

MIN_SCORE = 0
MAX_SCORE = 4

# Tabla fija puntuación -> valoración.
RATINGS = MappingProxyType(
    {
        0: "Horrible",
        1: "Weak",
        2: "Medium",
        3: "Strong",
        4: "Very Strong",
    }
)


def rating_for(score: int) -> str:
    """Devuelve la valoración textual de una puntuación.

    Args:
        score (int): Puntuación de complejidad.

    Returns:
        str: Valoración asociada a la puntuación.

    Raises:
        UnratableScoreError: Si la puntuación no está en la tabla.

    """

    try:
        return RATINGS[score]
    except KeyError:
        raise UnratableScoreError(score) from None


class Password(BaseModel):
    """Contraseña inmutable; `length` siempre se calcula a partir de `text`."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(repr=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        return len(self.text)


def new_password(text: str) -> Password:
    """Envuelve una contraseña existente que no se ha generado aquí."""

    return Password(text=text)


class ComplexityReport(BaseModel):
    """Resultado de evaluar la complejidad de una contraseña.

    Attributes:
        length (int): Longitud de la contraseña evaluada.
        score (int): Puntuación acotada entre 0 y 4.
        has_upper (bool): Contiene alguna mayúscula.
        has_lower (bool): Contiene alguna minúscula.
        has_number (bool): Contiene algún dígito.
        has_special (bool): Contiene algún símbolo del conjunto especial.
        is_dictionary_word (Optional[bool]): Resultado del diccionario, o
            `None` si no se consultó.

    """

    model_config = ConfigDict(frozen=True)

    length: int
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    has_upper: bool
    has_lower: bool
    has_number: bool
    has_special: bool
    is_dictionary_word: Optional[bool] = None

    @property
    def rating(self) -> str:
        return rating_for(self.score)


class DigestAlgorithm(str, Enum):
    """Algoritmos de digest soportados."""

    MD5 = "md5"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]


_DIGEST_SIZES = {
    DigestAlgorithm.MD5: 16,
    DigestAlgorithm.SHA256: 32,
    DigestAlgorithm.SHA512: 64,
}


class SaltSpec(BaseModel):
    """Parámetros de la salt que se generará al calcular un digest."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(default_factory=lambda: config.SALT_LENGTH)


class DigestResult(BaseModel):
    """Digest calculado junto con la salt empleada, si la hubo.

    Attributes:
        algorithm (DigestAlgorithm): Algoritmo usado.
        digest (bytes): Digest de tamaño fijo según el algoritmo.
        salt (Optional[bytes]): Salt en bruto que el llamador debe guardar.

    """

    model_config = ConfigDict(frozen=True)

    algorithm: DigestAlgorithm
    digest: bytes
    salt: Optional[bytes] = None

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    @property
    def salt_hex(self) -> Optional[str]:
        return None if self.salt is None else self.salt.hex()
