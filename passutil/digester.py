# --------------------------------------------------------------
# File: digester.py
# Description: Digests MD5/SHA-256/SHA-512 de contraseñas con salt opcional.
# --------------------------------------------------------------
"""Cálculo y verificación de digests de contraseñas.

Con salt, el texto digerido es la contraseña seguida de la representación
hexadecimal (minúsculas) de la salt, no de sus bytes en bruto.
"""

from __future__ import annotations

import hmac
import os
from typing import Callable, Optional

from cryptography.hazmat.primitives import hashes

from passutil.errors import InvalidSaltLengthError, RandomSourceError
from passutil.models import DigestAlgorithm, DigestResult, Password, SaltSpec

__all__ = ["digest", "salted_input", "verify"]

_HASHES = {
    DigestAlgorithm.MD5: hashes.MD5,
    DigestAlgorithm.SHA256: hashes.SHA256,
    DigestAlgorithm.SHA512: hashes.SHA512,
}


def salted_input(text: str, salt: Optional[bytes] = None) -> bytes:
    """Construye los bytes exactos que se pasan a la función hash."""

    if salt is None:
        return text.encode("utf-8")
    return (text + salt.hex()).encode("utf-8")


def _hash(algorithm: DigestAlgorithm, data: bytes) -> bytes:
    hasher = hashes.Hash(_HASHES[DigestAlgorithm(algorithm)]())
    hasher.update(data)
    return hasher.finalize()


def _draw_salt(source: Callable[[int], bytes], length: int) -> bytes:
    try:
        salt = source(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"Fuente aleatoria segura no disponible: {exc}") from exc
    if len(salt) != length:
        raise RandomSourceError(
            f"La fuente aleatoria devolvió {len(salt)} bytes de {length} solicitados."
        )
    return salt


def digest(
    p: Password,
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256,
    salt_spec: Optional[SaltSpec] = None,
    *,
    source: Callable[[int], bytes] = os.urandom,
) -> DigestResult:
    """Calcula el digest de la contraseña, generando salt si se pide.

    Args:
        p (Password): Contraseña de entrada.
        algorithm (DigestAlgorithm): MD5, SHA256 o SHA512.
        salt_spec (Optional[SaltSpec]): Si se indica, se genera una salt
            aleatoria de `salt_spec.length` bytes.
        source (Callable[[int], bytes]): Fuente segura para la salt.

    Returns:
        DigestResult: Digest de tamaño fijo y la salt en bruto (o `None`).

    Raises:
        InvalidSaltLengthError: Si la longitud de salt no es positiva.
        RandomSourceError: Si la fuente no entrega la salt.

    """

    salt: Optional[bytes] = None
    if salt_spec is not None:
        if salt_spec.length <= 0:
            raise InvalidSaltLengthError(salt_spec.length)
        salt = _draw_salt(source, salt_spec.length)

    value = _hash(algorithm, salted_input(p.text, salt))
    return DigestResult(algorithm=algorithm, digest=value, salt=salt)


def verify(
    p: Password,
    expected: bytes,
    *,
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256,
    salt: Optional[bytes] = None,
) -> bool:
    """Comprueba en tiempo constante una contraseña frente a un digest guardado.

    Args:
        p (Password): Contraseña candidata.
        expected (bytes): Digest almacenado.
        algorithm (DigestAlgorithm): Algoritmo con el que se almacenó.
        salt (Optional[bytes]): Salt en bruto devuelta por `digest`.

    Returns:
        bool: True si el digest recalculado coincide.

    """

    return hmac.compare_digest(_hash(algorithm, salted_input(p.text, salt)), expected)
