# --------------------------------------------------------------
# File: logging.py
# Description: Configuración del logging para procesos que usan passutil.
# --------------------------------------------------------------
"""Ayudas para configurar el logging del proceso anfitrión."""

from __future__ import annotations

import logging
from typing import Optional

from passutil import config

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configura el logging raíz con un formato común.

    Args:
        level (Optional[str]): Nivel por nombre; si falta se usa
            `PASSUTIL_LOG_LEVEL`.

    Returns:
        int: Nivel numérico finalmente aplicado.

    """

    raw = level if level is not None else config.LOG_LEVEL
    normalized = raw.strip().upper() or "INFO"
    resolved = getattr(logging, normalized, logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    return resolved
