# --------------------------------------------------------------
# File: config.py
# Description: Valores por defecto configurables mediante entorno o .env.
# --------------------------------------------------------------
"""Configuración de passutil leída del entorno tras cargar `.env`."""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


MAX_ATTEMPTS = int(os.getenv("PASSUTIL_MAX_ATTEMPTS", "1000"))
SALT_LENGTH = int(os.getenv("PASSUTIL_SALT_LENGTH", "16"))
WORDLIST_PATH = os.getenv("PASSUTIL_WORDLIST_PATH") or None
DICTIONARY_STRICT = _env_bool("PASSUTIL_DICTIONARY_STRICT", "true")
LOG_LEVEL = os.getenv("PASSUTIL_LOG_LEVEL", "INFO")
