# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y la aleatoriedad.
# --------------------------------------------------------------

import importlib
from typing import Callable, Iterator

import pytest

_ENV_VARS = (
    "PASSUTIL_MAX_ATTEMPTS",
    "PASSUTIL_SALT_LENGTH",
    "PASSUTIL_WORDLIST_PATH",
    "PASSUTIL_DICTIONARY_STRICT",
    "PASSUTIL_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Elimina variables PASSUTIL_* y recarga passutil.config en cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    import passutil.config as config_module

    importlib.reload(config_module)

    yield

    importlib.reload(config_module)


@pytest.fixture
def fixed_source() -> Callable[[bytes], Callable[[int], bytes]]:
    """Construye fuentes de bytes deterministas que repiten un patrón.

    Returns:
        Callable: Fábrica que recibe el patrón y devuelve la fuente.
    """

    def factory(pattern: bytes) -> Callable[[int], bytes]:
        def source(count: int) -> bytes:
            return (pattern * (count // len(pattern) + 1))[:count]

        return source

    return factory
