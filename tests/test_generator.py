# --------------------------------------------------------------
# File: test_generator.py
# Description: Pruebas de la generación de contraseñas y del bucle acotado por puntuación.
# --------------------------------------------------------------

import importlib

import pytest

from passutil.errors import (
    ExhaustedError,
    RandomSourceError,
    TooShortError,
    UnratableScoreError,
)
from passutil.generator import ALPHABET, generate, generate_with_minimum_score
from passutil.scorer import score


def test_alphabet_contains_every_class():
    """Comprueba que el alfabeto fijo cubre las cuatro clases de caracteres.

    Returns:
        None: Las aserciones revisan cada clase por separado.
    """
    assert any(c.islower() for c in ALPHABET)
    assert any(c.isupper() for c in ALPHABET)
    assert any(c.isdigit() for c in ALPHABET)
    assert "~" in ALPHABET and "!" in ALPHABET
    assert len(ALPHABET) == 87


@pytest.mark.parametrize("length", [1, 8, 33, 256])
def test_generate_length_and_alphabet(length):
    """Verifica longitud exacta y pertenencia de cada carácter al alfabeto.

    Args:
        length (int): Longitud solicitada.

    Returns:
        None: Las aserciones comparan la contraseña con el alfabeto.
    """
    password = generate(length)
    assert password.length == length
    assert len(password.text) == length
    assert all(char in ALPHABET for char in password.text)


def test_generate_maps_bytes_with_modulo(fixed_source):
    """Valida la proyección `byte % len(ALPHABET)` en orden de extracción.

    Args:
        fixed_source (Callable): Fábrica de fuentes deterministas.

    Returns:
        None: Las aserciones comparan carácter a carácter.
    """
    source = fixed_source(bytes([0, 86, 87, 255]))
    password = generate(4, source=source)
    assert password.text == ALPHABET[0] + ALPHABET[86] + ALPHABET[0] + ALPHABET[255 % 87]


def test_generate_draws_exactly_length_bytes():
    """Asegura que se piden a la fuente tantos bytes como caracteres.

    Returns:
        None: Las aserciones revisan las llamadas registradas.
    """
    requested = []

    def source(count):
        requested.append(count)
        return bytes(count)

    generate(12, source=source)
    assert requested == [12]


def test_generate_rejects_non_positive_length():
    """Comprueba que una longitud menor que 1 sea rechazada.

    Returns:
        None: Se espera ValueError.
    """
    with pytest.raises(ValueError):
        generate(0)


@pytest.mark.parametrize("error", [OSError("sin entropía"), NotImplementedError("sin urandom")])
def test_generate_wraps_random_source_failure(error):
    """Garantiza que un fallo de la fuente segura no se oculte.

    Args:
        error (Exception): Excepción lanzada por la fuente simulada.

    Returns:
        None: Se espera RandomSourceError.
    """

    def source(count):
        raise error

    with pytest.raises(RandomSourceError):
        generate(10, source=source)


def test_generate_rejects_short_read():
    """Verifica que una lectura incompleta de la fuente se trate como error.

    Returns:
        None: Se espera RandomSourceError.
    """
    with pytest.raises(RandomSourceError):
        generate(10, source=lambda count: b"\x00" * (count - 1))


def test_minimum_score_four_is_recomputable():
    """Comprueba que la contraseña devuelta alcance de verdad la puntuación 4.

    Returns:
        None: Las aserciones recalculan la puntuación por separado.
    """
    for _ in range(20):
        password = generate_with_minimum_score(10, 4)
        assert password.length == 10
        assert score(password).score == 4


def test_minimum_score_exhausts(fixed_source):
    """Verifica que el bucle termine con ExhaustedError al agotar intentos.

    Args:
        fixed_source (Callable): Fábrica de fuentes deterministas.

    Returns:
        None: Las aserciones revisan los datos de la excepción.
    """
    only_lowercase = fixed_source(bytes([ALPHABET.index("a")]))
    with pytest.raises(ExhaustedError) as excinfo:
        generate_with_minimum_score(10, 2, max_attempts=5, source=only_lowercase)
    assert excinfo.value.attempts == 5
    assert excinfo.value.best_score == 1


def test_minimum_score_uses_configured_attempts(monkeypatch, fixed_source):
    """Comprueba que PASSUTIL_MAX_ATTEMPTS fije el límite por defecto.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar el entorno.
        fixed_source (Callable): Fábrica de fuentes deterministas.

    Returns:
        None: Las aserciones revisan el número de intentos.
    """
    monkeypatch.setenv("PASSUTIL_MAX_ATTEMPTS", "3")
    import passutil.config as config_module

    importlib.reload(config_module)

    with pytest.raises(ExhaustedError) as excinfo:
        generate_with_minimum_score(12, 4, source=fixed_source(b"\x00"))
    assert excinfo.value.attempts == 3


@pytest.mark.parametrize(
    "length, minimum, attempts, expected",
    [
        (10, 5, 10, UnratableScoreError),
        (10, -1, 10, UnratableScoreError),
        (1, 4, 10, TooShortError),
        (7, 0, 10, TooShortError),
        (10, 4, 0, ValueError),
    ],
)
def test_minimum_score_rejects_impossible_requests(length, minimum, attempts, expected):
    """Asegura que las peticiones imposibles fallen antes de iterar.

    Args:
        length (int): Longitud solicitada.
        minimum (int): Puntuación mínima solicitada.
        attempts (int): Límite de intentos.
        expected (type): Excepción esperada.

    Returns:
        None: Se espera la excepción indicada.
    """
    with pytest.raises(expected):
        generate_with_minimum_score(length, minimum, max_attempts=attempts)
