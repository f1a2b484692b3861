# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la configuración de costes PBKDF2.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from cryptomanager.config import CryptoSettings, load_settings


def test_defaults_keep_asymmetric_costs(monkeypatch):
    """Sin variables de entorno se usan 100.000 y 150.000 iteraciones."""
    monkeypatch.delenv("CRYPTOMANAGER_ENCRYPT_ITERATIONS", raising=False)
    monkeypatch.delenv("CRYPTOMANAGER_HASH_ITERATIONS", raising=False)
    settings = load_settings()
    assert settings.encrypt_iterations == 100_000
    assert settings.hash_iterations == 150_000


def test_environment_can_raise_costs(monkeypatch):
    monkeypatch.setenv("CRYPTOMANAGER_ENCRYPT_ITERATIONS", "250000")
    monkeypatch.setenv("CRYPTOMANAGER_HASH_ITERATIONS", "300000")
    settings = load_settings()
    assert settings.encrypt_iterations == 250_000
    assert settings.hash_iterations == 300_000


@pytest.mark.parametrize(
    "name, value",
    [
        ("CRYPTOMANAGER_ENCRYPT_ITERATIONS", "99999"),
        ("CRYPTOMANAGER_HASH_ITERATIONS", "100000"),
        ("CRYPTOMANAGER_HASH_ITERATIONS", "muchas"),
    ],
)
def test_environment_below_floor_is_rejected(monkeypatch, name, value):
    """Valores por debajo del suelo o no numéricos no se aceptan.

    Args:
        name (str): Variable de entorno a fijar.
        value (str): Valor inválido.
    """
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_immutable():
    settings = CryptoSettings()
    with pytest.raises(ValidationError):
        settings.encrypt_iterations = 200_000
