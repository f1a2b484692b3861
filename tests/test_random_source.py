# --------------------------------------------------------------
# File: test_random_source.py
# Description: Pruebas de la fuente de bytes aleatorios.
# --------------------------------------------------------------

import pytest

from cryptomanager import random_source
from cryptomanager.errors import InternalError


def test_random_bytes_length_and_uniqueness():
    """Los valores generados tienen la longitud pedida y no se repiten."""
    seen = set()
    for _ in range(200):
        value = random_source.random_bytes(16)
        assert len(value) == 16
        assert value not in seen
        seen.add(value)


@pytest.mark.parametrize("length", [0, -1])
def test_random_bytes_rejects_invalid_length(length):
    with pytest.raises(InternalError):
        random_source.random_bytes(length)


def test_entropy_failure_is_internal_error(monkeypatch):
    """Un fallo del CSPRNG se reporta como InternalError."""

    def _broken(_n):
        raise OSError("sin entropía")

    monkeypatch.setattr(random_source.os, "urandom", _broken)
    with pytest.raises(InternalError, match="entropía"):
        random_source.random_bytes(16)
