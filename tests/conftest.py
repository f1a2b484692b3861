# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con costes PBKDF2 reducidos para las pruebas.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from api import services
from cryptomanager.config import CryptoSettings
from cryptomanager.manager import CryptoManager

FAST_ENCRYPT_ITERATIONS = 1_000
FAST_HASH_ITERATIONS = 1_500


@pytest.fixture
def fast_settings() -> CryptoSettings:
    """Configuración con pocas iteraciones que omite los suelos de producción.

    Returns:
        CryptoSettings: Costes reducidos para que las pruebas sean rápidas.
    """
    return CryptoSettings.model_construct(
        encrypt_iterations=FAST_ENCRYPT_ITERATIONS,
        hash_iterations=FAST_HASH_ITERATIONS,
    )


@pytest.fixture
def manager(fast_settings) -> CryptoManager:
    """Fachada ligada a la configuración rápida."""
    return CryptoManager(fast_settings)


@pytest.fixture
def fast_services(manager) -> Iterator[None]:
    """Inyecta la fachada rápida en la capa de servicios y la restaura al final.

    Args:
        manager (CryptoManager): Fachada con costes reducidos.

    Returns:
        Iterator[None]: Control del fixture durante la ejecución de cada test.
    """
    services.use_manager(manager)
    yield
    services.use_manager(None)
