# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de coste configurables desde el entorno o un .env.
# --------------------------------------------------------------
"""Configuración de iteraciones PBKDF2 con suelos mínimos documentados."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from cryptomanager.crypto_kdf import ENCRYPT_ITERATIONS, HASH_ITERATIONS

load_dotenv()

# Los valores por defecto son también el mínimo aceptado.
MIN_ENCRYPT_ITERATIONS = ENCRYPT_ITERATIONS
MIN_HASH_ITERATIONS = HASH_ITERATIONS


class CryptoSettings(BaseModel):
    """Costes de derivación usados por cada ruta.

    Attributes:
        encrypt_iterations (int): Iteraciones PBKDF2 para claves de cifrado.
        hash_iterations (int): Iteraciones PBKDF2 para hashes de contraseña.

    """

    model_config = ConfigDict(frozen=True)

    encrypt_iterations: int = ENCRYPT_ITERATIONS
    hash_iterations: int = HASH_ITERATIONS

    @field_validator("encrypt_iterations")
    @classmethod
    def _encrypt_floor(cls, value: int) -> int:
        if value < MIN_ENCRYPT_ITERATIONS:
            raise ValueError(f"encrypt_iterations debe ser >= {MIN_ENCRYPT_ITERATIONS}.")
        return value

    @field_validator("hash_iterations")
    @classmethod
    def _hash_floor(cls, value: int) -> int:
        if value < MIN_HASH_ITERATIONS:
            raise ValueError(f"hash_iterations debe ser >= {MIN_HASH_ITERATIONS}.")
        return value


def load_settings() -> CryptoSettings:
    """Construye la configuración a partir de las variables de entorno.

    Returns:
        CryptoSettings: Costes validados contra sus suelos mínimos.

    """

    return CryptoSettings(
        encrypt_iterations=os.getenv("CRYPTOMANAGER_ENCRYPT_ITERATIONS", ENCRYPT_ITERATIONS),
        hash_iterations=os.getenv("CRYPTOMANAGER_HASH_ITERATIONS", HASH_ITERATIONS),
    )
