# --------------------------------------------------------------
# File: random_source.py
# Description: Generación de bytes aleatorios criptográficamente seguros.
# --------------------------------------------------------------
"""Fuente de aleatoriedad para salts y vectores de inicialización."""

import os

from cryptomanager.errors import InternalError


def random_bytes(length: int) -> bytes:
    """Genera `length` bytes aleatorios desde el CSPRNG del sistema operativo.

    Args:
        length (int): Número de bytes solicitados, mayor que cero.

    Returns:
        bytes: Secuencia aleatoria de la longitud pedida.

    Raises:
        InternalError: Si la longitud no es válida o la fuente de entropía
            no está disponible.

    """

    if length <= 0:
        raise InternalError(f"Longitud aleatoria inválida: {length}.")
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise InternalError(f"Fuente de entropía no disponible: {exc}") from exc
