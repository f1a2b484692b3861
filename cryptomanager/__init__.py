# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las operaciones criptográficas del paquete.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptomanager` y reexporta su interfaz pública."""

from cryptomanager.envelope import decrypt, encrypt
from cryptomanager.errors import (
    CipherError,
    CryptoManagerError,
    DecodeError,
    IntegrityError,
    InternalError,
)
from cryptomanager.manager import CryptoManager
from cryptomanager.passwords import hash_password, verify_password

__all__ = [
    "CryptoManager",
    "encrypt",
    "decrypt",
    "hash_password",
    "verify_password",
    "CryptoManagerError",
    "DecodeError",
    "IntegrityError",
    "CipherError",
    "InternalError",
]
