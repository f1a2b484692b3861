# --------------------------------------------------------------
# File: manager.py
# Description: Fachada con las cuatro operaciones públicas del núcleo.
# --------------------------------------------------------------
"""Punto de entrada único para cifrar, descifrar y gestionar contraseñas."""

from typing import Optional

from cryptomanager import envelope, passwords
from cryptomanager.config import CryptoSettings, load_settings


class CryptoManager:
    """Expone `encrypt`, `decrypt`, `hash_password` y `verify_password`.

    La instancia sólo guarda su configuración inmutable; cada llamada deriva
    su propio material de clave, por lo que puede compartirse entre hilos.

    Args:
        settings (Optional[CryptoSettings]): Costes PBKDF2; por defecto se
            leen del entorno con `load_settings`.

    """

    def __init__(self, settings: Optional[CryptoSettings] = None) -> None:
        self.settings = settings if settings is not None else load_settings()

    def encrypt(self, plaintext: str, secret: str) -> str:
        return envelope.encrypt(
            plaintext, secret, iterations=self.settings.encrypt_iterations
        )

    def decrypt(self, package: str, secret: str) -> str:
        return envelope.decrypt(
            package, secret, iterations=self.settings.encrypt_iterations
        )

    def hash_password(self, password: str) -> str:
        return passwords.hash_password(
            password, iterations=self.settings.hash_iterations
        )

    def verify_password(self, password: str, stored: str) -> bool:
        return passwords.verify_password(
            password, stored, iterations=self.settings.hash_iterations
        )
