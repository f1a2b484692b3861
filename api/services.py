# --------------------------------------------------------------
# File: services.py
# Description: Adaptador de frontera que traduce las operaciones a resultados ok/fallo.
# --------------------------------------------------------------
"""Funciones de la capa de servicios consumidas por la interfaz de usuario."""

from typing import Optional, Tuple

from cryptomanager.errors import CryptoManagerError
from cryptomanager.log import get_logger
from cryptomanager.manager import CryptoManager

logger = get_logger(__name__)

_MANAGER: Optional[CryptoManager] = None


def _manager() -> CryptoManager:
    """Devuelve la fachada configurada desde el entorno, creada una sola vez."""

    global _MANAGER
    if _MANAGER is None:
        _MANAGER = CryptoManager()
    return _MANAGER


def use_manager(manager: Optional[CryptoManager]) -> None:
    """Sustituye la fachada usada por el adaptador; `None` restaura la del entorno."""

    global _MANAGER
    _MANAGER = manager


def _clean(value):
    """Retira espacios sobrantes de un paquete pegado desde la interfaz."""

    return value.strip() if isinstance(value, str) else value


def encrypt_text(plaintext: str, secret: str) -> Tuple[bool, str, str]:
    """Cifra texto y adapta el resultado al contrato ok/fallo.

    Args:
        plaintext (str): Texto a proteger.
        secret (str): Passphrase de cifrado.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje para la interfaz y
        paquete Base64 (vacío si hubo fallo).

    """

    try:
        package = _manager().encrypt(plaintext, secret)
    except CryptoManagerError as exc:
        logger.warning("encrypt falló: %s", exc.kind)
        return False, f"Encrypt failed: {exc.describe()}", ""
    return True, "Texto cifrado (AES-256-CBC + HMAC-SHA256).", package


def decrypt_text(package: str, secret: str) -> Tuple[bool, str, str]:
    """Descifra un paquete y adapta el resultado al contrato ok/fallo.

    Args:
        package (str): Paquete Base64 producido por `encrypt_text`.
        secret (str): Passphrase usada al cifrar.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje para la interfaz y
        texto descifrado (vacío si hubo fallo).

    """

    try:
        plaintext = _manager().decrypt(_clean(package), secret)
    except CryptoManagerError as exc:
        logger.warning("decrypt falló: %s", exc.kind)
        return False, f"Decrypt failed: {exc.describe()}", ""
    return True, "Paquete verificado y descifrado.", plaintext


def hash_secret(password: str) -> Tuple[bool, str, str]:
    """Genera el hash almacenable de una contraseña.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje y hash Base64.

    """

    try:
        stored = _manager().hash_password(password)
    except CryptoManagerError as exc:
        logger.warning("hash_password falló: %s", exc.kind)
        return False, f"HashPassword failed: {exc.describe()}", ""
    return True, "Hash PBKDF2-SHA256 generado.", stored


def verify_secret(password: str, stored: str) -> Tuple[bool, str, bool]:
    """Verifica una contraseña; la operación nunca falla.

    Returns:
        Tuple[bool, str, bool]: Siempre True como indicador de éxito, mensaje
        y resultado de la verificación.

    """

    match = _manager().verify_password(password, _clean(stored))
    msg = "La contraseña coincide." if match else "La contraseña no coincide."
    return True, msg, match
