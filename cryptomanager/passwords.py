# --------------------------------------------------------------
# File: passwords.py
# Description: Hash y verificación de contraseñas con PBKDF2 de alto coste.
# --------------------------------------------------------------
"""Funciones para almacenar credenciales como `salt | hash` en Base64."""

from cryptomanager.compare import fixed_time_equals
from cryptomanager.crypto_kdf import HASH_ITERATIONS, scoped_key
from cryptomanager.errors import CryptoManagerError
from cryptomanager.log import get_logger
from cryptomanager.models import SALT_SIZE, PasswordHashPackage
from cryptomanager.random_source import random_bytes

logger = get_logger(__name__)


def hash_password(password: str, *, iterations: int = HASH_ITERATIONS) -> str:
    """Genera el hash almacenable de una contraseña.

    Args:
        password (str): Contraseña en claro.
        iterations (int): Coste PBKDF2 de la ruta de contraseñas.

    Returns:
        str: Paquete `salt(16) | hash(32)` codificado en Base64.

    """

    salt = random_bytes(SALT_SIZE)
    with scoped_key(password, salt, iterations=iterations) as digest:
        package = PasswordHashPackage(salt=salt, digest=bytes(digest))
    return package.to_b64()


def verify_password(password: str, stored: str, *, iterations: int = HASH_ITERATIONS) -> bool:
    """Comprueba una contraseña contra un hash almacenado.

    Nunca lanza excepciones: un valor almacenado corrupto o con otro formato
    equivale a una contraseña incorrecta.

    Args:
        password (str): Contraseña candidata.
        stored (str): Paquete Base64 producido por `hash_password`.
        iterations (int): Coste PBKDF2 usado al generar el hash.

    Returns:
        bool: True si la contraseña coincide.

    """

    try:
        package = PasswordHashPackage.from_b64(stored)
        with scoped_key(password, package.salt, iterations=iterations) as candidate:
            return fixed_time_equals(package.digest, candidate)
    except CryptoManagerError as exc:
        logger.debug("verify_password rechazado: %s", exc.kind)
        return False
    except (TypeError, ValueError):
        logger.debug("verify_password rechazado: entrada no válida")
        return False
