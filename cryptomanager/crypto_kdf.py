# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de passphrases y salts."""

from contextlib import contextmanager
from typing import Iterator, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from cryptomanager.errors import InternalError

# Costes fijados por cada ruta; la asimetría entre ambos es intencionada.
ENCRYPT_ITERATIONS = 100_000
HASH_ITERATIONS = 150_000
KEY_LENGTH = 32


def _secret_bytes(secret: Union[str, bytes]) -> bytes:
    """Normaliza la passphrase a bytes UTF-8."""

    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    try:
        return secret.encode("utf-8")
    except (AttributeError, UnicodeEncodeError) as exc:
        raise InternalError(f"No se pudo codificar el secreto en UTF-8: {exc}") from exc


def derive_key(
    secret: Union[str, bytes],
    salt: bytes,
    *,
    iterations: int,
    outlen: int = KEY_LENGTH,
) -> bytearray:
    """Deriva material de clave con PBKDF2-HMAC-SHA256.

    Args:
        secret (Union[str, bytes]): Passphrase o contraseña de entrada.
        salt (bytes): Salt aleatoria asociada a la operación.
        iterations (int): Número de iteraciones PBKDF2, mayor que cero.
        outlen (int): Longitud en bytes de la clave resultante.

    Returns:
        bytearray: Clave derivada en un búfer mutable que el llamador debe
        borrar con `wipe` al terminar.

    """

    if iterations < 1:
        raise InternalError(f"Número de iteraciones inválido: {iterations}.")
    if outlen < 1:
        raise InternalError(f"Longitud de clave inválida: {outlen}.")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=outlen,
        salt=bytes(salt),
        iterations=iterations,
    )
    try:
        return bytearray(kdf.derive(_secret_bytes(secret)))
    except (TypeError, ValueError) as exc:
        raise InternalError(f"PBKDF2 falló: {exc}") from exc


def wipe(buffer: bytearray) -> None:
    """Sobrescribe con ceros un búfer sensible."""

    for index in range(len(buffer)):
        buffer[index] = 0


@contextmanager
def scoped_key(
    secret: Union[str, bytes],
    salt: bytes,
    *,
    iterations: int,
    outlen: int = KEY_LENGTH,
) -> Iterator[bytearray]:
    """Deriva una clave válida sólo dentro del bloque `with`.

    El búfer se pone a cero al salir, también cuando el bloque lanza una
    excepción.

    """

    key = derive_key(secret, salt, iterations=iterations, outlen=outlen)
    try:
        yield key
    finally:
        wipe(key)
