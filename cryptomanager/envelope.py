# --------------------------------------------------------------
# File: envelope.py
# Description: Sobre autenticado AES-256-CBC + HMAC-SHA256 (encrypt-then-MAC).
# --------------------------------------------------------------
"""Cifrado y descifrado de texto bajo una passphrase.

Formato del paquete (Base64)::

    SALT(16) | IV(16) | CIPHERTEXT(n * 16) | HMAC(32)

La etiqueta cubre salt, IV y ciphertext como un único mensaje y se comprueba
antes de cualquier intento de descifrado.
"""

from cryptomanager.compare import fixed_time_equals
from cryptomanager.crypto_kdf import ENCRYPT_ITERATIONS, scoped_key
from cryptomanager.crypto_sym import aes_cbc_decrypt, aes_cbc_encrypt, hmac_sha256
from cryptomanager.errors import CipherError, IntegrityError, InternalError
from cryptomanager.log import get_logger
from cryptomanager.models import IV_SIZE, SALT_SIZE, EncryptionPackage
from cryptomanager.random_source import random_bytes

logger = get_logger(__name__)


def encrypt(plaintext: str, secret: str, *, iterations: int = ENCRYPT_ITERATIONS) -> str:
    """Cifra texto UTF-8 y devuelve el sobre autenticado en Base64.

    Args:
        plaintext (str): Texto a proteger.
        secret (str): Passphrase de la que se deriva la clave.
        iterations (int): Coste PBKDF2 para la clave de cifrado.

    Returns:
        str: Paquete `salt | iv | ciphertext | tag` codificado en Base64.

    Raises:
        InternalError: Si el texto no es codificable o falla una primitiva.

    """

    try:
        data = plaintext.encode("utf-8")
    except (AttributeError, UnicodeEncodeError) as exc:
        raise InternalError(f"No se pudo codificar el texto en UTF-8: {exc}") from exc

    salt = random_bytes(SALT_SIZE)
    with scoped_key(secret, salt, iterations=iterations) as key:
        iv = random_bytes(IV_SIZE)
        ciphertext = aes_cbc_encrypt(key, iv, data)
        tag = hmac_sha256(key, salt, iv, ciphertext)

    package = EncryptionPackage(salt=salt, iv=iv, ciphertext=ciphertext, tag=tag)
    logger.debug("encrypt ok: %d bytes en claro, %d de ciphertext", len(data), len(ciphertext))
    return package.to_b64()


def decrypt(package: str, secret: str, *, iterations: int = ENCRYPT_ITERATIONS) -> str:
    """Verifica y descifra un sobre generado por `encrypt`.

    Args:
        package (str): Paquete Base64 `salt | iv | ciphertext | tag`.
        secret (str): Passphrase usada al cifrar.
        iterations (int): Coste PBKDF2 usado al cifrar.

    Returns:
        str: Texto original.

    Raises:
        DecodeError: Base64 inválido o longitud incompatible con el formato.
        IntegrityError: La etiqueta no coincide (clave errónea o datos alterados).
        CipherError: Relleno inválido o texto no UTF-8 tras descifrar.

    """

    envelope = EncryptionPackage.from_b64(package)

    with scoped_key(secret, envelope.salt, iterations=iterations) as key:
        expected = hmac_sha256(key, envelope.salt, envelope.iv, envelope.ciphertext)
        if not fixed_time_equals(expected, envelope.tag):
            logger.warning("decrypt rechazado: etiqueta HMAC no coincide")
            raise IntegrityError("HMAC no coincide: clave incorrecta o datos manipulados.")
        data = aes_cbc_decrypt(key, envelope.iv, envelope.ciphertext)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CipherError(f"El texto descifrado no es UTF-8 válido: {exc}") from exc
