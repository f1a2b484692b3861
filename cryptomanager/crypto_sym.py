# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-CBC y HMAC-SHA256 para el sobre autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico y autenticación de mensajes."""

from cryptography.hazmat.primitives import hashes, hmac, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptomanager.errors import CipherError, InternalError

BLOCK_SIZE = 16


def aes_cbc_encrypt(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con AES-CBC aplicando relleno PKCS#7.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        iv (bytes): Vector de inicialización de 128 bits.
        plaintext (bytes): Datos en claro, de cualquier longitud.

    Returns:
        bytes: Ciphertext cuya longitud es múltiplo positivo de 16.

    """

    try:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        return encryptor.update(padded) + encryptor.finalize()
    except (TypeError, ValueError) as exc:
        raise InternalError(f"Configuración de cifrado inválida: {exc}") from exc


def aes_cbc_decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra datos AES-CBC y retira el relleno PKCS#7.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        iv (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados alineados a bloque.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        CipherError: Si el ciphertext no está alineado o el relleno es inválido.

    """

    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise CipherError("El ciphertext no está alineado al tamaño de bloque.")
    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise CipherError(f"Relleno inválido: {exc}") from exc


def hmac_sha256(key: bytes, *chunks: bytes) -> bytes:
    """Calcula un único HMAC-SHA256 sobre la concatenación de los fragmentos.

    Args:
        key (bytes): Clave del HMAC.
        *chunks (bytes): Fragmentos que forman un mensaje continuo.

    Returns:
        bytes: Etiqueta de autenticación de 32 bytes.

    """

    mac = hmac.HMAC(key, hashes.SHA256())
    for chunk in chunks:
        mac.update(chunk)
    return mac.finalize()
