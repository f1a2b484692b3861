# --------------------------------------------------------------
# File: models.py
# Description: Modelos de los paquetes binarios producidos por el núcleo.
# --------------------------------------------------------------
"""Modelos Pydantic que fijan el formato de bytes de cada paquete."""

import base64
import binascii

from pydantic import BaseModel, ConfigDict, field_validator

from cryptomanager.errors import DecodeError

SALT_SIZE = 16
IV_SIZE = 16
TAG_SIZE = 32
HASH_SIZE = 32
BLOCK_SIZE = 16

MIN_ENVELOPE_SIZE = SALT_SIZE + IV_SIZE + TAG_SIZE
PASSWORD_PACKAGE_SIZE = SALT_SIZE + HASH_SIZE


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64decode(value: str) -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Raises:
        DecodeError: Si el valor no es texto Base64 válido.

    """

    if not isinstance(value, str):
        raise DecodeError("El paquete debe ser una cadena Base64.")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Base64 inválido: {exc}") from exc


def _check_size(name: str, value: bytes, size: int) -> bytes:
    if len(value) != size:
        raise ValueError(f"{name} debe medir {size} bytes, no {len(value)}.")
    return value


class EncryptionPackage(BaseModel):
    """Sobre autenticado `salt(16) | iv(16) | ciphertext(n) | tag(32)`.

    Attributes:
        salt (bytes): Salt usada en la derivación de la clave.
        iv (bytes): Vector de inicialización del modo CBC.
        ciphertext (bytes): Datos cifrados, múltiplo positivo de 16 bytes.
        tag (bytes): HMAC-SHA256 sobre salt, iv y ciphertext.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    iv: bytes
    ciphertext: bytes
    tag: bytes

    @field_validator("salt")
    @classmethod
    def _salt_size(cls, value: bytes) -> bytes:
        return _check_size("salt", value, SALT_SIZE)

    @field_validator("iv")
    @classmethod
    def _iv_size(cls, value: bytes) -> bytes:
        return _check_size("iv", value, IV_SIZE)

    @field_validator("tag")
    @classmethod
    def _tag_size(cls, value: bytes) -> bytes:
        return _check_size("tag", value, TAG_SIZE)

    @field_validator("ciphertext")
    @classmethod
    def _ciphertext_blocks(cls, value: bytes) -> bytes:
        if not value or len(value) % BLOCK_SIZE:
            raise ValueError("ciphertext debe ser un múltiplo positivo de 16 bytes.")
        return value

    @property
    def authenticated_data(self) -> bytes:
        """Bytes cubiertos por la etiqueta, en el orden en que se autentican."""

        return self.salt + self.iv + self.ciphertext

    def to_bytes(self) -> bytes:
        return self.authenticated_data + self.tag

    def to_b64(self) -> str:
        return b64encode(self.to_bytes())

    @classmethod
    def from_bytes(cls, raw: bytes) -> "EncryptionPackage":
        """Separa los campos de un sobre decodificado.

        Raises:
            DecodeError: Si la longitud no encaja con el formato.

        """

        if len(raw) < MIN_ENVELOPE_SIZE:
            raise DecodeError(
                f"Paquete demasiado corto: {len(raw)} bytes, mínimo {MIN_ENVELOPE_SIZE}."
            )
        body = raw[SALT_SIZE + IV_SIZE : -TAG_SIZE]
        if not body or len(body) % BLOCK_SIZE:
            raise DecodeError("La longitud del ciphertext no es múltiplo positivo de 16.")
        return cls(
            salt=raw[:SALT_SIZE],
            iv=raw[SALT_SIZE : SALT_SIZE + IV_SIZE],
            ciphertext=body,
            tag=raw[-TAG_SIZE:],
        )

    @classmethod
    def from_b64(cls, value: str) -> "EncryptionPackage":
        return cls.from_bytes(b64decode(value))


class PasswordHashPackage(BaseModel):
    """Hash de contraseña `salt(16) | hash(32)`."""

    model_config = ConfigDict(frozen=True)

    salt: bytes
    digest: bytes

    @field_validator("salt")
    @classmethod
    def _salt_size(cls, value: bytes) -> bytes:
        return _check_size("salt", value, SALT_SIZE)

    @field_validator("digest")
    @classmethod
    def _digest_size(cls, value: bytes) -> bytes:
        return _check_size("hash", value, HASH_SIZE)

    def to_bytes(self) -> bytes:
        return self.salt + self.digest

    def to_b64(self) -> str:
        return b64encode(self.to_bytes())

    @classmethod
    def from_bytes(cls, raw: bytes) -> "PasswordHashPackage":
        if len(raw) != PASSWORD_PACKAGE_SIZE:
            raise DecodeError(
                f"Hash almacenado de {len(raw)} bytes, se esperaban {PASSWORD_PACKAGE_SIZE}."
            )
        return cls(salt=raw[:SALT_SIZE], digest=raw[SALT_SIZE:])

    @classmethod
    def from_b64(cls, value: str) -> "PasswordHashPackage":
        return cls.from_bytes(b64decode(value))
