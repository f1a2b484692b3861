# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores expuesta por las operaciones criptográficas.
# --------------------------------------------------------------
"""Excepciones que describen por qué falló una operación del núcleo."""

__all__ = [
    "CryptoManagerError",
    "DecodeError",
    "IntegrityError",
    "CipherError",
    "InternalError",
]


class CryptoManagerError(Exception):
    """Error base de las operaciones de cifrado y hash.

    Attributes:
        kind (str): Categoría estable del error para la capa que lo presenta.
        message (str): Causa legible asociada al fallo.

    """

    kind = "CryptoManagerError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        """Devuelve la categoría y la causa en una sola línea."""

        return f"{self.kind}: {self.message}"


class DecodeError(CryptoManagerError):
    """El paquete no es Base64 válido o su longitud no encaja con el formato."""

    kind = "DecodeError"


class IntegrityError(CryptoManagerError):
    """La etiqueta HMAC no coincide: clave incorrecta o datos manipulados."""

    kind = "IntegrityError"


class CipherError(CryptoManagerError):
    """Fallo de relleno o de alineación de bloque al descifrar."""

    kind = "CipherError"


class InternalError(CryptoManagerError):
    """Fallo inesperado en las primitivas subyacentes."""

    kind = "InternalError"
