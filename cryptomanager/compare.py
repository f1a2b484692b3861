# --------------------------------------------------------------
# File: compare.py
# Description: Comparación de secuencias de bytes en tiempo constante.
# --------------------------------------------------------------
"""Comparación resistente a ataques de temporización."""

from cryptography.hazmat.primitives import constant_time

_BYTES_LIKE = (bytes, bytearray, memoryview)


def fixed_time_equals(left: bytes, right: bytes) -> bool:
    """Compara dos secuencias sin revelar la posición de la primera diferencia.

    La longitud ya es pública por el formato del paquete, así que las
    longitudes distintas se rechazan tras una comprobación preliminar
    constante. Con igual longitud se recorren todos los bytes.

    Args:
        left (bytes): Valor esperado.
        right (bytes): Valor recibido.

    Returns:
        bool: True si ambas secuencias son idénticas.

    """

    if not isinstance(left, _BYTES_LIKE) or not isinstance(right, _BYTES_LIKE):
        return False
    left, right = bytes(left), bytes(right)
    if len(left) != len(right):
        return False
    return constant_time.bytes_eq(left, right)
