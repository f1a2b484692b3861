# --------------------------------------------------------------
# File: test_compare.py
# Description: Pruebas de la comparación en tiempo constante.
# --------------------------------------------------------------

import pytest

from cryptomanager.compare import fixed_time_equals


def test_equal_sequences():
    assert fixed_time_equals(b"\x00" * 32, b"\x00" * 32)
    assert fixed_time_equals(bytearray(b"abc"), b"abc")


@pytest.mark.parametrize("position", [0, 15, 31])
def test_single_byte_difference(position):
    """Cualquier byte distinto, en cualquier posición, rompe la igualdad.

    Args:
        position (int): Índice del byte alterado.
    """
    left = bytes(32)
    right = bytearray(32)
    right[position] = 1
    assert not fixed_time_equals(left, bytes(right))


def test_length_mismatch_is_not_equal():
    assert not fixed_time_equals(b"abc", b"abcd")
    assert not fixed_time_equals(b"", b"a")


@pytest.mark.parametrize("other", [None, "abc", 123])
def test_non_bytes_input_is_not_equal(other):
    """Entradas que no son bytes nunca se consideran iguales."""
    assert not fixed_time_equals(b"abc", other)
    assert not fixed_time_equals(other, b"abc")
