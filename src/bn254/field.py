"""
bn254/field.py

This module serializes field elements to the fixed-width big-endian words of the verifier.

Example:
    You can use this as a module:
        from bn254.field import field_to_be32, coordinate_to_be32, u32be

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from eth_utils import int_to_big_endian
from rlp.exceptions import SerializationError

from bn254.constants import BN254_FQ, BN254_FR, FIELD_SIZE, FieldWord, CountWord
from bn254.errors import CoordinateOutOfRange, EncodingError, FieldElementOutOfRange, FieldWidthOverflow, InvalidLength
from bn254.literal import to_int


def be32(n: int) -> bytes:
    """
    Left-zero-padded 32 byte big-endian word. Never truncates.
    """
    try:
        return FieldWord.serialize(int_to_big_endian(n).rjust(FIELD_SIZE, b'\x00'))
    except SerializationError as e:
        raise FieldWidthOverflow(f'field element exceeds {FIELD_SIZE} bytes: {n}', value=n) from e

def field_to_be32(value) -> bytes:
    """
    Encode a scalar field element (public input).

    Accepts any numeric literal, requires 0 <= value < Fr.
    """
    n = to_int(value)
    if n >= BN254_FR:
        raise FieldElementOutOfRange(f'field element {n} >= modulus {BN254_FR}', value=n, modulus=BN254_FR)
    return be32(n)

def coordinate_to_be32(value, label: str) -> bytes:
    """
    Encode a base field coordinate of a curve point, requires 0 <= value < Fq.
    """
    try:
        n = to_int(value)
    except EncodingError as e:
        e.at(label=label)
        raise
    if n >= BN254_FQ:
        raise CoordinateOutOfRange(f'coordinate {n} >= modulus {BN254_FQ}', label=label, value=n, modulus=BN254_FQ)
    return be32(n)

def u32be(value: int) -> bytes:
    if not 0 <= value <= 0xffffffff:
        raise InvalidLength(f'value out of u32 range: {value}', value=value)
    return CountWord.serialize(value.to_bytes(4, 'big'))
