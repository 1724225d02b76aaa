"""
zkp/utils/proof_casting.py

This module casts encoded verifier bytes back into snarkjs-like objects and maps byte offsets to fields.

It is the inverse of 'bn254.proof' and is used by the comparison tooling to name the first
diverging field. Infinity points decode to all-zero affine coordinates.

Example:
    You can use this as a module:
        from zkp.utils.proof_casting import decodeProof, decodePublic, proofLayout, locate

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from eth_utils import big_endian_to_int, decode_hex, remove_0x_prefix

from bn254.constants import COUNT_SIZE, FIELD_SIZE, G1_SIZE, G2_SIZE, PROOF_SIZE
from bn254.errors import InvalidLength, MalformedLiteral

Slot = tuple[int, int, str]


def hex_to_bytes(data: str | bytes) -> bytes:
    """
    Accept raw bytes or hex text (with or without 0x, surrounding whitespace ignored).
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    text = remove_0x_prefix(data.strip().lower())
    try:
        return decode_hex(text)
    except ValueError as e:
        raise MalformedLiteral(f'invalid hex string ({len(text)} chars)') from e

def bytes_to_hex(byte_data: bytes) -> str:
    return '0x' + byte_data.hex()

def _word(binary: bytes, offset: int) -> str:
    return str(big_endian_to_int(binary[offset:offset + FIELD_SIZE]))


def g1Layout(label: str, offset: int = 0) -> list[Slot]:
    return [
        (offset, FIELD_SIZE, f'{label}.x'),
        (offset + FIELD_SIZE, FIELD_SIZE, f'{label}.y')
    ]

def g2Layout(label: str, offset: int = 0) -> list[Slot]:
    # c1 precedes c0 on the wire
    return [
        (offset, FIELD_SIZE, f'{label}.x1'),
        (offset + FIELD_SIZE, FIELD_SIZE, f'{label}.x0'),
        (offset + 2 * FIELD_SIZE, FIELD_SIZE, f'{label}.y1'),
        (offset + 3 * FIELD_SIZE, FIELD_SIZE, f'{label}.y0')
    ]

def proofLayout() -> list[Slot]:
    return g1Layout('pi_a', 0) + g2Layout('pi_b', G1_SIZE) + g1Layout('pi_c', G1_SIZE + G2_SIZE)

def publicLayout(count: int) -> list[Slot]:
    slots = [(0, COUNT_SIZE, 'count')]
    for i in range(count):
        slots.append((COUNT_SIZE + i * FIELD_SIZE, FIELD_SIZE, f'public[{i}]'))
    return slots

def vkLayout(icCount: int) -> list[Slot]:
    slots = g1Layout('vk_alpha_1', 0)
    offset = G1_SIZE
    for name in ('vk_beta_2', 'vk_gamma_2', 'vk_delta_2'):
        slots += g2Layout(name, offset)
        offset += G2_SIZE
    slots.append((offset, COUNT_SIZE, 'IC.count'))
    offset += COUNT_SIZE
    for i in range(icCount):
        slots += g1Layout(f'IC[{i}]', offset)
        offset += G1_SIZE
    return slots

def locate(layout: list[Slot], byteOffset: int) -> str | None:
    """
    Name of the slot holding 'byteOffset', None when it lies past the layout.
    """
    for offset, size, name in layout:
        if offset <= byteOffset < offset + size:
            return name
    return None


def decodeProof(data: str | bytes) -> dict:
    binary = hex_to_bytes(data)
    if len(binary) != PROOF_SIZE:
        raise InvalidLength(f'proof must be {PROOF_SIZE} bytes, got {len(binary)}', value=len(binary))

    b = G1_SIZE
    return {
        'pi_a': [_word(binary, 0), _word(binary, 32)],
        'pi_b': [
            [_word(binary, b + 32), _word(binary, b)],
            [_word(binary, b + 96), _word(binary, b + 64)]
        ],
        'pi_c': [_word(binary, G1_SIZE + G2_SIZE), _word(binary, G1_SIZE + G2_SIZE + 32)]
    }

def decodePublic(data: str | bytes) -> list[str]:
    binary = hex_to_bytes(data)
    if len(binary) < COUNT_SIZE:
        raise InvalidLength(f'public inputs must be at least {COUNT_SIZE} bytes, got {len(binary)}', value=len(binary))
    count = big_endian_to_int(binary[:COUNT_SIZE])
    expected = COUNT_SIZE + FIELD_SIZE * count
    if len(binary) != expected:
        raise InvalidLength(f'public inputs declare {count} elements ({expected} bytes), got {len(binary)}', value=len(binary))
    return [_word(binary, COUNT_SIZE + i * FIELD_SIZE) for i in range(count)]
