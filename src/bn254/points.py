"""
bn254/points.py

This module encodes G1 and G2 points given in the snarkjs projective layout.

Only affine (z = 1) and infinity (z = 0) points are accepted, no normalization is done.
Infinity is written as all-zero coordinates, there is no flag byte.

G2 coordinates are Fp2 elements [c0, c1], the verifier reads them as c1 || c0.

Example:
    You can use this as a module:
        from bn254.points import encode_g1, encode_g2

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from bn254.constants import G1_INFINITY, G2_INFINITY, G1Word, G2Word
from bn254.errors import EncodingError, InvalidPointFormat, MalformedExtensionField, NonAffinePoint
from bn254.field import coordinate_to_be32
from bn254.literal import shape_of, to_int
from bn254.utils import encLog
from chainlogger.logger import getLogger

logger = getLogger()


def _is_seq(value) -> bool:
    return isinstance(value, (list, tuple))

def _parse(value, label: str) -> int:
    try:
        return to_int(value)
    except EncodingError as e:
        e.at(label=label)
        raise

def encode_g1(point, label: str) -> bytes:
    """
    [x, y, z] -> x || y (64 bytes).
    """
    if not _is_seq(point) or len(point) != 3:
        raise InvalidPointFormat(f'invalid G1 point format ({shape_of(point)})', label=label, shape=shape_of(point))
    z = _parse(point[2], f'{label}.z')
    if z == 0:
        # x, y deliberately not inspected
        encLog(logger, label, 'encode_g1', 'point at infinity', 'debug')
        return G1_INFINITY
    if z != 1:
        raise NonAffinePoint(f'non-affine G1 point (z={z})', label=label, value=z)
    out = coordinate_to_be32(point[0], f'{label}.x') + coordinate_to_be32(point[1], f'{label}.y')
    return G1Word.serialize(out)

def encode_g2(point, label: str) -> bytes:
    """
    [[x0, x1], [y0, y1], [z0, z1]] -> x1 || x0 || y1 || y0 (128 bytes).
    """
    if not _is_seq(point) or len(point) != 3:
        raise InvalidPointFormat(f'invalid G2 point format ({shape_of(point)})', label=label, shape=shape_of(point))
    x, y, z = point
    if not (_is_seq(x) and _is_seq(y) and _is_seq(z)):
        raise InvalidPointFormat(
            f'invalid G2 format - coordinates must be arrays ({shape_of(x)}, {shape_of(y)}, {shape_of(z)})',
            label=label
        )
    if len(z) != 2:
        raise MalformedExtensionField(f'invalid G2 Fp2 format - z must have 2 elements ({shape_of(z)})', label=label)

    z0 = _parse(z[0], f'{label}.z0')
    z1 = _parse(z[1], f'{label}.z1')
    if z0 == 0 and z1 == 0:
        encLog(logger, label, 'encode_g2', 'point at infinity', 'debug')
        return G2_INFINITY
    if z0 != 1 or z1 != 0:
        raise NonAffinePoint(f'non-affine G2 point (z=[{z0}, {z1}])', label=label, value=(z0, z1))

    if len(x) != 2 or len(y) != 2:
        raise MalformedExtensionField(
            f'invalid G2 Fp2 format - must have 2 elements ({shape_of(x)}, {shape_of(y)})',
            label=label
        )
    # Range check all four components before emitting anything
    x0 = coordinate_to_be32(x[0], f'{label}.x0')
    x1 = coordinate_to_be32(x[1], f'{label}.x1')
    y0 = coordinate_to_be32(y[0], f'{label}.y0')
    y1 = coordinate_to_be32(y[1], f'{label}.y1')
    return G2Word.serialize(x1 + x0 + y1 + y0)
