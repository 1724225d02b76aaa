"""
bn254/proof.py

This module composes the point and field encoders into the artifacts consumed on-chain:
    proof       - G1(pi_a) || G2(pi_b) || G1(pi_c)                          (256 bytes)
    public      - u32(N) || Fr[0] || ... || Fr[N-1]                         (4 + 32N bytes)
    vk          - G1(alpha) || G2(beta) || G2(gamma) || G2(delta) || u32(len(IC)) || G1(IC[i])...

The encode* functions return lowercase hex without a 0x prefix, the *Bytes variants raw bytes.
Encoding is all-or-nothing, the first failing component aborts the call.

Example:
    You can use this as a module:
        from bn254.proof import encodeProof, encodePublic, encodeVk

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence

from bn254.constants import ProofWord
from bn254.errors import EncodingError, MissingField, NotAnArray
from bn254.field import field_to_be32, u32be
from bn254.literal import shape_of
from bn254.points import encode_g1, encode_g2
from bn254.utils import encLog
from chainlogger.logger import getLogger

logger = getLogger()


def _field(obj, key: str):
    if not isinstance(obj, Mapping):
        raise MissingField(f'expected an object with "{key}", got {shape_of(obj)}', label=key, shape=shape_of(obj))
    if key not in obj:
        raise MissingField(f'missing field "{key}"', label=key)
    return obj[key]

def _expect_array(value, label: str) -> Sequence:
    # str/bytes are sequences too, but never a list of signals
    if not isinstance(value, (list, tuple)):
        raise NotAnArray(f'{label} must be an array, got {shape_of(value)}', shape=shape_of(value))
    return value


def encodeProofBytes(proof) -> bytes:
    out = (
        encode_g1(_field(proof, 'pi_a'), 'pi_a')
        + encode_g2(_field(proof, 'pi_b'), 'pi_b')
        + encode_g1(_field(proof, 'pi_c'), 'pi_c')
    )
    return ProofWord.serialize(out)

def encodeProof(proof) -> str:
    """
    Encode a snarkjs proof object ({"pi_a", "pi_b", "pi_c"}) into 256 bytes of hex.
    """
    out = encodeProofBytes(proof).hex()
    encLog(logger, 'proof', 'encodeProof', f'{len(out) // 2} bytes', 'debug')
    return out

def encodePublicBytes(publicSignals) -> bytes:
    signals = _expect_array(publicSignals, 'public signals')
    chunks = []
    for i, value in enumerate(signals):
        try:
            chunks.append(field_to_be32(value))
        except EncodingError as e:
            e.at(label='public', index=i)
            raise
    return u32be(len(signals)) + b''.join(chunks)

def encodePublic(publicSignals) -> str:
    """
    Encode the ordered public input list, order is the one the circuit declares.
    """
    out = encodePublicBytes(publicSignals).hex()
    encLog(logger, 'public', 'encodePublic', f'{len(publicSignals)} signals, {len(out) // 2} bytes', 'debug')
    return out

def encodeVkBytes(vk) -> bytes:
    out = b''.join([
        encode_g1(_field(vk, 'vk_alpha_1'), 'vk_alpha_1'),
        encode_g2(_field(vk, 'vk_beta_2'), 'vk_beta_2'),
        encode_g2(_field(vk, 'vk_gamma_2'), 'vk_gamma_2'),
        encode_g2(_field(vk, 'vk_delta_2'), 'vk_delta_2')
    ])
    ic = _expect_array(_field(vk, 'IC'), 'IC')
    out += u32be(len(ic))
    for i, point in enumerate(ic):
        out += encode_g1(point, f'IC[{i}]')
    return out

def encodeVk(vk) -> str:
    """
    Encode a snarkjs verification key. Same point conventions as the proof.
    """
    out = encodeVkBytes(vk).hex()
    encLog(logger, 'vk', 'encodeVk', f'{len(out) // 2} bytes', 'debug')
    return out
