"""
bn254/constants.py

This module stores the BN254 moduli and the fixed widths of the verifier's wire format.

Example:
    You can use this as a module:
        from bn254.constants import BN254_FR, BN254_FQ (, *)

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from rlp.sedes import Binary

# Scalar field (public inputs)
BN254_FR = 21888242871839275222246405745257275088548364400416034343698204186575808495617
# Base field (point coordinates)
BN254_FQ = 21888242871839275222246405745257275088696311157297823662689037894645226208583

FIELD_SIZE = 32
COUNT_SIZE = 4
G1_SIZE = 2 * FIELD_SIZE
G2_SIZE = 4 * FIELD_SIZE
PROOF_SIZE = G1_SIZE + G2_SIZE + G1_SIZE

# Fixed-width sedes, serialize() raises on any length mismatch
FieldWord = Binary.fixed_length(FIELD_SIZE, allow_empty=False)
CountWord = Binary.fixed_length(COUNT_SIZE, allow_empty=False)
G1Word = Binary.fixed_length(G1_SIZE, allow_empty=False)
G2Word = Binary.fixed_length(G2_SIZE, allow_empty=False)
ProofWord = Binary.fixed_length(PROOF_SIZE, allow_empty=False)

G1_INFINITY = b'\x00' * G1_SIZE
G2_INFINITY = b'\x00' * G2_SIZE
