"""
compat/compare.py

This module compares the encoder output against the bytes of an independent reference encoder.

For every artifact (proof, public inputs, verification key) it reports both lengths,
content hashes, whether the bytes are identical and where they first diverge.

Example:
    You can run this module directly:
        $ python -m compat.compare --proof proof.json --public public.json \\
              --ref-proof proof.hex --ref-public public.hex [--vkey vkey.json --ref-vk vk.hex] [--json]
    Or as a module:
        from compat.compare import compareArtifact, buildReport

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from pathlib import Path
import argparse
import hashlib
import json
import sys

from eth_utils import keccak

from bn254.errors import EncodingError
from bn254.proof import encodeProofBytes, encodePublicBytes, encodeVkBytes
from bn254.utils import Settings, encLog
from chainlogger.logger import setupLogger
from zkp.utils.proof_casting import hex_to_bytes, locate, proofLayout, publicLayout, vkLayout


def contentHash(data: bytes, algo: str) -> str:
    if algo == 'sha256':
        return hashlib.sha256(data).hexdigest()
    if algo == 'keccak':
        return keccak(data).hex()
    raise ValueError(f'unsupported hash algorithm: {algo}')

def firstDiffNibble(ours: str, reference: str) -> int | None:
    """
    Index of the first differing hex digit. A strict prefix diverges where the shorter one ends.
    """
    if ours == reference:
        return None
    for i, (a, b) in enumerate(zip(ours, reference)):
        if a != b:
            return i
    return min(len(ours), len(reference))

def compareArtifact(ours: bytes, reference: bytes, layout: list, algos: list[str]) -> dict:
    oursHex, refHex = ours.hex(), reference.hex()
    nibble = firstDiffNibble(oursHex, refHex)
    return {
        'oursLen': len(ours),
        'referenceLen': len(reference),
        'sameBytes': ours == reference,
        'oursHashes': {a: contentHash(ours, a) for a in algos},
        'referenceHashes': {a: contentHash(reference, a) for a in algos},
        'firstDiffNibble': nibble,
        'firstDiffField': None if nibble is None else locate(layout, nibble // 2)
    }

def formatSummary(name: str, result: dict) -> str:
    """
    Labelled, human-readable lines for one compared artifact.
    """
    lines = [
        f'{name} bytes match: {result["sameBytes"]}',
        f'  length:            ours {result["oursLen"]}, reference {result["referenceLen"]}'
    ]
    for algo, digest in result['oursHashes'].items():
        lines.append(f'  {algo + ":":<19}ours {digest}')
        lines.append(f'  {"":<19}ref  {result["referenceHashes"][algo]}')
    lines.append(f'  firstDiffNibble:   {result["firstDiffNibble"]}')
    lines.append(f'  firstDiffField:    {result["firstDiffField"]}')
    return '\n'.join(lines)

def _readJson(path: str):
    with open(path) as f:
        return json.load(f)

def _readHex(path: str) -> bytes:
    return hex_to_bytes(Path(path).read_text())

def buildReport(proof, publicSignals, refProof: bytes, refPublic: bytes,
                vk=None, refVk: bytes | None = None, algos: list[str] | None = None) -> dict:
    """
    Encode the artifacts and compare each with its reference bytes.
    """
    algos = algos or ['sha256']
    report = {
        'proof': compareArtifact(encodeProofBytes(proof), refProof, proofLayout(), algos),
        'publicSignals': compareArtifact(
            encodePublicBytes(publicSignals), refPublic, publicLayout(len(publicSignals)), algos
        )
    }
    if vk is not None and refVk is not None:
        report['vk'] = compareArtifact(encodeVkBytes(vk), refVk, vkLayout(len(vk['IC'])), algos)
    report['allMatch'] = all(v['sameBytes'] for v in report.values())
    return report

def _parseArgs(argv):
    parser = argparse.ArgumentParser(
        prog='compat.compare',
        description='Compare encoder output with reference encoder bytes.'
    )
    parser.add_argument('--proof', required=True, help='snarkjs proof.json')
    parser.add_argument('--public', required=True, help='snarkjs public.json')
    parser.add_argument('--ref-proof', required=True, help='reference proof encoding (hex file)')
    parser.add_argument('--ref-public', required=True, help='reference public input encoding (hex file)')
    parser.add_argument('--vkey', help='snarkjs verification_key.json')
    parser.add_argument('--ref-vk', help='reference verification key encoding (hex file)')
    parser.add_argument('--json', action='store_true', help='print the report as JSON')
    args = parser.parse_args(argv)
    if (args.vkey is None) != (args.ref_vk is None):
        parser.error('--vkey and --ref-vk must be given together')
    return args

def main(argv=None) -> int:
    args = _parseArgs(argv)
    try:
        settings = Settings()
        algos = settings.hashAlgos()
        logger = setupLogger(name=settings.loggerName(), level=settings.loggerLevel(), fmt=settings.loggerFormat())
    except ValueError as e:
        # malformed JSON, unknown level or hash algorithm
        encLog(setupLogger(), 'compat', 'main', f'invalid configuration: {e}', 'error')
        return 1

    try:
        report = buildReport(
            _readJson(args.proof),
            _readJson(args.public),
            _readHex(args.ref_proof),
            _readHex(args.ref_public),
            _readJson(args.vkey) if args.vkey else None,
            _readHex(args.ref_vk) if args.ref_vk else None,
            algos
        )
    except (OSError, json.JSONDecodeError, EncodingError) as e:
        encLog(logger, 'compat', 'main', str(e), 'error')
        return 1

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        for name in ('proof', 'publicSignals', 'vk'):
            if name in report:
                print(formatSummary(name, report[name]))
    return 0 if report['allMatch'] else 1


if __name__ == "__main__":
    sys.exit(main())
