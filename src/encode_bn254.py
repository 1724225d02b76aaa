"""
encode_bn254.py

This module encodes snarkjs Groth16 artifacts (BN254) into the on-chain verifier byte layout.

Example:
    You can run this module directly:
        $ python encode_bn254.py <vk|proof|public> <input.json>
    The hex encoding is written to stdout, errors to stderr (exit status 1).

Author: XXXXXXXXXX
Date: 16/10/2026
"""

import argparse
import json
import sys

from bn254.errors import EncodingError
from bn254.proof import encodeProof, encodePublic, encodeVk
from bn254.utils import Settings, encLog
from chainlogger.logger import setupLogger

ENCODERS = {
    'vk': encodeVk,
    'proof': encodeProof,
    'public': encodePublic
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='encode-bn254', description='Encode BN254 Groth16 artifacts for the verifier.')
    parser.add_argument('mode', choices=sorted(ENCODERS))
    parser.add_argument('input', help='JSON file produced by snarkjs')
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        logger = setupLogger(name=settings.loggerName(), level=settings.loggerLevel(), fmt=settings.loggerFormat())
    except ValueError as e:
        # malformed JSON or unknown log level
        encLog(setupLogger(), args.mode, 'main', f'invalid configuration: {e}', 'error')
        return 1

    try:
        with open(args.input) as f:
            parsed = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        encLog(logger, args.mode, 'main', f'failed to parse JSON at {args.input}: {e}', 'error')
        return 1

    try:
        encoded = ENCODERS[args.mode](parsed)
    except EncodingError as e:
        encLog(logger, args.mode, 'main', f'{e.category}/{e.kind}: {e}', 'error')
        return 1

    sys.stdout.write(encoded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
