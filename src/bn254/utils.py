"""
bn254/utils.py

This module holds the settings loader and the logging helper shared by the encoder tools.

Example:
    You can use this as a module:
        from bn254.utils import Settings, encLog

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from pathlib import Path
import json
import os

CONFIG_ENV = 'BN254_ENCODER_CONFIG'
DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'config.json'

DEFAULTS = {
    'logger': {
        'name': 'Encoder Logger',
        'level': 'INFO',
        'format': '[[%(asctime)s] %(message)s'
    },
    'compat': {
        'hash_algos': ['sha256', 'keccak']
    }
}

HASH_ALGOS = ('sha256', 'keccak')


def encLog(logger, component: str, fnMethod: str, message: str = '', level: str = 'info'):
    """
    Logging function.
    """
    getattr(logger, level)(f'[{component}] [{fnMethod}]]{": " + message if message else message}')


class Settings:
    """
    Encoder tool settings.

    Read from 'config/config.json' next to the packages, or from the file named by $BN254_ENCODER_CONFIG.
    Sections missing from the file are taken from DEFAULTS.
    """
    def __init__(self, path: str | Path | None = None):
        if path is None:
            path = os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG
        self.path = Path(path)
        self.config = {section: dict(values) for section, values in DEFAULTS.items()}
        if self.path.is_file():
            with open(self.path) as f:
                loaded = json.load(f)
            for section, values in loaded.items():
                self.config.setdefault(section, {}).update(values)

    def loggerName(self) -> str:
        return self.config['logger']['name']

    def loggerLevel(self) -> str:
        return self.config['logger']['level']

    def loggerFormat(self) -> str:
        return self.config['logger']['format']

    def hashAlgos(self) -> list[str]:
        algos = list(self.config['compat']['hash_algos'])
        unknown = [a for a in algos if a not in HASH_ALGOS]
        if unknown:
            raise ValueError(f'unsupported hash algorithm(s) in {self.path}: {", ".join(unknown)}')
        return algos
