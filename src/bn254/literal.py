"""
bn254/literal.py

This module turns the numeric literals emitted by proving toolkits into canonical integers.

The accepted shapes are enumerated as tagged variants:
    IntegerLiteral   - python int (or an integral float)
    DecimalString    - "123"
    HexString        - "0x7b" / "0X7B"
    UnitFraction     - ["123", "1", "10"]   (numerator, denominator, ignored radix)
    NonUnitFraction  - ["123", "2", "10"]   (cannot be a single field element)
'classify' is the only place where raw input is inspected, 'to_int' evaluates a variant.

Example:
    You can use this as a module:
        from bn254.literal import to_int, classify (, *)

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import math
import re

from bn254.errors import (
    MalformedLiteral,
    NegativeLiteral,
    NonIntegerLiteral,
    NonUnitDenominator,
    UnsupportedLiteralType,
)

_DECIMAL = re.compile(r'[0-9]+')
_HEX = re.compile(r'0[xX][0-9a-fA-F]+')

FRACTION_ARITY = 3


def _check_int(value, name: str):
    # bool is an int subclass, JSON true/false is not a number
    if not isinstance(value, int) or isinstance(value, bool):
        raise UnsupportedLiteralType(f'{name} must be an int, got {shape_of(value)}', shape=shape_of(value))
    if value < 0:
        raise NegativeLiteral(f'negative field element: {value}', value=value)

def _check_text(text, pattern: re.Pattern, name: str):
    if not isinstance(text, str):
        raise UnsupportedLiteralType(f'{name} must be a str, got {shape_of(text)}', shape=shape_of(text))
    if pattern.fullmatch(text):
        return
    if text.startswith('-') and pattern.fullmatch(text[1:]):
        raise NegativeLiteral(f'negative field element: {text}', value=text)
    raise MalformedLiteral(f'malformed {name}: {text!r}', value=text)


@dataclass(frozen=True)
class IntegerLiteral:
    value: int

    def __post_init__(self):
        _check_int(self.value, 'integer literal')

@dataclass(frozen=True)
class DecimalString:
    text: str

    def __post_init__(self):
        _check_text(self.text, _DECIMAL, 'decimal literal')

@dataclass(frozen=True)
class HexString:
    text: str

    def __post_init__(self):
        _check_text(self.text, _HEX, 'hex literal')

@dataclass(frozen=True)
class UnitFraction:
    numerator: int

    def __post_init__(self):
        _check_int(self.numerator, 'fraction numerator')

@dataclass(frozen=True)
class NonUnitFraction:
    numerator: int
    denominator: int

    def __post_init__(self):
        _check_int(self.numerator, 'fraction numerator')
        _check_int(self.denominator, 'fraction denominator')


Literal = Union[IntegerLiteral, DecimalString, HexString, UnitFraction, NonUnitFraction]
_VARIANTS = (IntegerLiteral, DecimalString, HexString, UnitFraction, NonUnitFraction)


def shape_of(value) -> str:
    """
    Short runtime shape used in diagnostics, e.g. 'str', 'list[2]', 'NoneType'.
    """
    if isinstance(value, (list, tuple)):
        return f'{type(value).__name__}[{len(value)}]'
    return type(value).__name__

def _classify_string(raw: str) -> Literal:
    text = raw.strip()
    if not text:
        raise MalformedLiteral('empty string field element', value=raw)
    if _HEX.fullmatch(text):
        return HexString(text)
    if _DECIMAL.fullmatch(text):
        return DecimalString(text)
    if text.startswith('-') and (_DECIMAL.fullmatch(text[1:]) or _HEX.fullmatch(text[1:])):
        raise NegativeLiteral(f'negative field element: {text}', value=raw)
    raise MalformedLiteral(f'malformed numeric literal: {raw!r}', value=raw)

def _fraction_part(raw):
    # Fraction parts are scalars, nested sequences are not fractions
    if isinstance(raw, (list, tuple)):
        raise UnsupportedLiteralType(f'unsupported fraction component: {shape_of(raw)}', shape=shape_of(raw))
    return to_int(raw)

def classify(raw) -> Literal:
    """
    Decide which literal variant a raw input is. Already classified variants pass through.
    """
    if isinstance(raw, _VARIANTS):
        return raw
    # bool is an int subclass, JSON true/false is not a number
    if isinstance(raw, bool):
        raise UnsupportedLiteralType(f'unsupported field element type: {shape_of(raw)}', shape=shape_of(raw))
    if isinstance(raw, int):
        return IntegerLiteral(raw)
    if isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            raise NonIntegerLiteral(f'non-integer numeric field element: {raw}', value=raw)
        return IntegerLiteral(int(raw))
    if isinstance(raw, str):
        return _classify_string(raw)
    if isinstance(raw, (list, tuple)) and len(raw) == FRACTION_ARITY:
        # snarkjs fraction format: [numerator, denominator, radix]
        numerator = _fraction_part(raw[0])
        denominator = _fraction_part(raw[1])
        if denominator == 1:
            return UnitFraction(numerator)
        return NonUnitFraction(numerator, denominator)
    raise UnsupportedLiteralType(f'unsupported field element type: {shape_of(raw)}', shape=shape_of(raw))

def to_int(raw) -> int:
    """
    Canonical (non-negative, arbitrary precision) integer of a numeric literal.

    The result is NOT range checked against any modulus. Variants validate themselves on construction,
    so their contents are trusted here.
    """
    lit = classify(raw)
    if isinstance(lit, IntegerLiteral):
        return lit.value
    if isinstance(lit, DecimalString):
        try:
            return int(lit.text, 10)
        except ValueError as e:
            # interpreter digit limit, far beyond any 254-bit value
            raise MalformedLiteral(f'decimal literal too long: {len(lit.text)} digits') from e
    if isinstance(lit, HexString):
        return int(lit.text[2:], 16)
    if isinstance(lit, UnitFraction):
        return lit.numerator
    raise NonUnitDenominator(
        f'cannot encode fraction field element {lit.numerator}/{lit.denominator}',
        value=lit.numerator,
        denominator=lit.denominator
    )
