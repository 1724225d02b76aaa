"""
bn254/errors.py

This module defines the error taxonomy of the encoder.

Every failure is terminal for the current call. Errors are grouped into four
categories which can be handled separately by callers:
    ParseError      - literal is not a recognized/parseable integer
    RangeError      - a field element or coordinate is >= its modulus
    FormatError     - wrong arity or shape of a point, fraction or list
    NonAffinePoint  - projective normalization coordinate is neither 0 nor 1

Example:
    You can use this as a module:
        from bn254.errors import EncodingError, RangeError (, *)

Author: XXXXXXXXXX
Date: 16/10/2026
"""

from __future__ import annotations


class EncodingError(ValueError):
    """
    Base class of all encoder failures.

    'context' holds whatever localizes the fault (label, index, value, modulus, shape).
    The label and index are rendered as a prefix of the message.
    """
    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context: dict = {k: v for k, v in context.items() if v is not None}

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def category(self) -> str:
        for cls in type(self).__mro__:
            if cls in (ParseError, RangeError, FormatError, NonAffinePoint):
                return cls.__name__
        return EncodingError.__name__

    def at(self, **context) -> EncodingError:
        """
        Attach extra location context (never overrides what is already known).
        """
        for k, v in context.items():
            self.context.setdefault(k, v)
        return self

    def location(self) -> str:
        label = self.context.get('label')
        index = self.context.get('index')
        if label is not None and index is not None:
            return f'{label}[{index}]'
        return label or ''

    def __str__(self):
        loc = self.location()
        return f'{loc}: {self.message}' if loc else self.message


class ParseError(EncodingError):
    pass

class RangeError(EncodingError):
    pass

class FormatError(EncodingError):
    pass

class NonAffinePoint(EncodingError):
    pass


# Parse errors
class NonIntegerLiteral(ParseError):
    pass

class MalformedLiteral(ParseError):
    pass

class NegativeLiteral(ParseError):
    pass

class UnsupportedLiteralType(ParseError):
    pass


# Range errors
class FieldElementOutOfRange(RangeError):
    pass

class CoordinateOutOfRange(RangeError):
    pass

class FieldWidthOverflow(RangeError):
    """
    Value does not fit into its fixed-width slot. Only reachable if a range check was skipped.
    """


# Format errors
class NonUnitDenominator(FormatError):
    pass

class MalformedExtensionField(FormatError):
    pass

class NotAnArray(FormatError):
    pass

class InvalidPointFormat(FormatError):
    pass

class MissingField(FormatError):
    pass

class InvalidLength(FormatError):
    pass
