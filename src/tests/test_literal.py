import pytest

from bn254.errors import (
    MalformedLiteral,
    NegativeLiteral,
    NonIntegerLiteral,
    NonUnitDenominator,
    ParseError,
    UnsupportedLiteralType,
)
from bn254.field import field_to_be32
from bn254.proof import encodePublic
from bn254.literal import (
    DecimalString,
    HexString,
    IntegerLiteral,
    NonUnitFraction,
    UnitFraction,
    classify,
    to_int,
)

BIG = 2 ** 300 + 7


@pytest.mark.parametrize('raw, expected', [
    (0, 0),
    (42, 42),
    (BIG, BIG),
    (12.0, 12),
    ('0', 0),
    ('123456789012345678901234567890', 123456789012345678901234567890),
    ('  17\n', 17),
    ('0x1f', 31),
    ('0XFF', 255),
    ('0x' + 'f' * 64, 2 ** 256 - 1),
    (['7', '1', '16'], 7),
    (('7', '1', '10'), 7),
    ([7, 1, 10], 7),
    (['0x10', '1', '16'], 16),
])
def test_to_int(raw, expected):
    assert to_int(raw) == expected

def test_classify_variants():
    assert classify(5) == IntegerLiteral(5)
    assert classify('5') == DecimalString('5')
    assert classify('0x5') == HexString('0x5')
    assert classify(['5', '1', '10']) == UnitFraction(5)
    assert classify(['5', '3', '10']) == NonUnitFraction(5, 3)

def test_variants_pass_through():
    assert to_int(IntegerLiteral(9)) == 9
    assert to_int(DecimalString('10')) == 10
    assert to_int(HexString('0x10')) == 16
    assert to_int(UnitFraction(11)) == 11

def test_non_unit_denominator():
    with pytest.raises(NonUnitDenominator) as e:
        to_int(['7', '2', '16'])
    assert e.value.context['denominator'] == 2
    assert e.value.category == 'FormatError'

def test_zero_denominator_is_not_unit():
    with pytest.raises(NonUnitDenominator):
        to_int(['7', '0', '10'])

@pytest.mark.parametrize('raw', [1.5, float('nan'), float('inf')])
def test_non_integer_float(raw):
    with pytest.raises(NonIntegerLiteral):
        to_int(raw)

@pytest.mark.parametrize('raw', ['', '   ', 'abc', '12a', '0x', '0xg1', '1_000', '1.0', '+5', '0b101'])
def test_malformed_strings(raw):
    with pytest.raises(MalformedLiteral):
        to_int(raw)

@pytest.mark.parametrize('raw', [-1, '-5', '-0x10'])
def test_negative_rejected(raw):
    with pytest.raises(NegativeLiteral):
        to_int(raw)

@pytest.mark.parametrize('raw, shape', [
    (None, 'NoneType'),
    (True, 'bool'),
    ({'x': 1}, 'dict'),
    (['1', '2'], 'list[2]'),
    (['1', '2', '3', '4'], 'list[4]'),
    (b'12', 'bytes'),
])
def test_unsupported_shapes(raw, shape):
    with pytest.raises(UnsupportedLiteralType) as e:
        to_int(raw)
    assert e.value.context['shape'] == shape
    assert shape in str(e.value)

def test_coordinate_triple_is_not_silently_truncated():
    # A projective coordinate triple is read as a fraction, never as its first element
    with pytest.raises(NonUnitDenominator):
        to_int(['123', '456', '1'])

def test_nested_fraction_rejected():
    with pytest.raises(UnsupportedLiteralType):
        to_int([['1', '1', '1'], '1', '10'])

def test_parse_errors_share_category():
    for raw in ('zz', 1.25, None):
        with pytest.raises(ParseError):
            to_int(raw)

@pytest.mark.parametrize('build, error', [
    (lambda: DecimalString('-5'), NegativeLiteral),
    (lambda: DecimalString(' 5'), MalformedLiteral),
    (lambda: DecimalString('0x10'), MalformedLiteral),
    (lambda: HexString('0xzz'), MalformedLiteral),
    (lambda: HexString('zz'), MalformedLiteral),
    (lambda: HexString('-0x10'), NegativeLiteral),
    (lambda: HexString(16), UnsupportedLiteralType),
    (lambda: IntegerLiteral('5'), UnsupportedLiteralType),
    (lambda: IntegerLiteral(True), UnsupportedLiteralType),
    (lambda: IntegerLiteral(-1), NegativeLiteral),
    (lambda: UnitFraction(-3), NegativeLiteral),
    (lambda: UnitFraction(2.0), UnsupportedLiteralType),
    (lambda: NonUnitFraction(7, -2), NegativeLiteral),
    (lambda: NonUnitFraction('7', 2), UnsupportedLiteralType),
])
def test_variants_validate_contents(build, error):
    with pytest.raises(error):
        build()

def test_invalid_variant_never_reaches_encoding():
    with pytest.raises(NegativeLiteral):
        field_to_be32(DecimalString('-5'))
    with pytest.raises(MalformedLiteral):
        encodePublic(['1', HexString('zz')])
