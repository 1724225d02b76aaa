import random

import pytest

from bn254.constants import BN254_FQ, BN254_FR
from bn254.errors import (
    CoordinateOutOfRange,
    FieldElementOutOfRange,
    FieldWidthOverflow,
    InvalidLength,
    MalformedLiteral,
    RangeError,
)
from bn254.field import be32, coordinate_to_be32, field_to_be32, u32be


def test_round_trip_sampled():
    rng = random.Random(254)
    values = [0, 1, 255, 256, 2 ** 64, BN254_FR - 1] + [rng.randrange(BN254_FR) for _ in range(32)]
    for v in values:
        out = field_to_be32(v)
        assert len(out) == 32
        assert int.from_bytes(out, 'big') == v

def test_zero_padded_big_endian():
    assert field_to_be32('5') == b'\x00' * 31 + b'\x05'
    assert field_to_be32('0x0102') == b'\x00' * 30 + b'\x01\x02'
    assert field_to_be32(0) == b'\x00' * 32

@pytest.mark.parametrize('value', [BN254_FR, BN254_FR + 1, str(BN254_FR), hex(BN254_FQ), 2 ** 256, 2 ** 300])
def test_out_of_range(value):
    with pytest.raises(FieldElementOutOfRange) as e:
        field_to_be32(value)
    assert e.value.context['modulus'] == BN254_FR
    assert e.value.context['value'] >= BN254_FR
    assert str(BN254_FR) in str(e.value)

def test_out_of_range_is_range_error():
    with pytest.raises(RangeError):
        field_to_be32(str(BN254_FR))

def test_coordinates_use_base_field():
    # Fr <= v < Fq is a valid coordinate but not a valid scalar
    v = BN254_FR + 5
    assert coordinate_to_be32(v, 'pi_a.x') == v.to_bytes(32, 'big')
    with pytest.raises(CoordinateOutOfRange) as e:
        coordinate_to_be32(BN254_FQ, 'pi_a.x')
    assert e.value.context['label'] == 'pi_a.x'
    assert str(e.value).startswith('pi_a.x: ')

def test_coordinate_parse_error_carries_label():
    with pytest.raises(MalformedLiteral) as e:
        coordinate_to_be32('nope', 'pi_c.y')
    assert e.value.context['label'] == 'pi_c.y'

def test_be32_never_truncates():
    with pytest.raises(FieldWidthOverflow):
        be32(2 ** 256)
    assert be32(2 ** 256 - 1) == b'\xff' * 32

def test_u32be():
    assert u32be(0) == b'\x00\x00\x00\x00'
    assert u32be(2) == b'\x00\x00\x00\x02'
    assert u32be(0xffffffff) == b'\xff\xff\xff\xff'
    with pytest.raises(InvalidLength):
        u32be(2 ** 32)
