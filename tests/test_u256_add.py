import pytest

from fp256.limbs import MASK64, from_hex, normalize, to_int
from fp256.u256_add import u256_add, u256_add_limb, u256_sub, u256_sub_limb

SUB_LIMB_VECTORS = [
    ("1", "3", 2),
    (
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        "1000000000000000000000000000000000000000000000000000000000000000",
        1,
    ),
    (
        "ffffffffffffffffffffffffffffffffffffffffffffffff0000000000000000",
        "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        0xFFFFFFFFFFFFFFFF,
    ),
    (
        "68e594bdc8ae385ab1151a22796173388a868ea588b38d28c3",
        "68e594bdc8ae385ab1151a22796173388a868ea588b7572b3f",
        0x3CA027C,
    ),
    ("2c93f61c526f50d5c3b27", "2c93f61c52981dc8733e0", 0x28CCF2AF8B9),
    (
        "26f02faa880aca187faa024d25d89cd941a2530e",
        "26f02faa880aca187faa024d2b2472c03fa88a6b",
        0x54BD5E6FE06375D,
    ),
    (
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffedcba988",
        "1000000000000000000000000000000000000000000000000000000000000000",
        0x12345678,
    ),
    (
        "27142011fff75325171c9e25246d030a6137bd8bd11c8f4b43a28ef059c3",
        "27142011fff75325171c9e25246d030a6137bd8bd11c8f4b46352dd4e104",
        0x2929EE48741,
    ),
    ("0", "5555555", 0x5555555),
    (
        "c1608994dcf99df9dc9464e7cf70ecb91e8b4a8f5633207e3",
        "c1608994dcf99df9dc9464e7cf70ecb91e8b4a8f5633207e3",
        0,
    ),
]

ALL_ONES = [MASK64] * 4


@pytest.mark.parametrize("r_hex,a_hex,b", SUB_LIMB_VECTORS)
def test_u256_sub_limb_vectors(r_hex, a_hex, b):
    a = normalize(from_hex(a_hex), 4)
    result, borrow = u256_sub_limb(a, b)
    assert borrow == 0
    assert result == normalize(from_hex(r_hex), 4)


@pytest.mark.parametrize("r_hex,a_hex,b", SUB_LIMB_VECTORS)
def test_u256_add_limb_inverts_sub_limb(r_hex, a_hex, b):
    r = normalize(from_hex(r_hex), 4)
    result, carry = u256_add_limb(r, b)
    assert carry == 0
    assert result == normalize(from_hex(a_hex), 4)


def test_add_limb_wraps_with_carry():
    assert u256_add_limb(ALL_ONES, 1) == ([0, 0, 0, 0], 1)


def test_sub_limb_wraps_with_borrow():
    assert u256_sub_limb([0, 0, 0, 0], 1) == (ALL_ONES, 1)


def test_add_all_ones():
    result, carry = u256_add(ALL_ONES, ALL_ONES)
    assert carry == 1
    assert result == [MASK64 - 1, MASK64, MASK64, MASK64]


def test_sub_borrow():
    result, borrow = u256_sub([1, 0, 0, 0], [2, 0, 0, 0])
    assert borrow == 1
    assert result == ALL_ONES


@pytest.mark.parametrize(
    "a,b",
    [
        ([1, 2, 3, 4], [MASK64, MASK64, 0, 0]),
        ([MASK64, 0, MASK64, 0], [1, MASK64, 1, MASK64]),
        ([0, 0, 0, 1 << 63], [0, 0, 0, 1 << 63]),
    ],
)
def test_add_then_sub_round_trip(a, b):
    total, carry = u256_add(a, b)
    assert to_int(total) + (carry << 256) == to_int(a) + to_int(b)
    back, borrow = u256_sub(total, b)
    assert back == a
    assert borrow == carry


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        u256_add([1, 2, 3], [0, 0, 0, 0])
    with pytest.raises(ValueError):
        u256_sub([0, 0, 0, 0], [1])


def test_limb_out_of_range_rejected():
    with pytest.raises(ValueError):
        u256_add_limb([0, 0, 0, 0], 1 << 64)
    with pytest.raises(ValueError):
        u256_sub_limb([0, 0, 0, 0], -1)