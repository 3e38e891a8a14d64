"""Helpers for numbers stored as lists of 64-bit limbs, least significant first."""

from __future__ import annotations

from typing import Iterable, Sequence

LIMB_BITS = 64
MASK64 = (1 << LIMB_BITS) - 1
MASK32 = (1 << 32) - 1

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def num_bits(a: int) -> int:
    """Number of significant bits of a 64-bit limb."""
    return (a & MASK64).bit_length()


def leading_zeros(a: int) -> int:
    """Number of leading zero bits of a 64-bit limb."""
    return LIMB_BITS - num_bits(a)


def bswap4(value: int) -> int:
    """Reverse the byte order of a 32-bit word."""
    return int.from_bytes((value & MASK32).to_bytes(4, "little"), "big")


def bswap8(value: int) -> int:
    """Reverse the byte order of a 64-bit word."""
    return int.from_bytes((value & MASK64).to_bytes(8, "little"), "big")


def u256_select(table: Iterable[Sequence[int]], index: int) -> list[int]:
    """Pick entry ``index`` of a table of 4-limb values, scanning every entry.

    An index outside the table yields zero.
    """
    result = [0, 0, 0, 0]
    for position, entry in enumerate(table):
        mask = MASK64 if position == index else 0
        result = [r | (e & mask) for r, e in zip(result, entry)]
    return result


def cmp_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two limb sequences; a longer sequence is always the greater one."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def is_zero(a: Sequence[int]) -> bool:
    """True when every limb is zero."""
    return not any(a)


def num_limbs(a: Sequence[int]) -> int:
    """Number of limbs once the zero limbs at the top are dropped."""
    count = len(a)
    while count and a[count - 1] == 0:
        count -= 1
    return count


def normalize(a: Sequence[int], size: int) -> list[int]:
    """Pad ``a`` with zero limbs up to ``size`` limbs."""
    if len(a) > size:
        raise ValueError(f"cannot normalize {len(a)} limbs into {size}")
    return list(a) + [0] * (size - len(a))


def test_bit(a: Sequence[int], idx: int) -> int:
    """Return bit ``idx`` of ``a`` as 0 or 1."""
    if idx < 0:
        raise ValueError("bit index must not be negative")
    return (a[idx >> 6] >> (idx & 0x3F)) & 1


def set_bit(a: Sequence[int], idx: int) -> list[int]:
    """Return a copy of ``a`` with bit ``idx`` set, growing it if needed."""
    if idx < 0:
        raise ValueError("bit index must not be negative")
    limb = idx >> 6
    result = list(a)
    if limb >= len(result):
        result.extend([0] * (limb + 1 - len(result)))
    result[limb] |= 1 << (idx & 0x3F)
    return result


def clear_set_bit(idx: int, size: int) -> list[int]:
    """Return ``size`` limbs holding exactly ``2**idx``."""
    if idx < 0 or (idx >> 6) >= size:
        raise ValueError(f"bit {idx} does not fit in {size} limbs")
    result = [0] * size
    result[idx >> 6] = 1 << (idx & 0x3F)
    return result


def from_hex(text: str | bytes) -> list[int]:
    """Parse a big-endian hex string into limbs, dropping zero limbs at the top."""
    digits = text.decode("ascii") if isinstance(text, (bytes, bytearray)) else text
    if not all(c in _HEX_DIGITS for c in digits):
        raise ValueError(f"invalid hex string: {digits!r}")
    limbs = [
        int(digits[max(0, end - 16):end], 16)
        for end in range(len(digits), 0, -16)
    ]
    return limbs[: num_limbs(limbs)]


def to_hex(a: Sequence[int]) -> str:
    """Big-endian hex text, 16 lowercase digits per limb."""
    return "".join(f"{limb & MASK64:016x}" for limb in reversed(a))


def from_bytes(data: bytes) -> list[int]:
    """Parse big-endian bytes into limbs, dropping zero limbs at the top."""
    limbs = [
        int.from_bytes(data[max(0, end - 8):end], "big")
        for end in range(len(data), 0, -8)
    ]
    return limbs[: num_limbs(limbs)]


def to_bytes(a: Sequence[int]) -> bytes:
    """Big-endian bytes, 8 per limb."""
    return b"".join((limb & MASK64).to_bytes(8, "big") for limb in reversed(a))


def invert_limb(a: int) -> int:
    """Return ``-a**-1 mod 2**64`` for an odd limb ``a``."""
    a &= MASK64
    inv = ((((a + 2) & 4) << 1) + a) & MASK64
    for _ in range(4):
        inv = (inv * (2 - inv * a)) & MASK64
    return (-inv) & MASK64


def to_int(a: Sequence[int]) -> int:
    """Value of a limb sequence as a Python integer."""
    return sum((limb & MASK64) << (LIMB_BITS * i) for i, limb in enumerate(a))


def from_int(value: int, size: int | None = None) -> list[int]:
    """Split a non-negative integer into limbs.

    Without ``size`` the fewest limbs that hold the value are used.
    """
    if value < 0:
        raise ValueError("value must not be negative")
    if size is None:
        size = (value.bit_length() + LIMB_BITS - 1) // LIMB_BITS
    if value.bit_length() > LIMB_BITS * size:
        raise ValueError(f"value does not fit in {size} limbs")
    return [(value >> (LIMB_BITS * i)) & MASK64 for i in range(size)]