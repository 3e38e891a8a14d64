"""Multiplication of limb sequences and of 256-bit values."""

from __future__ import annotations

from typing import Sequence

from .limbs import LIMB_BITS, MASK64, from_int, to_int

_MASK256 = (1 << 256) - 1


def _check_limb(b: int) -> None:
    if not 0 <= b <= MASK64:
        raise ValueError("a limb must be in [0, 2**64)")


def _check_u256(a: Sequence[int], name: str = "a") -> None:
    if len(a) != 4:
        raise ValueError(f"{name} must have exactly 4 limbs, got {len(a)}")


def _width(rl: int | None, r: Sequence[int], a: Sequence[int]) -> int:
    if rl is None:
        rl = len(r)
    if rl < 0:
        raise ValueError("rl must not be negative")
    return max(rl, len(a))


def mul_limb(a: Sequence[int], b: int) -> list[int]:
    """Return ``a * b`` as ``len(a) + 1`` limbs; the last limb is the carry."""
    _check_limb(b)
    return from_int(to_int(a) * b, len(a) + 1)


def muladd_limb(r: Sequence[int], a: Sequence[int], b: int, rl: int | None = None) -> list[int]:
    """Return ``r + a * b`` over ``max(rl, len(a)) + 1`` limbs.

    Only the low ``max(rl, len(a))`` limbs of ``r`` take part; the last limb
    of the result is the carry out. ``rl`` defaults to ``len(r)``.
    """
    _check_limb(b)
    width = _width(rl, r, a)
    return from_int(to_int(r[:width]) + to_int(a) * b, width + 1)


def mulsub_limb(
    r: Sequence[int], a: Sequence[int], b: int, rl: int | None = None
) -> tuple[list[int], int]:
    """Return ``r - a * b`` over ``max(rl, len(a))`` limbs and the borrow out.

    The borrow is the multiple of ``2**(64 * width)`` that the subtraction
    went below zero by. ``rl`` defaults to ``len(r)``.
    """
    _check_limb(b)
    width = _width(rl, r, a)
    diff = to_int(r[:width]) - to_int(a) * b
    modulus_bits = LIMB_BITS * width
    borrow = -(diff >> modulus_bits)
    return from_int(diff & ((1 << modulus_bits) - 1), width), borrow


def mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a * b`` as ``len(a) + len(b)`` limbs."""
    return from_int(to_int(a) * to_int(b), len(a) + len(b))


def u256_mul_limb(a: Sequence[int], b: int) -> tuple[list[int], int]:
    """Return the low 4 limbs of ``a * b`` and the carry limb."""
    _check_u256(a)
    _check_limb(b)
    product = to_int(a) * b
    return from_int(product & _MASK256, 4), product >> 256


def u256_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Full 512-bit product of two 4-limb values, as 8 limbs."""
    _check_u256(a)
    _check_u256(b, "b")
    return from_int(to_int(a) * to_int(b), 8)


def u256_mullo(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Low 256 bits of the product of two 4-limb values."""
    _check_u256(a)
    _check_u256(b, "b")
    return from_int((to_int(a) * to_int(b)) & _MASK256, 4)


def u256_sqr(a: Sequence[int]) -> list[int]:
    """Full 512-bit square of a 4-limb value, as 8 limbs."""
    _check_u256(a)
    value = to_int(a)
    return from_int(value * value, 8)


def u256_sqrlo(a: Sequence[int]) -> list[int]:
    """Low 256 bits of the square of a 4-limb value."""
    _check_u256(a)
    value = to_int(a)
    return from_int((value * value) & _MASK256, 4)