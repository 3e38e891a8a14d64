"""Bit shifts of limb sequences."""

from __future__ import annotations

from typing import Sequence

from .limbs import from_int, to_int


def lshift(a: Sequence[int], n: int) -> list[int]:
    """Shift ``a`` left by ``n`` bits.

    The result has ``len(a) + n // 64 + 1`` limbs; an empty input gives an
    empty result.
    """
    if n < 0:
        raise ValueError("shift amount must not be negative")
    if not a:
        return []
    return from_int(to_int(a) << n, len(a) + (n >> 6) + 1)


def rshift(a: Sequence[int], n: int) -> list[int]:
    """Shift ``a`` right by ``n`` bits, keeping ``len(a)`` limbs."""
    if n < 0:
        raise ValueError("shift amount must not be negative")
    return from_int(to_int(a) >> n, len(a))


def _check_u256(a: Sequence[int], n: int) -> None:
    if len(a) != 4:
        raise ValueError("a 256-bit value needs exactly 4 limbs")
    if not 0 <= n < 64:
        raise ValueError("shift amount must be in [0, 64)")


def u256_lshift(a: Sequence[int], n: int) -> list[int]:
    """Shift a 4-limb value left by ``0 <= n < 64`` bits into 5 limbs."""
    _check_u256(a, n)
    return from_int(to_int(a) << n, 5)


def u256_rshift(a: Sequence[int], n: int) -> list[int]:
    """Shift a 4-limb value right by ``0 <= n < 64`` bits."""
    _check_u256(a, n)
    return from_int(to_int(a) >> n, 4)