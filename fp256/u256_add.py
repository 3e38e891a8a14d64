"""Addition and subtraction of 256-bit values held as four 64-bit limbs."""

from __future__ import annotations

from typing import Sequence

from .limbs import MASK64, from_int, to_int

_MASK256 = (1 << 256) - 1


def _check_u256(a: Sequence[int], name: str = "a") -> None:
    if len(a) != 4:
        raise ValueError(f"{name} must have exactly 4 limbs, got {len(a)}")


def _check_limb(b: int) -> None:
    if not 0 <= b <= MASK64:
        raise ValueError("a limb must be in [0, 2**64)")


def u256_add_limb(a: Sequence[int], b: int) -> tuple[list[int], int]:
    """Return ``(a + b) mod 2**256`` and the carry out (0 or 1)."""
    _check_u256(a)
    _check_limb(b)
    total = to_int(a) + b
    return from_int(total & _MASK256, 4), total >> 256


def u256_add(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    """Return ``(a + b) mod 2**256`` and the carry out (0 or 1)."""
    _check_u256(a)
    _check_u256(b, "b")
    total = to_int(a) + to_int(b)
    return from_int(total & _MASK256, 4), total >> 256


def u256_sub_limb(a: Sequence[int], b: int) -> tuple[list[int], int]:
    """Return ``(a - b) mod 2**256`` and the borrow out (0 or 1)."""
    _check_u256(a)
    _check_limb(b)
    diff = to_int(a) - b
    return from_int(diff & _MASK256, 4), int(diff < 0)


def u256_sub(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    """Return ``(a - b) mod 2**256`` and the borrow out (0 or 1)."""
    _check_u256(a)
    _check_u256(b, "b")
    diff = to_int(a) - to_int(b)
    return from_int(diff & _MASK256, 4), int(diff < 0)