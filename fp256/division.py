"""Division by divisors of at most four limbs."""

from __future__ import annotations

from typing import Sequence

from .limbs import from_int, num_limbs, to_int

_MAX_DIVISOR_LIMBS = 4


def naive_div(n: Sequence[int], d: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return ``(n mod d, n // d)`` as limb lists without zero limbs at the top.

    The divisor must be non-zero and below ``2**256``.
    """
    dl = num_limbs(d)
    if dl == 0:
        raise ZeroDivisionError("division by zero")
    if dl > _MAX_DIVISOR_LIMBS:
        raise ValueError("the divisor must be below 2**256")
    quotient, remainder = divmod(to_int(n), to_int(d))
    return from_int(remainder), from_int(quotient)