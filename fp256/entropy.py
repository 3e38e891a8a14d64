"""Random limbs drawn from the operating system's secure random source."""

from __future__ import annotations

import os
from typing import Sequence

from .limbs import LIMB_BITS, MASK64, cmp_limbs, num_bits

_MAX_TRIES = 50


class RandomRangeError(RuntimeError):
    """No value below the requested bound was drawn within the allowed tries."""


def rand_buf(size: int) -> bytes:
    """Return ``size`` secure random bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return os.urandom(size)


def rand_bits(nbits: int) -> list[int]:
    """Return ``ceil(nbits / 64)`` random limbs holding a value below ``2**nbits``."""
    if nbits < 0:
        raise ValueError("nbits must not be negative")
    if nbits == 0:
        return []
    count = ((nbits - 1) >> 6) + 1
    buf = rand_buf(8 * count)
    limbs = [int.from_bytes(buf[8 * i:8 * i + 8], "little") for i in range(count)]
    extra = nbits & 0x3F
    if extra:
        limbs[-1] &= (1 << extra) - 1
    return limbs


def rand_bytes(nbytes: int) -> list[int]:
    """Return random limbs holding a value below ``2**(8 * nbytes)``."""
    return rand_bits(8 * nbytes)


def rand_limbs(nlimbs: int) -> list[int]:
    """Return ``nlimbs`` fully random limbs."""
    return rand_bits(LIMB_BITS * nlimbs)


def rand_range(upper: Sequence[int]) -> list[int]:
    """Return ``len(upper)`` random limbs holding a value below ``upper``.

    The bit width is taken from the top limb of ``upper``. Raises
    :class:`RandomRangeError` when no suitable value turns up in time.
    """
    size = len(upper)
    if size == 0:
        return []
    nbits = num_bits(upper[-1] & MASK64) + (size - 1) * LIMB_BITS
    for _ in range(_MAX_TRIES - 1):
        candidate = rand_bits(nbits)
        candidate += [0] * (size - len(candidate))
        if cmp_limbs(candidate, upper) < 0:
            return candidate
    raise RandomRangeError("could not draw a value below the bound")