"""Montgomery multiplication, reduction and exponentiation over limb sequences."""

from __future__ import annotations

from typing import Sequence

from .limbs import LIMB_BITS, MASK64, from_int, to_int, u256_select

_U256_LIMBS = 4
_MAX_EXP_LIMBS = 4


def _modulus(n: Sequence[int], size: int | None = None) -> tuple[int, int]:
    if not n:
        raise ValueError("the modulus needs at least one limb")
    if size is not None and len(n) != size:
        raise ValueError(f"the modulus must have exactly {size} limbs, got {len(n)}")
    return to_int(n), len(n)


def _operand(a: Sequence[int], width: int, name: str) -> int:
    value = to_int(a)
    if value.bit_length() > LIMB_BITS * width:
        raise ValueError(f"{name} does not fit in {width} limbs")
    return value


def _redc(t: int, modulus: int, k0: int, width: int) -> list[int]:
    """Montgomery-reduce ``t`` by ``2**(64 * width)`` one limb at a time."""
    k0 &= MASK64
    for i in range(width):
        shift = LIMB_BITS * i
        y = (((t >> shift) & MASK64) * k0) & MASK64
        t += (y * modulus) << shift
    t >>= LIMB_BITS * width
    if t >= modulus:
        t -= modulus
    return from_int(t & ((1 << (LIMB_BITS * width)) - 1), width)


def mont_mul(a: Sequence[int], b: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * b * R**-1 mod n`` with ``R = 2**(64 * len(n))``.

    ``k0`` must be ``-n**-1 mod 2**64``. The result has ``len(n)`` limbs.
    """
    modulus, width = _modulus(n)
    product = _operand(a, width, "a") * _operand(b, width, "b")
    return _redc(product, modulus, k0, width)


def mont_reduce(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * R**-1 mod n`` for ``a`` of up to ``2 * len(n)`` limbs."""
    modulus, width = _modulus(n)
    return _redc(_operand(a, 2 * width, "a"), modulus, k0, width)


def mont_sqr(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * a * R**-1 mod n``."""
    return mont_mul(a, a, n, k0)


def to_mont(a: Sequence[int], n: Sequence[int], rr: Sequence[int], k0: int) -> list[int]:
    """Bring ``a`` into Montgomery form, given ``rr = R**2 mod n``."""
    return mont_mul(a, rr, n, k0)


def from_mont(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Bring ``a`` back out of Montgomery form."""
    return mont_reduce(a, n, k0)


def u256_mont_mul(a: Sequence[int], b: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * b * 2**-256 mod n`` for a 4-limb modulus."""
    modulus, width = _modulus(n, _U256_LIMBS)
    product = _operand(a, width, "a") * _operand(b, width, "b")
    return _redc(product, modulus, k0, width)


def u256_mont_sqr(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * a * 2**-256 mod n`` for a 4-limb modulus."""
    modulus, width = _modulus(n, _U256_LIMBS)
    value = _operand(a, width, "a")
    return _redc(value * value, modulus, k0, width)


def u256_mont_reduce(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * 2**-256 mod n`` for a 4-limb value and modulus."""
    modulus, width = _modulus(n, _U256_LIMBS)
    return _redc(_operand(a, width, "a"), modulus, k0, width)


def _window_size(ebits: int) -> int:
    if ebits > 671:
        return 6
    if ebits > 239:
        return 5
    if ebits > 79:
        return 4
    if ebits > 23:
        return 3
    return 1


def u256_mont_exp(
    a: Sequence[int],
    e: Sequence[int],
    rr: Sequence[int],
    n: Sequence[int],
    k0: int,
) -> list[int]:
    """Raise ``a`` (in Montgomery form) to the power ``e`` modulo a 4-limb ``n``.

    ``e`` holds one to four limbs and every one of its ``64 * len(e)`` bits is
    scanned with a fixed window. The result is in Montgomery form.
    """
    if not 1 <= len(e) <= _MAX_EXP_LIMBS:
        raise ValueError("the exponent must have between 1 and 4 limbs")
    _modulus(n, _U256_LIMBS)

    ebits = LIMB_BITS * len(e)
    window = _window_size(ebits)
    mask = (1 << window) - 1
    exponent = to_int(e)

    table = [u256_mont_mul([1], rr, n, k0)]
    for _ in range(1, 1 << window):
        table.append(u256_mont_mul(table[-1], a, n, k0))

    position = ebits % window
    acc = u256_select(table, exponent >> (ebits - position))
    while position < ebits:
        position += window
        index = (exponent >> (ebits - position)) & mask
        for _ in range(window):
            acc = u256_mont_sqr(acc, n, k0)
        acc = u256_mont_mul(acc, u256_select(table, index), n, k0)
    return acc