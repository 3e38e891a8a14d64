# fp256

Multi-precision integer arithmetic on 64-bit limbs, with fixed-width routines
for 256-bit numbers. A number is a list of limbs, least significant first
(`limb[0]` is the lowest), each limb an integer in `[0, 2**64)`. Functions
take limb sequences and return new lists; nothing is changed in place.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `fp256.limbs`: limb utilities. `num_bits` and `leading_zeros` of a single
  limb, `bswap4` / `bswap8`, `cmp_limbs` (a longer sequence always compares
  greater), `is_zero`, `num_limbs` (length without zero limbs at the top),
  `normalize` (pad with zero limbs), `test_bit`, `set_bit`, `clear_set_bit`,
  `u256_select` (pick a 4-limb entry from a table by scanning every entry),
  `from_hex` / `to_hex` and `from_bytes` / `to_bytes` (big-endian text and
  bytes), `invert_limb` (returns `-a**-1 mod 2**64` for an odd limb), and
  `to_int` / `from_int` for moving between limbs and Python integers.
- `fp256.shift`: `lshift` (result has `len(a) + n // 64 + 1` limbs) and
  `rshift` (keeps `len(a)` limbs) for any length; `u256_lshift` (4 limbs in,
  5 out) and `u256_rshift` for shifts of `0 <= n < 64`.
- `fp256.u256_add`: `u256_add`, `u256_add_limb`, `u256_sub`, `u256_sub_limb`
  on 4-limb values; each returns the 4-limb result and the carry or borrow.
- `fp256.mul`: `mul_limb`, `muladd_limb` (`r + a * b` with the carry as the
  last limb), `mulsub_limb` (`r - a * b` and the borrow), `mul` (full
  product), and the 256-bit `u256_mul_limb`, `u256_mul`, `u256_mullo`,
  `u256_sqr`, `u256_sqrlo`.
- `fp256.mont`: Montgomery arithmetic for any limb count (`mont_mul`,
  `mont_sqr`, `mont_reduce`, `to_mont`, `from_mont`) and for 4-limb moduli
  (`u256_mont_mul`, `u256_mont_sqr`, `u256_mont_reduce`, and
  `u256_mont_exp`, a fixed-window exponentiation that scans every bit of an
  exponent of one to four limbs and works on values in Montgomery form).
- `fp256.division`: `naive_div(n, d)` returns `(remainder, quotient)` as limb
  lists. It raises `ZeroDivisionError` for a zero divisor and `ValueError`
  for a divisor of `2**256` or more.
- `fp256.entropy`: secure random limbs from `os.urandom`: `rand_buf`,
  `rand_bits`, `rand_bytes`, `rand_limbs`, and `rand_range`, which draws a
  value below a bound and raises `RandomRangeError` if it fails to find one
  within its limited number of tries.
- `fp256.display`: `print_hex` (16 hex digits per limb) and
  `print_bytes_hex(label, data)`.

## Example

```python
from fp256.limbs import from_hex, to_int, invert_limb
from fp256.mont import mont_mul

n = from_hex("f")
k0 = invert_limb(n[0])
r = mont_mul(from_hex("b"), from_hex("1"), n, k0)
print(to_int(r))   # 11
```

`invert_limb(n[0])` gives the `k0` with `k0 * n == -1 (mod 2**64)` that every
Montgomery routine needs; the modulus must be odd. `R` is `2**(64 * len(n))`.

## What it does not do

This is a set of low-level functions on limb lists. There is no number class
with operators, no modular context object that computes `k0` and `R**2 mod n`
for you, no general-purpose division for divisors beyond four limbs, and no
command-line tool.