"""Printing of limb sequences and byte strings as hex."""

from __future__ import annotations

from typing import Sequence

from .limbs import to_hex


def print_hex(a: Sequence[int]) -> None:
    """Print ``a`` as big-endian hex, 16 digits per limb, then a newline."""
    print(to_hex(a))


def print_bytes_hex(label: str, data: bytes) -> None:
    """Print ``label`` followed by the hex of ``data`` and a newline."""
    print(f"{label}{bytes(data).hex()}")