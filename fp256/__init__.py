"""Multi-precision arithmetic on lists of 64-bit limbs, with 256-bit routines."""

__version__ = "0.1.0"