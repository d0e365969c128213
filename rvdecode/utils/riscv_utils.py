#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""RISC-V bit manipulation utilities for field extraction and sign extension.

RISC-V UTILS
============

This module provides the bit-level helpers used by operand extraction:
- Sign extension for arbitrary bit widths
- Signed 32-bit integer conversion
- Mask geometry (trailing zeros, contiguous width) and bit slicing

Constants like MASK32 should be imported from config.
"""

from rvdecode.config import MASK32

__all__ = [
    "sign_extend",
    "to_signed32",
    "trailing_zeros",
    "is_contiguous_mask",
    "bits",
    "bit",
]


def sign_extend(val: int, bits: int) -> int:
    """Sign extend a value to a specified length in bits.

    Args:
        val: Value to sign-extend
        bits: Number of bits in the original value

    Returns:
        Sign-extended value as a Python int (unbounded)

    Example:
        >>> sign_extend(0xFF, 8)  # Extend 8-bit -1 to full width
        -1
        >>> sign_extend(0x7F, 8)  # Extend 8-bit +127 to full width
        127
    """
    sign = 1 << (bits - 1)
    return (val & (sign - 1)) - (val & sign)


def to_signed32(val: int) -> int:
    """Cast to signed 32-bit integer."""
    return sign_extend(val & MASK32, 32)


def trailing_zeros(mask: int) -> int:
    """Count trailing zero bits of a non-zero mask.

    This is the right-shift that aligns a field described by ``mask`` to
    bit 0; field layouts never store the shift separately.

    Args:
        mask: Non-zero bit mask

    Returns:
        Index of the lowest set bit

    Raises:
        ValueError: If mask is zero (a zero mask has no position)

    Example:
        >>> trailing_zeros(0x1F << 7)  # rd field
        7
    """
    if mask <= 0:
        raise ValueError(f"mask must be a positive integer, got {mask:#x}")
    return (mask & -mask).bit_length() - 1


def is_contiguous_mask(mask: int) -> bool:
    """Check whether the set bits of a non-zero mask form a single run."""
    if mask <= 0:
        return False
    aligned = mask >> trailing_zeros(mask)
    return aligned & (aligned + 1) == 0


def bits(word: int, hi: int, lo: int) -> int:
    """Slice ``word[hi:lo]`` (inclusive, Verilog style) right-aligned."""
    return (word >> lo) & ((1 << (hi - lo + 1)) - 1)


def bit(word: int, index: int) -> int:
    """Return bit ``index`` of ``word``."""
    return (word >> index) & 0x1
