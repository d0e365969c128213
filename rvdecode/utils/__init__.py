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

"""Utility functions for the decoder.

This package provides helper functions used throughout the catalog and the
matcher for bit manipulation, logging, and argument validation.

Modules
-------
riscv_utils
    RISC-V specific bit helpers:
    - Sign extension for various bit widths
    - Signed 32-bit conversion
    - Mask trailing zeros and bit slicing

decode_logger
    Structured logging for decodes:
    - One-line records for decoded words and decode failures
    - Catalog summary at construction time

validation
    Argument checks with context:
    - ValidationError carrying a context dict
    - Range and bit-width checks

Usage
-----
Import utilities as needed::

    from rvdecode.utils.riscv_utils import sign_extend
    from rvdecode.utils.validation import assert_bit_width

    # Sign extend a 12-bit immediate
    signed_imm = sign_extend(raw_imm, 12)

    # Reject words wider than 32 bits
    assert_bit_width(word, 32, "instruction word")
"""

from rvdecode.utils.riscv_utils import sign_extend, to_signed32
from rvdecode.utils.validation import ValidationError, assert_bit_width, assert_in_range

# Note: DecodeLogger is not imported at package level to avoid circular imports.
# Import directly when needed: from rvdecode.utils.decode_logger import DecodeLogger

__all__ = [
    "sign_extend",
    "to_signed32",
    "ValidationError",
    "assert_bit_width",
    "assert_in_range",
]
