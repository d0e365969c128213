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

"""Validation utilities with rich error reporting.

Validation Utilities
====================

Argument checks for values crossing the library boundary (instruction words
handed to the matcher, register fields handed to the compressed operand
decoder). Unlike bare assertions these carry a context dict so a failure
says exactly which value was wrong and by how much.

Provided Utilities:

    ValidationError: ValueError carrying a context dict
        - Stores context as attributes
        - Formats context in error message

    Assertion Functions:
        - assert_in_range(): Check value bounds
        - assert_bit_width(): Ensure value fits in bit width

Example:
    >>> try:
    ...     assert_bit_width(0x1_0000_0000, 32, "instruction word")
    ... except ValidationError as e:
    ...     print(e.context['bits'])  # 32
"""

from typing import Any

from rvdecode.exceptions import DecoderError


class ValidationError(DecoderError, ValueError):
    """Invalid argument, with context."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and context."""
        self.context = context
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        super().__init__(f"{message}\nContext:\n{context_str}" if context else message)


def assert_in_range(
    value: int, min_val: int, max_val: int, name: str = "value"
) -> None:
    """Assert value is within range."""
    if not min_val <= value <= max_val:
        raise ValidationError(
            f"{name} out of range",
            value=value,
            min=min_val,
            max=max_val,
            out_by=min(abs(value - min_val), abs(value - max_val)),
        )


def assert_bit_width(value: int, bits: int, name: str = "value") -> None:
    """Assert value fits in specified bit width."""
    max_val = (1 << bits) - 1
    if value < 0 or value > max_val:
        raise ValidationError(
            f"{name} exceeds {bits}-bit width",
            value=hex(value),
            bits=bits,
            max_value=hex(max_val),
        )
