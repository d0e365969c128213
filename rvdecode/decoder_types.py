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

"""Type aliases and custom types for the decoder.

Types
=====

This module defines type aliases and NewTypes for better type safety and
code clarity across the catalog and the matcher.
"""

from collections.abc import Callable
from typing import NewType

# Instruction-related types
InstructionWord = NewType("InstructionWord", int)
"""Raw instruction word (16-bit compressed or 32-bit), as an unsigned int."""

# Register-related types
RegisterIndex = NewType("RegisterIndex", int)
"""RISC-V integer register index (0-31, where 0 is hardwired to zero)."""

# Operand-related types
OperandValues = tuple[int, ...]
"""Extracted operand values, one per operand descriptor."""

CompressedOperandDecoder = Callable[[int], OperandValues]
"""Per-opcode routine extracting swizzled operands from a compressed word."""
