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

"""Encoding rule data model.

Encoding Rules
==============

An ``EncodingRule`` ties a mnemonic and an ``InstId`` to a match predicate
and an ordered list of operand descriptors:

    (word & pattern.mask) == pattern.value

Rule states:
    - Real rule: ``pattern`` is a ``MatchPattern`` with a non-zero mask
    - Placeholder: ``pattern`` is None. The identity is reserved but has no
      wired encoding, so the rule can never match a word. It may carry a
      ``recognition`` pattern (the standard encoding of the instruction)
      that only lets the matcher say "recognized but not implemented".
    - Alias: a real rule whose pattern is identical to an earlier rule's,
      declared through ``alias_of`` (XLEN-dependent reinterpretations such
      as c.flw/c.ld). Aliases are reachable by name and id, never by decode.

Operand layouts:
    - ``BitField(mask)``: operand bits of a 32-bit encoding. The right-shift
      that aligns the field is the mask's trailing-zero count.
    - ``SWIZZLED``: operand bits of a 16-bit encoding, which are scattered
      and opcode-specific. These are extracted by the compressed operand
      decoder, keyed by identity.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

from rvdecode.catalog.inst_id import InstId
from rvdecode.config import (
    COMPRESSED_QUADRANT_MASK,
    MASK16,
    MASK32,
    UNCOMPRESSED_QUADRANT,
)
from rvdecode.exceptions import InvalidEncodingError
from rvdecode.utils.riscv_utils import is_contiguous_mask, trailing_zeros

MAX_OPERANDS = 3


class Category(Enum):
    """Instruction category."""

    INT = "int"
    BRANCH = "branch"
    LOAD = "load"
    STORE = "store"
    CSR = "csr"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    UNCATEGORIZED = "uncategorized"


class OperandKind(Enum):
    """What an operand value names."""

    NONE = "none"
    INT_REG = "int_reg"
    CS_REG = "cs_reg"
    IMM = "imm"


class OperandMode(Enum):
    """How the instruction accesses an operand."""

    NONE = "none"
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"


class ImmFormat(Enum):
    """Immediate reassembly scheme for 32-bit encodings.

    UNSIGNED is a plain mask-and-shift; the others follow the RISC-V base
    instruction formats and are sign-extended.
    """

    UNSIGNED = "unsigned"
    I = "i"  # noqa: E741
    S = "s"
    B = "b"
    U = "u"
    J = "j"


class InstWidth(IntEnum):
    """Encoding width in bits."""

    COMPRESSED = 16
    WORD = 32

    @property
    def mask(self) -> int:
        return MASK16 if self is InstWidth.COMPRESSED else MASK32

    @property
    def size_bytes(self) -> int:
        return self.value // 8


class Swizzled(Enum):
    """Marker layout for operands whose bits are scattered (compressed)."""

    SWIZZLED = "swizzled"

    def __repr__(self) -> str:
        return "SWIZZLED"


SWIZZLED = Swizzled.SWIZZLED


@dataclass(frozen=True)
class BitField:
    """Operand bits of a 32-bit encoding."""

    mask: int

    @property
    def shift(self) -> int:
        """Right-shift aligning the field to bit 0 (mask trailing zeros)."""
        return trailing_zeros(self.mask)

    def extract(self, word: int) -> int:
        """Mask-and-shift the field out of ``word``."""
        return (word & self.mask) >> self.shift

    def __repr__(self) -> str:
        return f"BitField(0x{self.mask:08x})"


OperandField = BitField | Swizzled


@dataclass(frozen=True)
class MatchPattern:
    """Match predicate ``(word & mask) == value``."""

    value: int
    mask: int

    def matches(self, word: int) -> bool:
        return (word & self.mask) == self.value

    def covers(self, other: "MatchPattern") -> bool:
        """Check whether every word matching ``other`` also matches self.

        True when self constrains a subset of other's bits and agrees with
        other on them.
        """
        return self.mask & ~other.mask == 0 and (other.value & self.mask) == self.value

    def __str__(self) -> str:
        return f"0x{self.value:08x}/0x{self.mask:08x}"


@dataclass(frozen=True)
class OperandDescriptor:
    """Kind, access mode and bit layout of one operand."""

    kind: OperandKind
    mode: OperandMode
    field: OperandField
    imm_format: ImmFormat | None = None

    @property
    def is_generic(self) -> bool:
        """True when the operand can be extracted by mask-and-shift."""
        return isinstance(self.field, BitField)


@dataclass(frozen=True)
class EncodingRule:
    """One catalog entry.

    Attributes:
        name: Mnemonic, unique across the catalog
        id: Instruction identity
        category: Instruction category
        operands: 0-3 operand descriptors, in operand order
        width: Encoding width (32-bit word or 16-bit compressed)
        pattern: Match predicate, or None for a placeholder
        alias_of: Earlier rule with the identical pattern that this rule
            deliberately aliases
        recognition: Placeholders only, standard encoding used to report
            "not implemented" instead of "no match"
    """

    name: str
    id: InstId
    category: Category
    operands: tuple[OperandDescriptor, ...] = ()
    width: InstWidth = InstWidth.WORD
    pattern: MatchPattern | None = None
    alias_of: InstId | None = None
    recognition: MatchPattern | None = None

    def __post_init__(self) -> None:
        self._validate()

    @property
    def match_value(self) -> int:
        """Match value, 0 for placeholders."""
        return self.pattern.value if self.pattern is not None else 0

    @property
    def match_mask(self) -> int:
        """Match mask, 0 for placeholders."""
        return self.pattern.mask if self.pattern is not None else 0

    @property
    def is_placeholder(self) -> bool:
        return self.pattern is None

    @property
    def is_alias(self) -> bool:
        return self.alias_of is not None

    @property
    def is_compressed(self) -> bool:
        return self.width is InstWidth.COMPRESSED

    @property
    def operand_count(self) -> int:
        return len(self.operands)

    def matches(self, word: int) -> bool:
        """Apply the match predicate. Placeholders never match."""
        return self.pattern is not None and self.pattern.matches(word)

    def _fail(self, reason: str) -> None:
        raise InvalidEncodingError(self.name, reason)

    def _validate_pattern(self, pattern: MatchPattern, what: str) -> None:
        if pattern.mask == 0:
            self._fail(f"{what} mask is zero and would match every word")
        if pattern.value & ~pattern.mask:
            self._fail(f"{what} value 0x{pattern.value:x} has bits outside its mask")
        if pattern.mask & ~self.width.mask:
            self._fail(f"{what} mask 0x{pattern.mask:x} is wider than {self.width.value} bits")
        if pattern.mask & COMPRESSED_QUADRANT_MASK != COMPRESSED_QUADRANT_MASK:
            self._fail(f"{what} does not constrain the quadrant bits [1:0]")
        quadrant = pattern.value & COMPRESSED_QUADRANT_MASK
        if (quadrant == UNCOMPRESSED_QUADRANT) != (self.width is InstWidth.WORD):
            self._fail(f"{what} quadrant {quadrant:#04b} disagrees with width")

    def _validate_operand(self, operand: OperandDescriptor) -> None:
        if operand.kind is OperandKind.NONE:
            self._fail("operand descriptors of kind NONE are not listed")
        if self.is_compressed:
            if operand.field is not SWIZZLED or operand.imm_format is not None:
                self._fail("compressed operands must be SWIZZLED without imm_format")
            return
        if (operand.kind is OperandKind.IMM) != (operand.imm_format is not None):
            self._fail(f"{operand.kind.value} operand has imm_format {operand.imm_format}")
        if not isinstance(operand.field, BitField) or operand.field.mask <= 0:
            self._fail("32-bit operands need a non-zero BitField")
        if operand.field.mask & ~self.width.mask:
            self._fail(f"operand mask 0x{operand.field.mask:x} is wider than 32 bits")
        if operand.imm_format in (None, ImmFormat.UNSIGNED) and not is_contiguous_mask(
            operand.field.mask
        ):
            self._fail(f"operand mask 0x{operand.field.mask:08x} is not a single bit run")
        if self.pattern is not None and operand.field.mask & self.pattern.mask:
            self._fail(
                f"operand mask 0x{operand.field.mask:08x} overlaps "
                f"match mask 0x{self.pattern.mask:08x}"
            )

    def _validate(self) -> None:
        if not self.name:
            raise InvalidEncodingError(repr(self.id), "empty mnemonic")
        if len(self.operands) > MAX_OPERANDS:
            self._fail(f"{len(self.operands)} operands, at most {MAX_OPERANDS} allowed")
        if self.pattern is not None:
            self._validate_pattern(self.pattern, "match")
            if self.recognition is not None:
                self._fail("recognition patterns are for placeholders only")
        elif self.alias_of is not None:
            self._fail("a placeholder cannot alias another rule")
        if self.recognition is not None:
            self._validate_pattern(self.recognition, "recognition")
        if self.alias_of == self.id:
            self._fail("a rule cannot alias itself")
        for operand in self.operands:
            self._validate_operand(operand)

    def __str__(self) -> str:
        if self.pattern is None:
            return f"{self.name} (placeholder)"
        return f"{self.name} {self.pattern}"
