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

"""Generic operand extraction for 32-bit encodings.

Operand Extraction
==================

Every operand of a 32-bit rule is a ``BitField``. Registers and CSR numbers
are a plain mask-and-shift:

    value = (word & mask) >> trailing_zeros(mask)

Immediates are reassembled per ``ImmFormat``. The immediate bit layouts
(see the RISC-V unprivileged ISA manual, Figure 2.4):

    I-type:  imm[11:0]                   = inst[31:20]
    S-type:  imm[11:5] | imm[4:0]        = inst[31:25] | inst[11:7]
    B-type:  imm[12|10:5] | imm[4:1|11]  = inst[31:25] | inst[11:7]
    U-type:  imm[31:12]                  = inst[31:12], kept in place
    J-type:  imm[20|10:1|11|19:12]       = inst[31:12]

All but UNSIGNED are sign-extended to a Python int.
"""

from collections.abc import Callable

from rvdecode.catalog.encoding import BitField, EncodingRule, ImmFormat, OperandDescriptor
from rvdecode.utils.riscv_utils import bit, bits, sign_extend, to_signed32


def _imm_unsigned(word: int, field: BitField) -> int:
    return field.extract(word)


def _imm_i(word: int, field: BitField) -> int:
    return sign_extend(field.extract(word), 12)


def _imm_s(word: int, field: BitField) -> int:
    word &= field.mask
    return sign_extend((bits(word, 31, 25) << 5) | bits(word, 11, 7), 12)


def _imm_b(word: int, field: BitField) -> int:
    word &= field.mask
    return sign_extend(
        (bit(word, 31) << 12)
        | (bit(word, 7) << 11)
        | (bits(word, 30, 25) << 5)
        | (bits(word, 11, 8) << 1),
        13,
    )


def _imm_u(word: int, field: BitField) -> int:
    return to_signed32(word & field.mask)


def _imm_j(word: int, field: BitField) -> int:
    word &= field.mask
    return sign_extend(
        (bit(word, 31) << 20)
        | (bits(word, 19, 12) << 12)
        | (bit(word, 20) << 11)
        | (bits(word, 30, 21) << 1),
        21,
    )


IMMEDIATE_ASSEMBLERS: dict[ImmFormat, Callable[[int, BitField], int]] = {
    ImmFormat.UNSIGNED: _imm_unsigned,
    ImmFormat.I: _imm_i,
    ImmFormat.S: _imm_s,
    ImmFormat.B: _imm_b,
    ImmFormat.U: _imm_u,
    ImmFormat.J: _imm_j,
}

_missing = set(ImmFormat) - IMMEDIATE_ASSEMBLERS.keys()
if _missing:
    raise RuntimeError(f"no immediate assembler for {sorted(f.name for f in _missing)}")


def extract_operand(operand: OperandDescriptor, word: int) -> int:
    """Extract one generic operand from a 32-bit word.

    Raises:
        TypeError: If the operand is SWIZZLED (compressed operands are
            extracted by the compressed operand decoder)
    """
    if not isinstance(operand.field, BitField):
        raise TypeError(f"operand field {operand.field!r} is not a BitField")
    if operand.imm_format is None:
        return operand.field.extract(word)
    return IMMEDIATE_ASSEMBLERS[operand.imm_format](word, operand.field)


def extract_operands(rule: EncodingRule, word: int) -> tuple[int, ...]:
    """Extract all operands of a 32-bit rule, in descriptor order."""
    return tuple(extract_operand(operand, word) for operand in rule.operands)
