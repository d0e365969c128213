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

"""RISC-V Compressed (C extension) operand decoders.

Compressed Operand Decoding
===========================

Compressed operand bits are scattered and opcode-specific, so the catalog
marks them SWIZZLED and this module supplies one routine per identity. Each
routine takes the 16-bit instruction and returns operand values in the
rule's descriptor order.

The C extension defines three quadrants based on bits [1:0]:
    - Quadrant 0 (00): Stack-relative loads/stores, wide immediates
    - Quadrant 1 (01): Control flow, arithmetic, immediates
    - Quadrant 2 (10): Register ops, stack-pointer-relative ops

Register Mapping:
    Compressed instructions use 3-bit register fields that map to x8-x15:
    - rd' = {2'b01, 3-bit-field} (i.e., add 8 to the 3-bit value)

Implicit Registers:
    Registers the encoding implies are returned explicitly, so that every
    routine's result lines up with the rule's descriptors:

        c.addi4spn  (rd', 2, nzuimm)      c.lwsp   (rd, 2, uimm)
        c.jal       (1, offset)           c.j      (0, offset)
        c.beqz      (rs1', 0, offset)     c.li     (rd, 0, imm)
        c.jr        (0, rs1, 0)           c.jalr   (1, rs1, 0)
        c.mv        (rd, 0, rs2)          c.add    (rd, rd, rs2)

Example Usage:
    >>> # C.ADDI x10, 5
    >>> COMPRESSED_DECODERS[InstId.C_ADDI](0x0515)
    (10, 10, 5)

Registers are not checked for architectural legality (c.addi4spn with a
zero immediate, c.lwsp with rd == x0); the matcher only identifies words.
"""

from collections.abc import Callable, Mapping

from rvdecode.catalog.inst_id import InstId
from rvdecode.config import COMPRESSED_REG_BASE, REG_RA, REG_SP, REG_ZERO
from rvdecode.decoder_types import CompressedOperandDecoder, OperandValues, RegisterIndex
from rvdecode.exceptions import UnknownIdentityError
from rvdecode.utils.riscv_utils import bits, sign_extend
from rvdecode.utils.validation import assert_bit_width, assert_in_range


def _unpack_bits(half: int, *fields: tuple[int, int, int]) -> int:
    """Gather scattered bit fields of a 16-bit instruction into one value.

    Args:
        half: 16-bit instruction
        fields: Variable number of tuples, each containing:
            - position: Bit position (LSB) where the field starts in ``half``
            - mask: Bit mask for the field width
            - destination: Bit position of the field in the result

    Returns:
        Reassembled (unsigned) value
    """
    result = 0
    for position, mask, destination in fields:
        result |= ((half >> position) & mask) << destination
    return result


def expand_reg(field: int) -> RegisterIndex:
    """Convert a 3-bit compressed register field to a full index (8-15).

    Raises:
        ValidationError: If field is not a 3-bit value
    """
    assert_in_range(field, 0, 7, "compressed register field")
    return RegisterIndex(field + COMPRESSED_REG_BASE)


def _rd(half: int) -> int:
    return bits(half, 11, 7)


def _rs2(half: int) -> int:
    return bits(half, 6, 2)


def _rd_prime_low(half: int) -> int:
    """rd' / rs2' in bits [4:2]."""
    return expand_reg(bits(half, 4, 2))


def _rs1_prime(half: int) -> int:
    """rs1' / rd' in bits [9:7]."""
    return expand_reg(bits(half, 9, 7))


# Immediate layouts, as (position, mask, destination) fields


def _imm6(half: int) -> int:
    # imm[5] -> bit [12], imm[4:0] -> bits [6:2]
    return _unpack_bits(half, (12, 0x1, 5), (2, 0x1F, 0))


def _nzuimm_addi4spn(half: int) -> int:
    return _unpack_bits(
        half,
        (11, 0x3, 4),  # nzuimm[5:4] <- bits [12:11]
        (7, 0xF, 6),  # nzuimm[9:6] <- bits [10:7]
        (6, 0x1, 2),  # nzuimm[2] <- bit [6]
        (5, 0x1, 3),  # nzuimm[3] <- bit [5]
    )


def _uimm_word(half: int) -> int:
    # uimm[5:3] <- [12:10], uimm[2] <- [6], uimm[6] <- [5]
    return _unpack_bits(half, (10, 0x7, 3), (6, 0x1, 2), (5, 0x1, 6))


def _uimm_double(half: int) -> int:
    # uimm[5:3] <- [12:10], uimm[7:6] <- [6:5]
    return _unpack_bits(half, (10, 0x7, 3), (5, 0x3, 6))


def _uimm_quad(half: int) -> int:
    # uimm[5:4] <- [12:11], uimm[8] <- [10], uimm[7:6] <- [6:5]
    return _unpack_bits(half, (11, 0x3, 4), (10, 0x1, 8), (5, 0x3, 6))


def _jump_offset(half: int) -> int:
    return sign_extend(
        _unpack_bits(
            half,
            (12, 0x1, 11),  # offset[11]
            (11, 0x1, 4),  # offset[4]
            (9, 0x3, 8),  # offset[9:8]
            (8, 0x1, 10),  # offset[10]
            (7, 0x1, 6),  # offset[6]
            (6, 0x1, 7),  # offset[7]
            (3, 0x7, 1),  # offset[3:1]
            (2, 0x1, 5),  # offset[5]
        ),
        12,
    )


def _branch_offset(half: int) -> int:
    return sign_extend(
        _unpack_bits(
            half,
            (12, 0x1, 8),  # offset[8]
            (10, 0x3, 3),  # offset[4:3]
            (5, 0x3, 6),  # offset[7:6]
            (3, 0x3, 1),  # offset[2:1]
            (2, 0x1, 5),  # offset[5]
        ),
        9,
    )


def _uimm_lwsp(half: int) -> int:
    # uimm[5] <- [12], uimm[4:2] <- [6:4], uimm[7:6] <- [3:2]
    return _unpack_bits(half, (12, 0x1, 5), (4, 0x7, 2), (2, 0x3, 6))


def _uimm_ldsp(half: int) -> int:
    # uimm[5] <- [12], uimm[4:3] <- [6:5], uimm[8:6] <- [4:2]
    return _unpack_bits(half, (12, 0x1, 5), (5, 0x3, 3), (2, 0x7, 6))


def _uimm_swsp(half: int) -> int:
    # uimm[5:2] <- [12:9], uimm[7:6] <- [8:7]
    return _unpack_bits(half, (9, 0xF, 2), (7, 0x3, 6))


def _uimm_sdsp(half: int) -> int:
    # uimm[5:3] <- [12:10], uimm[8:6] <- [9:7]
    return _unpack_bits(half, (10, 0x7, 3), (7, 0x7, 6))


# =============================================================================
# Quadrant 0 (bits [1:0] = 00)
# =============================================================================


def dec_c_addi4spn(half: int) -> OperandValues:
    """C.ADDI4SPN: addi rd', sp, nzuimm."""
    return (_rd_prime_low(half), REG_SP, _nzuimm_addi4spn(half))


def _load(uimm: Callable[[int], int]) -> CompressedOperandDecoder:
    def decode(half: int) -> OperandValues:
        return (_rd_prime_low(half), _rs1_prime(half), uimm(half))

    return decode


def _store(uimm: Callable[[int], int]) -> CompressedOperandDecoder:
    def decode(half: int) -> OperandValues:
        return (_rs1_prime(half), _rd_prime_low(half), uimm(half))

    return decode


dec_c_lw = _load(_uimm_word)
dec_c_ld = _load(_uimm_double)
dec_c_lq = _load(_uimm_quad)
dec_c_sw = _store(_uimm_word)
dec_c_sd = _store(_uimm_double)
dec_c_sq = _store(_uimm_quad)


# =============================================================================
# Quadrant 1 (bits [1:0] = 01)
# =============================================================================


def dec_c_addi(half: int) -> OperandValues:
    """C.ADDI: addi rd, rd, imm."""
    rd = _rd(half)
    return (rd, rd, sign_extend(_imm6(half), 6))


def dec_c_li(half: int) -> OperandValues:
    """C.LI: addi rd, x0, imm."""
    return (_rd(half), REG_ZERO, sign_extend(_imm6(half), 6))


def dec_c_jal(half: int) -> OperandValues:
    """C.JAL (RV32 only): jal ra, offset."""
    return (REG_RA, _jump_offset(half))


def dec_c_j(half: int) -> OperandValues:
    """C.J: jal x0, offset."""
    return (REG_ZERO, _jump_offset(half))


def dec_c_addi16sp(half: int) -> OperandValues:
    """C.ADDI16SP: addi sp, sp, nzimm (multiple of 16)."""
    nzimm = _unpack_bits(
        half,
        (12, 0x1, 9),  # nzimm[9]
        (6, 0x1, 4),  # nzimm[4]
        (5, 0x1, 6),  # nzimm[6]
        (3, 0x3, 7),  # nzimm[8:7]
        (2, 0x1, 5),  # nzimm[5]
    )
    return (REG_SP, REG_SP, sign_extend(nzimm, 10))


def dec_c_lui(half: int) -> OperandValues:
    """C.LUI: lui rd, nzimm (returned shifted into place)."""
    return (_rd(half), sign_extend(_imm6(half) << 12, 18))


def dec_c_shift_right(half: int) -> OperandValues:
    """C.SRLI / C.SRAI (and their 64 forms): shift rd' by shamt in place."""
    rd = _rs1_prime(half)
    return (rd, rd, _imm6(half))


def dec_c_andi(half: int) -> OperandValues:
    """C.ANDI: andi rd', rd', imm."""
    rd = _rs1_prime(half)
    return (rd, rd, sign_extend(_imm6(half), 6))


def dec_c_arith(half: int) -> OperandValues:
    """C.SUB / C.XOR / C.OR / C.AND / C.SUBW / C.ADDW: op rd', rd', rs2'."""
    rd = _rs1_prime(half)
    return (rd, rd, _rd_prime_low(half))


def dec_c_branch(half: int) -> OperandValues:
    """C.BEQZ / C.BNEZ: compare rs1' against x0."""
    return (_rs1_prime(half), REG_ZERO, _branch_offset(half))


# =============================================================================
# Quadrant 2 (bits [1:0] = 10)
# =============================================================================


def dec_c_slli(half: int) -> OperandValues:
    """C.SLLI (and C.SLLI64): slli rd, rd, shamt."""
    rd = _rd(half)
    return (rd, rd, _imm6(half))


def dec_c_lwsp(half: int) -> OperandValues:
    return (_rd(half), REG_SP, _uimm_lwsp(half))


def dec_c_ldsp(half: int) -> OperandValues:
    return (_rd(half), REG_SP, _uimm_ldsp(half))


def dec_c_jr(half: int) -> OperandValues:
    """C.JR: jalr x0, 0(rs1)."""
    return (REG_ZERO, _rd(half), 0)


def dec_c_jalr(half: int) -> OperandValues:
    """C.JALR: jalr ra, 0(rs1)."""
    return (REG_RA, _rd(half), 0)


def dec_c_mv(half: int) -> OperandValues:
    """C.MV: add rd, x0, rs2."""
    return (_rd(half), REG_ZERO, _rs2(half))


def dec_c_add(half: int) -> OperandValues:
    """C.ADD: add rd, rd, rs2."""
    rd = _rd(half)
    return (rd, rd, _rs2(half))


def dec_c_ebreak(half: int) -> OperandValues:
    return ()


def dec_c_swsp(half: int) -> OperandValues:
    return (REG_SP, _rs2(half), _uimm_swsp(half))


def dec_c_sdsp(half: int) -> OperandValues:
    return (REG_SP, _rs2(half), _uimm_sdsp(half))


# =============================================================================
# Dispatch table
# =============================================================================

COMPRESSED_DECODERS: dict[InstId, CompressedOperandDecoder] = {
    # Quadrant 0
    InstId.C_ADDI4SPN: dec_c_addi4spn,
    InstId.C_FLD: dec_c_ld,
    InstId.C_LQ: dec_c_lq,
    InstId.C_LW: dec_c_lw,
    InstId.C_FLW: dec_c_lw,
    InstId.C_LD: dec_c_ld,
    InstId.C_FSD: dec_c_sd,
    InstId.C_SQ: dec_c_sq,
    InstId.C_SW: dec_c_sw,
    InstId.C_FSW: dec_c_sw,
    InstId.C_SD: dec_c_sd,
    # Quadrant 1
    InstId.C_ADDI: dec_c_addi,
    InstId.C_JAL: dec_c_jal,
    InstId.C_LI: dec_c_li,
    InstId.C_ADDI16SP: dec_c_addi16sp,
    InstId.C_LUI: dec_c_lui,
    InstId.C_SRLI64: dec_c_shift_right,
    InstId.C_SRLI: dec_c_shift_right,
    InstId.C_SRAI64: dec_c_shift_right,
    InstId.C_SRAI: dec_c_shift_right,
    InstId.C_ANDI: dec_c_andi,
    InstId.C_SUB: dec_c_arith,
    InstId.C_XOR: dec_c_arith,
    InstId.C_OR: dec_c_arith,
    InstId.C_AND: dec_c_arith,
    InstId.C_SUBW: dec_c_arith,
    InstId.C_ADDW: dec_c_arith,
    InstId.C_J: dec_c_j,
    InstId.C_BEQZ: dec_c_branch,
    InstId.C_BNEZ: dec_c_branch,
    # Quadrant 2
    InstId.C_SLLI64: dec_c_slli,
    InstId.C_SLLI: dec_c_slli,
    InstId.C_FLDSP: dec_c_ldsp,
    InstId.C_LWSP: dec_c_lwsp,
    InstId.C_FLWSP: dec_c_lwsp,
    InstId.C_LDSP: dec_c_ldsp,
    InstId.C_JR: dec_c_jr,
    InstId.C_MV: dec_c_mv,
    InstId.C_EBREAK: dec_c_ebreak,
    InstId.C_JALR: dec_c_jalr,
    InstId.C_ADD: dec_c_add,
    InstId.C_FSDSP: dec_c_sdsp,
    InstId.C_SWSP: dec_c_swsp,
    InstId.C_FSWSP: dec_c_swsp,
}

_missing = {i for i in InstId if i.name.startswith("C_")} - COMPRESSED_DECODERS.keys()
if _missing:
    raise RuntimeError(f"no compressed operand decoder for {sorted(i.name for i in _missing)}")


def decode_compressed_operands(
    inst_id: InstId,
    half: int,
    decoders: Mapping[InstId, CompressedOperandDecoder] = COMPRESSED_DECODERS,
) -> OperandValues:
    """Extract the operands of a compressed instruction.

    Args:
        inst_id: Identity of the matched compressed rule
        half: 16-bit instruction
        decoders: Per-identity routines to dispatch through

    Returns:
        Operand values in descriptor order

    Raises:
        ValidationError: If half is wider than 16 bits
        UnknownIdentityError: If ``decoders`` has no routine for inst_id
    """
    assert_bit_width(half, 16, "compressed instruction")
    try:
        routine = decoders[inst_id]
    except KeyError:
        raise UnknownIdentityError(inst_id) from None
    return tuple(routine(half))
