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

"""Rule tables mapping instruction mnemonics to encodings.

Rule Tables
===========

This module is the static encoding table the catalog is built from. Each
entry is written as

    (mnemonic, identity, match_value, match_mask, category, operand, ...)

through the small factories below, and each table group is listed in
priority order.

Priority:
    Encodings are not disjoint. When a word matches several rules, the rule
    that appears first in RULE_TABLE wins, so a narrower mask is always
    listed before a broader mask of the same opcode family:

        c.ebreak (0xffff)  before  c.jalr (0xf07f)  before  c.add (0xf003)
        c.jr     (0xf07f)  before  c.mv   (0xf003)
        c.addi16sp (rd == sp)  before  c.lui
        c.srli64 / c.srai64 / c.slli64 (shamt == 0)  before  the general shift

    Reordering RULE_TABLE changes matching results.

Table Groups:
    BASE_RULES        RV32I, including the explicit ``illegal`` encoding
    CSR_RULES         Zicsr
    RV64I_RULES       placeholders
    MUL_DIV_RULES     RV32M
    RV64M_RULES       placeholders
    ATOMIC_RULES      placeholders (RV32A, RV64A)
    FLOAT_RULES       placeholders (RV32F, RV64F, RV32D, RV64D)
    PRIVILEGED_RULES  placeholders
    COMPRESSED_RULES  C extension (16-bit), operands SWIZZLED

Placeholders reserve an identity without a decodable encoding. Their
optional recognition pattern is the standard encoding of the instruction and
is only used to report "not implemented" rather than "no match".

Adding New Instructions:
    1. Add a member to InstId in the same relative position
    2. Add its entry to the appropriate table here, respecting priority
    3. For compressed rules, register an operand routine in
       rvdecode.decoder.compressed
"""

from rvdecode.catalog.encoding import (
    SWIZZLED,
    BitField,
    Category,
    EncodingRule,
    ImmFormat,
    InstWidth,
    MatchPattern,
    OperandDescriptor,
    OperandKind,
    OperandMode,
)
from rvdecode.catalog.inst_id import InstId
from rvdecode.config import (
    AMO_MASK,
    C_ARITH_MASK,
    C_FUNCT3_MASK,
    C_FUNCT3_RD_MASK,
    C_FUNCT4_MASK,
    C_FUNCT4_RS2_MASK,
    C_SHIFT_FUNCT_MASK,
    C_SHIFT_ZERO_MASK,
    C_SLLI_ZERO_MASK,
    EXACT_MASK,
    FENCE_MASK,
    FENCE_PRED_MASK,
    FENCE_SUCC_MASK,
    FP_FMT_LOW7_MASK,
    FP_TOP12_FUNCT3_LOW7_MASK,
    FP_TOP12_LOW7_MASK,
    FP_TOP7_LOW7_MASK,
    FUNCT3_LOW7_MASK,
    IMM_BRANCH_MASK,
    IMM_TOP12_MASK,
    IMM_TOP20_MASK,
    LOW7_MASK,
    LR_MASK,
    MASK16,
    RD_MASK,
    RS1_MASK,
    RS2_MASK,
    SHAMT_MASK,
    TOP7_FUNCT3_LOW7_MASK,
)


def int_reg(mode: OperandMode, mask: int) -> OperandDescriptor:
    """Create an integer register operand of a 32-bit encoding."""
    return OperandDescriptor(OperandKind.INT_REG, mode, BitField(mask))


def imm(mask: int, imm_format: ImmFormat) -> OperandDescriptor:
    """Create an immediate operand of a 32-bit encoding."""
    return OperandDescriptor(OperandKind.IMM, OperandMode.NONE, BitField(mask), imm_format)


# 32-bit operand descriptors
RD_W = int_reg(OperandMode.WRITE, RD_MASK)
RS1_R = int_reg(OperandMode.READ, RS1_MASK)
RS2_R = int_reg(OperandMode.READ, RS2_MASK)
IMM_U = imm(IMM_TOP20_MASK, ImmFormat.U)
IMM_J = imm(IMM_TOP20_MASK, ImmFormat.J)
IMM_I = imm(IMM_TOP12_MASK, ImmFormat.I)
IMM_S = imm(IMM_BRANCH_MASK, ImmFormat.S)
IMM_B = imm(IMM_BRANCH_MASK, ImmFormat.B)
SHAMT = imm(SHAMT_MASK, ImmFormat.UNSIGNED)
ZIMM = imm(RS1_MASK, ImmFormat.UNSIGNED)  # csrr*i: rs1 field holds a 5-bit immediate
FENCE_PRED = imm(FENCE_PRED_MASK, ImmFormat.UNSIGNED)
FENCE_SUCC = imm(FENCE_SUCC_MASK, ImmFormat.UNSIGNED)
CSR_RW = OperandDescriptor(OperandKind.CS_REG, OperandMode.READ_WRITE, BitField(IMM_TOP12_MASK))

# 16-bit operand descriptors
C_RD_W = OperandDescriptor(OperandKind.INT_REG, OperandMode.WRITE, SWIZZLED)
C_RS1_R = OperandDescriptor(OperandKind.INT_REG, OperandMode.READ, SWIZZLED)
C_RS2_R = OperandDescriptor(OperandKind.INT_REG, OperandMode.READ, SWIZZLED)
C_IMM = OperandDescriptor(OperandKind.IMM, OperandMode.NONE, SWIZZLED)


def rule(
    name: str,
    inst_id: InstId,
    value: int,
    mask: int,
    category: Category,
    *operands: OperandDescriptor,
) -> EncodingRule:
    """Create a 32-bit rule."""
    return EncodingRule(
        name, inst_id, category, operands, InstWidth.WORD, MatchPattern(value, mask)
    )


def c_rule(
    name: str,
    inst_id: InstId,
    value: int,
    mask: int,
    category: Category,
    *operands: OperandDescriptor,
) -> EncodingRule:
    """Create a 16-bit (compressed) rule."""
    return EncodingRule(
        name, inst_id, category, operands, InstWidth.COMPRESSED, MatchPattern(value, mask)
    )


def c_alias(
    name: str,
    inst_id: InstId,
    value: int,
    mask: int,
    category: Category,
    *operands: OperandDescriptor,
    of: InstId,
) -> EncodingRule:
    """Create a compressed rule that deliberately shares an earlier pattern.

    Used for XLEN-dependent reinterpretations (c.flw in RV32 is c.ld in
    RV64). The earlier rule always wins in decode.
    """
    return EncodingRule(
        name,
        inst_id,
        category,
        operands,
        InstWidth.COMPRESSED,
        MatchPattern(value, mask),
        alias_of=of,
    )


def placeholder(
    name: str, inst_id: InstId, value: int | None = None, mask: int | None = None
) -> EncodingRule:
    """Create a placeholder, optionally with a recognition pattern."""
    recognition = MatchPattern(value, mask) if mask is not None else None
    return EncodingRule(name, inst_id, Category.UNCATEGORIZED, recognition=recognition)


BASE_RULES: tuple[EncodingRule, ...] = (
    rule("illegal", InstId.ILLEGAL, 0xFFFFFFFF, EXACT_MASK, Category.UNCATEGORIZED),
    rule("lui", InstId.LUI, 0x37, LOW7_MASK, Category.INT, RD_W, IMM_U),
    rule("auipc", InstId.AUIPC, 0x17, LOW7_MASK, Category.INT, RD_W, IMM_U),
    rule("jal", InstId.JAL, 0x6F, LOW7_MASK, Category.BRANCH, RD_W, IMM_J),
    rule("jalr", InstId.JALR, 0x0067, FUNCT3_LOW7_MASK, Category.BRANCH, RD_W, RS1_R, IMM_I),
    # Branches
    rule("beq", InstId.BEQ, 0x0063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    rule("bne", InstId.BNE, 0x1063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    rule("blt", InstId.BLT, 0x4063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    rule("bge", InstId.BGE, 0x5063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    rule("bltu", InstId.BLTU, 0x6063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    rule("bgeu", InstId.BGEU, 0x7063, FUNCT3_LOW7_MASK, Category.BRANCH, RS1_R, RS2_R, IMM_B),
    # Loads
    rule("lb", InstId.LB, 0x0003, FUNCT3_LOW7_MASK, Category.LOAD, RD_W, RS1_R, IMM_I),
    rule("lh", InstId.LH, 0x1003, FUNCT3_LOW7_MASK, Category.LOAD, RD_W, RS1_R, IMM_I),
    rule("lw", InstId.LW, 0x2003, FUNCT3_LOW7_MASK, Category.LOAD, RD_W, RS1_R, IMM_I),
    rule("lbu", InstId.LBU, 0x4003, FUNCT3_LOW7_MASK, Category.LOAD, RD_W, RS1_R, IMM_I),
    rule("lhu", InstId.LHU, 0x5003, FUNCT3_LOW7_MASK, Category.LOAD, RD_W, RS1_R, IMM_I),
    # Stores
    rule("sb", InstId.SB, 0x0023, FUNCT3_LOW7_MASK, Category.STORE, RS1_R, RS2_R, IMM_S),
    rule("sh", InstId.SH, 0x1023, FUNCT3_LOW7_MASK, Category.STORE, RS1_R, RS2_R, IMM_S),
    rule("sw", InstId.SW, 0x2023, FUNCT3_LOW7_MASK, Category.STORE, RS1_R, RS2_R, IMM_S),
    # Immediate ALU
    rule("addi", InstId.ADDI, 0x0013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("slti", InstId.SLTI, 0x2013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("sltiu", InstId.SLTIU, 0x3013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("xori", InstId.XORI, 0x4013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("ori", InstId.ORI, 0x6013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("andi", InstId.ANDI, 0x7013, FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, IMM_I),
    rule("slli", InstId.SLLI, 0x1013, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, SHAMT),
    rule("srli", InstId.SRLI, 0x5013, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, SHAMT),
    rule("srai", InstId.SRAI, 0x40005013, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, SHAMT),
    # Register ALU
    rule("add", InstId.ADD, 0x0033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("sub", InstId.SUB, 0x40000033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("sll", InstId.SLL, 0x1033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("slt", InstId.SLT, 0x2033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("sltu", InstId.SLTU, 0x3033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("xor", InstId.XOR, 0x4033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("srl", InstId.SRL, 0x5033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("sra", InstId.SRA, 0x40005033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("or", InstId.OR, 0x6033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    rule("and", InstId.AND, 0x7033, TOP7_FUNCT3_LOW7_MASK, Category.INT, RD_W, RS1_R, RS2_R),
    # Memory ordering and environment
    rule("fence", InstId.FENCE, 0x000F, FENCE_MASK, Category.INT, FENCE_PRED, FENCE_SUCC),
    rule("fencei", InstId.FENCEI, 0x100F, EXACT_MASK, Category.UNCATEGORIZED),
    rule("ecall", InstId.ECALL, 0x00000073, EXACT_MASK, Category.UNCATEGORIZED),
    rule("ebreak", InstId.EBREAK, 0x00100073, EXACT_MASK, Category.UNCATEGORIZED),
)

CSR_RULES: tuple[EncodingRule, ...] = (
    rule("csrrw", InstId.CSRRW, 0x1073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, RS1_R, CSR_RW),
    rule("csrrs", InstId.CSRRS, 0x2073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, RS1_R, CSR_RW),
    rule("csrrc", InstId.CSRRC, 0x3073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, RS1_R, CSR_RW),
    rule("csrrwi", InstId.CSRRWI, 0x5073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, ZIMM, CSR_RW),
    rule("csrrsi", InstId.CSRRSI, 0x6073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, ZIMM, CSR_RW),
    rule("csrrci", InstId.CSRRCI, 0x7073, FUNCT3_LOW7_MASK, Category.CSR, RD_W, ZIMM, CSR_RW),
)

RV64I_RULES: tuple[EncodingRule, ...] = (
    placeholder("lwu", InstId.LWU, 0x6003, FUNCT3_LOW7_MASK),
    placeholder("ld", InstId.LD, 0x3003, FUNCT3_LOW7_MASK),
    placeholder("sd", InstId.SD, 0x3023, FUNCT3_LOW7_MASK),
    placeholder("addiw", InstId.ADDIW, 0x001B, FUNCT3_LOW7_MASK),
    placeholder("slliw", InstId.SLLIW, 0x101B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("srliw", InstId.SRLIW, 0x501B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("sraiw", InstId.SRAIW, 0x4000501B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("addw", InstId.ADDW, 0x003B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("subw", InstId.SUBW, 0x4000003B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("sllw", InstId.SLLW, 0x103B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("srlw", InstId.SRLW, 0x503B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("sraw", InstId.SRAW, 0x4000503B, TOP7_FUNCT3_LOW7_MASK),
)

MUL_DIV_RULES: tuple[EncodingRule, ...] = (
    rule("mul", InstId.MUL, 0x02000033, TOP7_FUNCT3_LOW7_MASK, Category.MULTIPLY, RD_W, RS1_R, RS2_R),
    rule("mulh", InstId.MULH, 0x02001033, TOP7_FUNCT3_LOW7_MASK, Category.MULTIPLY, RD_W, RS1_R, RS2_R),
    rule("mulhsu", InstId.MULHSU, 0x02002033, TOP7_FUNCT3_LOW7_MASK, Category.MULTIPLY, RD_W, RS1_R, RS2_R),
    rule("mulhu", InstId.MULHU, 0x02003033, TOP7_FUNCT3_LOW7_MASK, Category.MULTIPLY, RD_W, RS1_R, RS2_R),
    rule("div", InstId.DIV, 0x02004033, TOP7_FUNCT3_LOW7_MASK, Category.DIVIDE, RD_W, RS1_R, RS2_R),
    rule("divu", InstId.DIVU, 0x02005033, TOP7_FUNCT3_LOW7_MASK, Category.DIVIDE, RD_W, RS1_R, RS2_R),
    rule("rem", InstId.REM, 0x02006033, TOP7_FUNCT3_LOW7_MASK, Category.DIVIDE, RD_W, RS1_R, RS2_R),
    rule("remu", InstId.REMU, 0x02007033, TOP7_FUNCT3_LOW7_MASK, Category.DIVIDE, RD_W, RS1_R, RS2_R),
)

RV64M_RULES: tuple[EncodingRule, ...] = (
    placeholder("mulw", InstId.MULW, 0x0200003B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("divw", InstId.DIVW, 0x0200403B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("divuw", InstId.DIVUW, 0x0200503B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("remw", InstId.REMW, 0x0200603B, TOP7_FUNCT3_LOW7_MASK),
    placeholder("remuw", InstId.REMUW, 0x0200703B, TOP7_FUNCT3_LOW7_MASK),
)

# funct5 in bits [31:27], funct3 selects .w (010) or .d (011)
ATOMIC_RULES: tuple[EncodingRule, ...] = (
    placeholder("lr_w", InstId.LR_W, 0x1000202F, LR_MASK),
    placeholder("sc_w", InstId.SC_W, 0x1800202F, AMO_MASK),
    placeholder("amoswap_w", InstId.AMOSWAP_W, 0x0800202F, AMO_MASK),
    placeholder("amoadd_w", InstId.AMOADD_W, 0x0000202F, AMO_MASK),
    placeholder("amoxor_w", InstId.AMOXOR_W, 0x2000202F, AMO_MASK),
    placeholder("amoand_w", InstId.AMOAND_W, 0x6000202F, AMO_MASK),
    placeholder("amoor_w", InstId.AMOOR_W, 0x4000202F, AMO_MASK),
    placeholder("amomin_w", InstId.AMOMIN_W, 0x8000202F, AMO_MASK),
    placeholder("amomax_w", InstId.AMOMAX_W, 0xA000202F, AMO_MASK),
    placeholder("amominu_w", InstId.AMOMINU_W, 0xC000202F, AMO_MASK),
    placeholder("amomaxu_w", InstId.AMOMAXU_W, 0xE000202F, AMO_MASK),
    placeholder("lr_d", InstId.LR_D, 0x1000302F, LR_MASK),
    placeholder("sc_d", InstId.SC_D, 0x1800302F, AMO_MASK),
    placeholder("amoswap_d", InstId.AMOSWAP_D, 0x0800302F, AMO_MASK),
    placeholder("amoadd_d", InstId.AMOADD_D, 0x0000302F, AMO_MASK),
    placeholder("amoxor_d", InstId.AMOXOR_D, 0x2000302F, AMO_MASK),
    placeholder("amoand_d", InstId.AMOAND_D, 0x6000302F, AMO_MASK),
    placeholder("amoor_d", InstId.AMOOR_D, 0x4000302F, AMO_MASK),
    placeholder("amomin_d", InstId.AMOMIN_D, 0x8000302F, AMO_MASK),
    placeholder("amomax_d", InstId.AMOMAX_D, 0xA000302F, AMO_MASK),
    placeholder("amominu_d", InstId.AMOMINU_D, 0xC000302F, AMO_MASK),
    placeholder("amomaxu_d", InstId.AMOMAXU_D, 0xE000302F, AMO_MASK),
)

# fmt in bits [26:25]: 00 single, 01 double
FLOAT_RULES: tuple[EncodingRule, ...] = (
    # RV32F
    placeholder("flw", InstId.FLW, 0x2007, FUNCT3_LOW7_MASK),
    placeholder("fsw", InstId.FSW, 0x2027, FUNCT3_LOW7_MASK),
    placeholder("fmadd_s", InstId.FMADD_S, 0x00000043, FP_FMT_LOW7_MASK),
    placeholder("fmsub_s", InstId.FMSUB_S, 0x00000047, FP_FMT_LOW7_MASK),
    placeholder("fnmsub_s", InstId.FNMSUB_S, 0x0000004B, FP_FMT_LOW7_MASK),
    placeholder("fnmadd_s", InstId.FNMADD_S, 0x0000004F, FP_FMT_LOW7_MASK),
    placeholder("fadd_s", InstId.FADD_S, 0x00000053, FP_TOP7_LOW7_MASK),
    placeholder("fsub_s", InstId.FSUB_S, 0x08000053, FP_TOP7_LOW7_MASK),
    placeholder("fmul_s", InstId.FMUL_S, 0x10000053, FP_TOP7_LOW7_MASK),
    placeholder("fdiv_s", InstId.FDIV_S, 0x18000053, FP_TOP7_LOW7_MASK),
    placeholder("fsqrt_s", InstId.FSQRT_S, 0x58000053, FP_TOP12_LOW7_MASK),
    placeholder("fsgnj_s", InstId.FSGNJ_S, 0x20000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fsgnjn_s", InstId.FSGNJN_S, 0x20001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fsgnjx_s", InstId.FSGNJX_S, 0x20002053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fmin_s", InstId.FMIN_S, 0x28000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fmax_s", InstId.FMAX_S, 0x28001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fcvt_w_s", InstId.FCVT_W_S, 0xC0000053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_wu_s", InstId.FCVT_WU_S, 0xC0100053, FP_TOP12_LOW7_MASK),
    placeholder("fmv_x_w", InstId.FMV_X_W, 0xE0000053, FP_TOP12_FUNCT3_LOW7_MASK),
    placeholder("feq_s", InstId.FEQ_S, 0xA0002053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("flt_s", InstId.FLT_S, 0xA0001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fle_s", InstId.FLE_S, 0xA0000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fclass_s", InstId.FCLASS_S, 0xE0001053, FP_TOP12_FUNCT3_LOW7_MASK),
    placeholder("fcvt_s_w", InstId.FCVT_S_W, 0xD0000053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_s_wu", InstId.FCVT_S_WU, 0xD0100053, FP_TOP12_LOW7_MASK),
    placeholder("fmv_w_x", InstId.FMV_W_X, 0xF0000053, FP_TOP12_FUNCT3_LOW7_MASK),
    # RV64F
    placeholder("fcvt_l_s", InstId.FCVT_L_S, 0xC0200053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_lu_s", InstId.FCVT_LU_S, 0xC0300053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_s_l", InstId.FCVT_S_L, 0xD0200053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_s_lu", InstId.FCVT_S_LU, 0xD0300053, FP_TOP12_LOW7_MASK),
    # RV32D
    placeholder("fld", InstId.FLD, 0x3007, FUNCT3_LOW7_MASK),
    placeholder("fsd", InstId.FSD, 0x3027, FUNCT3_LOW7_MASK),
    placeholder("fmadd_d", InstId.FMADD_D, 0x02000043, FP_FMT_LOW7_MASK),
    placeholder("fmsub_d", InstId.FMSUB_D, 0x02000047, FP_FMT_LOW7_MASK),
    placeholder("fnmsub_d", InstId.FNMSUB_D, 0x0200004B, FP_FMT_LOW7_MASK),
    placeholder("fnmadd_d", InstId.FNMADD_D, 0x0200004F, FP_FMT_LOW7_MASK),
    placeholder("fadd_d", InstId.FADD_D, 0x02000053, FP_TOP7_LOW7_MASK),
    placeholder("fsub_d", InstId.FSUB_D, 0x0A000053, FP_TOP7_LOW7_MASK),
    placeholder("fmul_d", InstId.FMUL_D, 0x12000053, FP_TOP7_LOW7_MASK),
    placeholder("fdiv_d", InstId.FDIV_D, 0x1A000053, FP_TOP7_LOW7_MASK),
    placeholder("fsqrt_d", InstId.FSQRT_D, 0x5A000053, FP_TOP12_LOW7_MASK),
    placeholder("fsgnj_d", InstId.FSGNJ_D, 0x22000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fsgnjn_d", InstId.FSGNJN_D, 0x22001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fsgnjx_d", InstId.FSGNJX_D, 0x22002053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fmin_d", InstId.FMIN_D, 0x2A000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fmax_d", InstId.FMAX_D, 0x2A001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fcvt_s_d", InstId.FCVT_S_D, 0x40100053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_d_s", InstId.FCVT_D_S, 0x42000053, FP_TOP12_LOW7_MASK),
    placeholder("feq_d", InstId.FEQ_D, 0xA2002053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("flt_d", InstId.FLT_D, 0xA2001053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fle_d", InstId.FLE_D, 0xA2000053, TOP7_FUNCT3_LOW7_MASK),
    placeholder("fclass_d", InstId.FCLASS_D, 0xE2001053, FP_TOP12_FUNCT3_LOW7_MASK),
    placeholder("fcvt_w_d", InstId.FCVT_W_D, 0xC2000053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_wu_d", InstId.FCVT_WU_D, 0xC2100053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_d_w", InstId.FCVT_D_W, 0xD2000053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_d_wu", InstId.FCVT_D_WU, 0xD2100053, FP_TOP12_LOW7_MASK),
    # RV64D
    placeholder("fcvt_l_d", InstId.FCVT_L_D, 0xC2200053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_lu_d", InstId.FCVT_LU_D, 0xC2300053, FP_TOP12_LOW7_MASK),
    placeholder("fmv_x_d", InstId.FMV_X_D, 0xE2000053, FP_TOP12_FUNCT3_LOW7_MASK),
    placeholder("fcvt_d_l", InstId.FCVT_D_L, 0xD2200053, FP_TOP12_LOW7_MASK),
    placeholder("fcvt_d_lu", InstId.FCVT_D_LU, 0xD2300053, FP_TOP12_LOW7_MASK),
    placeholder("fmv_d_x", InstId.FMV_D_X, 0xF2000053, FP_TOP12_FUNCT3_LOW7_MASK),
)

PRIVILEGED_RULES: tuple[EncodingRule, ...] = (
    placeholder("mret", InstId.MRET, 0x30200073, EXACT_MASK),
    placeholder("uret", InstId.URET, 0x00200073, EXACT_MASK),
    placeholder("sret", InstId.SRET, 0x10200073, EXACT_MASK),
    placeholder("wfi", InstId.WFI, 0x10500073, EXACT_MASK),
)

# Compressed operand bits are swizzled: every operand is SWIZZLED and is
# extracted by the compressed operand decoder, never by mask-and-shift.
COMPRESSED_RULES: tuple[EncodingRule, ...] = (
    # Quadrant 0
    c_rule("c.addi4spn", InstId.C_ADDI4SPN, 0x0000, C_FUNCT3_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.fld", InstId.C_FLD, 0x2000, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_alias("c.lq", InstId.C_LQ, 0x2000, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM, of=InstId.C_FLD),
    c_rule("c.lw", InstId.C_LW, 0x4000, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.flw", InstId.C_FLW, 0x6000, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_alias("c.ld", InstId.C_LD, 0x6000, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM, of=InstId.C_FLW),
    c_rule("c.fsd", InstId.C_FSD, 0xA000, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
    c_alias("c.sq", InstId.C_SQ, 0xA000, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM, of=InstId.C_FSD),
    c_rule("c.sw", InstId.C_SW, 0xC000, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
    c_rule("c.fsw", InstId.C_FSW, 0xE000, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
    c_alias("c.sd", InstId.C_SD, 0xE000, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM, of=InstId.C_FSW),
    # Quadrant 1
    c_rule("c.addi", InstId.C_ADDI, 0x0001, C_FUNCT3_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.jal", InstId.C_JAL, 0x2001, C_FUNCT3_MASK, Category.BRANCH, C_RD_W, C_IMM),
    c_rule("c.li", InstId.C_LI, 0x4001, C_FUNCT3_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.addi16sp", InstId.C_ADDI16SP, 0x6101, C_FUNCT3_RD_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.lui", InstId.C_LUI, 0x6001, C_FUNCT3_MASK, Category.INT, C_RD_W, C_IMM),
    c_rule("c.srli64", InstId.C_SRLI64, 0x8001, C_SHIFT_ZERO_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.srli", InstId.C_SRLI, 0x8001, C_SHIFT_FUNCT_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.srai64", InstId.C_SRAI64, 0x8401, C_SHIFT_ZERO_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.srai", InstId.C_SRAI, 0x8401, C_SHIFT_FUNCT_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.andi", InstId.C_ANDI, 0x8801, C_SHIFT_FUNCT_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.sub", InstId.C_SUB, 0x8C01, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.xor", InstId.C_XOR, 0x8C21, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.or", InstId.C_OR, 0x8C41, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.and", InstId.C_AND, 0x8C61, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.subw", InstId.C_SUBW, 0x9C01, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.addw", InstId.C_ADDW, 0x9C21, C_ARITH_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.j", InstId.C_J, 0xA001, C_FUNCT3_MASK, Category.BRANCH, C_RD_W, C_IMM),
    c_rule("c.beqz", InstId.C_BEQZ, 0xC001, C_FUNCT3_MASK, Category.BRANCH, C_RS1_R, C_RS2_R, C_IMM),
    c_rule("c.bnez", InstId.C_BNEZ, 0xE001, C_FUNCT3_MASK, Category.BRANCH, C_RS1_R, C_RS2_R, C_IMM),
    # Quadrant 2
    c_rule("c.slli64", InstId.C_SLLI64, 0x0002, C_SLLI_ZERO_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.slli", InstId.C_SLLI, 0x0002, C_FUNCT3_MASK, Category.INT, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.fldsp", InstId.C_FLDSP, 0x2002, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.lwsp", InstId.C_LWSP, 0x4002, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.flwsp", InstId.C_FLWSP, 0x6002, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM),
    c_alias("c.ldsp", InstId.C_LDSP, 0x6002, C_FUNCT3_MASK, Category.LOAD, C_RD_W, C_RS1_R, C_IMM, of=InstId.C_FLWSP),
    c_rule("c.jr", InstId.C_JR, 0x8002, C_FUNCT4_RS2_MASK, Category.BRANCH, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.mv", InstId.C_MV, 0x8002, C_FUNCT4_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.ebreak", InstId.C_EBREAK, 0x9002, MASK16, Category.UNCATEGORIZED),
    c_rule("c.jalr", InstId.C_JALR, 0x9002, C_FUNCT4_RS2_MASK, Category.BRANCH, C_RD_W, C_RS1_R, C_IMM),
    c_rule("c.add", InstId.C_ADD, 0x9002, C_FUNCT4_MASK, Category.INT, C_RD_W, C_RS1_R, C_RS2_R),
    c_rule("c.fsdsp", InstId.C_FSDSP, 0xA002, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
    c_rule("c.swsp", InstId.C_SWSP, 0xC002, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
    c_rule("c.fswsp", InstId.C_FSWSP, 0xE002, C_FUNCT3_MASK, Category.STORE, C_RS1_R, C_RS2_R, C_IMM),
)

# Full table in priority order: first matching rule wins
RULE_TABLE: tuple[EncodingRule, ...] = (
    BASE_RULES
    + CSR_RULES
    + RV64I_RULES
    + MUL_DIV_RULES
    + RV64M_RULES
    + ATOMIC_RULES
    + FLOAT_RULES
    + PRIVILEGED_RULES
    + COMPRESSED_RULES
)
