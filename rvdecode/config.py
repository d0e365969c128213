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

"""Central configuration for the decoder.

Config
======

Bit-level constants shared by the encoding tables and the operand extraction
code, plus the runtime ``DecoderConfig`` knobs.

Field masks describe where an operand lives in a 32-bit word. Opcode masks
describe which bits a rule's match predicate constrains:

    LOW7_MASK              opcode only (U/J-type)
    FUNCT3_LOW7_MASK       funct3 + opcode (I/S/B-type)
    TOP7_FUNCT3_LOW7_MASK  funct7 + funct3 + opcode (R-type, shifts)

Compressed (16-bit) rules use the C_* masks; their operand bits are not
described by masks at all.
"""

import os
from dataclasses import dataclass

MASK32 = 0xFFFFFFFF
MASK16 = 0xFFFF

# Low two bits of a compressed instruction are never 0b11
COMPRESSED_QUADRANT_MASK = 0x3
UNCOMPRESSED_QUADRANT = 0x3

# Operand field masks (32-bit encodings)
RD_MASK = 0x1F << 7
RS1_MASK = 0x1F << 15
RS2_MASK = 0x1F << 20
IMM_TOP20_MASK = 0xFFFFF << 12
IMM_TOP12_MASK = 0xFFF << 20
IMM_BRANCH_MASK = 0xFE000F80  # shared by S-type and B-type immediates
SHAMT_MASK = 0x01F00000
FENCE_PRED_MASK = 0x0F000000
FENCE_SUCC_MASK = 0x00F00000

# Opcode masks (32-bit encodings)
LOW7_MASK = 0x7F
FUNCT3_LOW7_MASK = 0x707F
TOP7_FUNCT3_LOW7_MASK = 0xFE00707F
FENCE_MASK = 0xF00FFFFF
EXACT_MASK = MASK32

# Opcode masks for placeholder recognition patterns
AMO_MASK = 0xF800707F  # funct5 + funct3 + opcode, aq/rl free
LR_MASK = 0xF9F0707F  # as AMO_MASK, rs2 must be zero
FP_FMT_LOW7_MASK = 0x0600007F  # fused multiply-add: fmt + opcode, rm free
FP_TOP7_LOW7_MASK = 0xFE00007F  # funct7 + opcode, rm free
FP_TOP12_LOW7_MASK = 0xFFF0007F  # funct7 + rs2 selector + opcode, rm free
FP_TOP12_FUNCT3_LOW7_MASK = 0xFFF0707F

# Opcode masks (16-bit encodings)
C_FUNCT3_MASK = 0xE003
C_FUNCT3_RD_MASK = 0xEF83  # c.addi16sp: funct3 + rd == x2
C_FUNCT4_MASK = 0xF003
C_FUNCT4_RS2_MASK = 0xF07F  # c.jr, c.jalr: rs2 == x0
C_SHIFT_FUNCT_MASK = 0xEC03  # c.srli, c.srai, c.andi
C_SHIFT_ZERO_MASK = 0xFC7F  # c.srli64, c.srai64: shamt == 0
C_SLLI_ZERO_MASK = 0xF07F  # c.slli64: shamt == 0
C_ARITH_MASK = 0xFC63  # c.sub, c.xor, c.or, c.and, c.subw, c.addw

# Implicit registers used by compressed expansions
REG_ZERO = 0
REG_RA = 1
REG_SP = 2
COMPRESSED_REG_BASE = 8  # rd'/rs1'/rs2' 3-bit fields map to x8-x15

ENV_STRUCTURED_LOGGING = "RVDECODE_STRUCTURED_LOGGING"
ENV_COMPRESSED_OPERANDS = "RVDECODE_COMPRESSED_OPERANDS"


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DecoderConfig:
    """Runtime knobs for a ``Decoder``.

    Attributes:
        use_structured_logging: Log every decode (and decode failure) through
            ``DecodeLogger`` at INFO level
        decode_compressed_operands: Extract compressed operands with the
            built-in compressed operand decoder when the caller supplies none
    """

    use_structured_logging: bool = False
    decode_compressed_operands: bool = True

    @classmethod
    def from_env(cls) -> "DecoderConfig":
        """Build a config from ``RVDECODE_*`` environment variables."""
        return cls(
            use_structured_logging=_env_flag(ENV_STRUCTURED_LOGGING, False),
            decode_compressed_operands=_env_flag(ENV_COMPRESSED_OPERANDS, True),
        )
