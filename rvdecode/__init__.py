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

"""RISC-V instruction encoding catalog and decode matcher.

This package maps raw RISC-V instruction words (RV32I + Zicsr + M + C, with
reserved identities for RV64I/M, A, F, D and privileged instructions) to a
stable instruction identity, its mnemonic, category and operand values.

Package Structure
-----------------

Subpackages:
    catalog
        InstId, the rule data model, the priority-ordered rule table, and
        the EncodingCatalog / NameIndex built from it

    decoder
        The Decoder (matcher), generic operand extraction for 32-bit
        encodings, and the compressed operand decoder

    utils
        Bit manipulation helpers, structured decode logging, and validation

Modules:
    config
        Central configuration constants (bit masks, implicit registers) and
        DecoderConfig

    decoder_types
        Type aliases for type safety (InstructionWord, RegisterIndex, etc.)

    exceptions
        Custom exception hierarchy for lookup, decode and catalog failures

Quick Start
-----------
Decode a word::

    from rvdecode import Decoder

    decoder = Decoder()
    inst = decoder.decode(0x00000033)
    print(inst.name, inst.operands)  # add (0, 0, 0)

Look up an encoding by mnemonic::

    from rvdecode import build_catalog

    catalog = build_catalog()
    rule = catalog.by_id(catalog.by_name("jal"))
"""

# Re-export commonly used types for convenience
from rvdecode.catalog import Category, EncodingCatalog, EncodingRule, InstId, build_catalog
from rvdecode.config import MASK16, MASK32, DecoderConfig
from rvdecode.decoder import DecodedInstruction, Decoder
from rvdecode.decoder_types import InstructionWord, RegisterIndex
from rvdecode.exceptions import (
    DecodeError,
    DecoderError,
    NoMatchError,
    UnimplementedInstructionError,
    UnknownIdentityError,
    UnknownNameError,
)

__all__ = [
    "Category",
    "DecodeError",
    "DecodedInstruction",
    "Decoder",
    "DecoderConfig",
    "DecoderError",
    "EncodingCatalog",
    "EncodingRule",
    "InstId",
    "InstructionWord",
    "MASK16",
    "MASK32",
    "NoMatchError",
    "RegisterIndex",
    "UnimplementedInstructionError",
    "UnknownIdentityError",
    "UnknownNameError",
    "build_catalog",
]
