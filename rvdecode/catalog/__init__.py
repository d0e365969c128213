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

"""RISC-V instruction encoding catalog.

Supported Extensions
--------------------
- RV32I: Base integer instruction set, encoded
- Zicsr: CSR access instructions, encoded
- M: Integer multiply/divide, encoded
- C: Compressed 16-bit instructions, encoded (RV32 and RV64 forms)
- RV64I, RV64M, A, F, D, privileged returns and wfi: reserved identities
  (placeholders), recognized but not decodable

Modules
-------
inst_id
    InstId, the stable identity of each instruction variant

encoding
    Rule data model: EncodingRule, MatchPattern, OperandDescriptor and the
    Category / OperandKind / OperandMode / ImmFormat enums

rule_tables
    The static rule table, in priority order

catalog
    EncodingCatalog and NameIndex, built from the rule table

Usage
-----
To look up an encoding::

    from rvdecode.catalog import InstId, build_catalog

    catalog = build_catalog()
    addi = catalog.by_id(InstId.ADDI)
    print(hex(addi.match_value), hex(addi.match_mask))  # 0x13 0x707f
"""

from rvdecode.catalog.catalog import EncodingCatalog, NameIndex, build_catalog
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
from rvdecode.catalog.rule_tables import RULE_TABLE

__all__ = [
    "SWIZZLED",
    "BitField",
    "Category",
    "EncodingCatalog",
    "EncodingRule",
    "ImmFormat",
    "InstId",
    "InstWidth",
    "MatchPattern",
    "NameIndex",
    "OperandDescriptor",
    "OperandKind",
    "OperandMode",
    "RULE_TABLE",
    "build_catalog",
]
