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

"""Instruction word decoding.

Modules
-------
matcher
    Decoder and DecodedInstruction: priority-ordered matching against a
    catalog

operands
    Generic operand extraction and immediate reassembly for 32-bit encodings

compressed
    Per-identity operand routines for 16-bit compressed encodings
"""

from rvdecode.decoder.compressed import COMPRESSED_DECODERS, decode_compressed_operands
from rvdecode.decoder.matcher import DecodedInstruction, Decoder
from rvdecode.decoder.operands import IMMEDIATE_ASSEMBLERS, extract_operands

__all__ = [
    "COMPRESSED_DECODERS",
    "DecodedInstruction",
    "Decoder",
    "IMMEDIATE_ASSEMBLERS",
    "decode_compressed_operands",
    "extract_operands",
]
