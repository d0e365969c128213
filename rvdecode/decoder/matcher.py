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

"""Decode matcher: instruction word to catalog rule and operand values.

Matcher
=======

Decoding is a linear scan of the catalog in priority order:

    1. Placeholder rules are skipped; they never match any word, including 0
    2. The first rule with ``(word & mask) == value`` wins
    3. If no real rule matches, a placeholder whose recognition pattern
       matches raises UnimplementedInstructionError; anything else raises
       NoMatchError

Operands of 32-bit rules are extracted generically (mask-and-shift plus
immediate reassembly). Operands of compressed rules are SWIZZLED and are
extracted by a per-identity routine from the compressed operand decoder,
which callers may replace.

A word may carry a compressed instruction in its low half with unrelated
bits above it (a raw 32-bit fetch); compressed rules only look at bits
[15:0], and so does their operand routine.

Example:
    >>> decoder = Decoder()
    >>> inst = decoder.decode(0x00A00513)  # addi x10, x0, 10
    >>> inst.name, inst.operands
    ('addi', (10, 0, 10))
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from rvdecode.catalog.catalog import EncodingCatalog, build_catalog
from rvdecode.catalog.encoding import Category, EncodingRule
from rvdecode.catalog.inst_id import InstId
from rvdecode.config import MASK16, DecoderConfig
from rvdecode.decoder.compressed import COMPRESSED_DECODERS, decode_compressed_operands
from rvdecode.decoder.operands import extract_operands
from rvdecode.decoder_types import CompressedOperandDecoder, InstructionWord, OperandValues
from rvdecode.exceptions import DecodeError, NoMatchError, UnimplementedInstructionError
from rvdecode.utils.decode_logger import DecodeLogger
from rvdecode.utils.validation import assert_bit_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedInstruction:
    """Result of decoding one word.

    Attributes:
        word: The word that was decoded
        rule: Matched catalog rule
        operands: One value per operand descriptor, in descriptor order.
            Empty for a compressed rule with no registered operand routine.
    """

    word: InstructionWord
    rule: EncodingRule
    operands: OperandValues

    @property
    def identity(self) -> InstId:
        return self.rule.id

    @property
    def name(self) -> str:
        return self.rule.name

    @property
    def category(self) -> Category:
        return self.rule.category

    @property
    def size(self) -> int:
        """Instruction size in bytes (2 or 4)."""
        return self.rule.width.size_bytes

    @property
    def is_compressed(self) -> bool:
        return self.rule.is_compressed

    def __str__(self) -> str:
        return f"{self.name} {', '.join(str(v) for v in self.operands)}".rstrip()


class Decoder:
    """Matches instruction words against an encoding catalog.

    Args:
        catalog: Catalog to match against (a fresh full catalog if None)
        compressed_decoders: Per-identity compressed operand routines. If
            None, the built-in routines are used when
            ``config.decode_compressed_operands`` is set, otherwise none.
        config: Runtime knobs (defaults to ``DecoderConfig()``)
    """

    def __init__(
        self,
        catalog: EncodingCatalog | None = None,
        compressed_decoders: Mapping[InstId, CompressedOperandDecoder] | None = None,
        config: DecoderConfig | None = None,
    ):
        self.config = config if config is not None else DecoderConfig()
        self.catalog = catalog if catalog is not None else build_catalog()
        if compressed_decoders is None:
            compressed_decoders = (
                COMPRESSED_DECODERS if self.config.decode_compressed_operands else {}
            )
        self.compressed_decoders = compressed_decoders

        self._real_rules = self.catalog.real_rules()
        self._recognizers = tuple(
            rule for rule in self.catalog.placeholder_rules() if rule.recognition is not None
        )
        logger.debug(
            f"Decoder ready: {len(self._real_rules)} rules, "
            f"{len(self._recognizers)} recognized placeholders"
        )

    def match(self, word: int) -> EncodingRule:
        """Return the first rule, in priority order, that matches ``word``.

        Raises:
            ValidationError: If word is negative or wider than 32 bits
            UnimplementedInstructionError: If only a placeholder recognizes it
            NoMatchError: If nothing recognizes it
        """
        assert_bit_width(word, 32, "instruction word")
        for rule in self._real_rules:
            if (word & rule.match_mask) == rule.match_value:
                return rule
        for rule in self._recognizers:
            if rule.recognition.matches(word):
                raise UnimplementedInstructionError(word, rule.id, rule.name)
        raise NoMatchError(word)

    def operands(self, rule: EncodingRule, word: int) -> OperandValues:
        """Extract the operand values of ``word`` as encoded by ``rule``."""
        if not rule.is_compressed:
            return extract_operands(rule, word)
        if rule.id not in self.compressed_decoders:
            return ()
        return decode_compressed_operands(rule.id, word & MASK16, self.compressed_decoders)

    def decode(self, word: int) -> DecodedInstruction:
        """Decode one instruction word.

        Args:
            word: 32-bit word, or a 16-bit compressed instruction

        Returns:
            The matched rule with its operand values

        Raises:
            ValidationError: If word is negative or wider than 32 bits
            UnimplementedInstructionError: Recognized but not implemented
            NoMatchError: Not an encoding this catalog knows
        """
        try:
            rule = self.match(word)
        except DecodeError as e:
            if self.config.use_structured_logging:
                DecodeLogger.log_decode_failure(word, e)
            raise
        operands = self.operands(rule, word)
        if self.config.use_structured_logging:
            DecodeLogger.log_decode(word, rule, operands)
        return DecodedInstruction(InstructionWord(word), rule, operands)
