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

"""Structured logging for decode results and catalog construction.

Decode Logger
=============

Provides one-line, fixed-layout log records for decoded words so that a
trace of decodes can be grepped and diffed. Enabled per decoder through
``DecoderConfig.use_structured_logging``; the catalog summary is always
emitted at DEBUG level when a catalog is built.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rvdecode.catalog.encoding import EncodingRule
    from rvdecode.exceptions import DecodeError

logger = logging.getLogger(__name__)


class DecodeLogger:
    """Structured logging for the decoder.

    All methods are static; records go to the ``rvdecode.utils.decode_logger``
    logger and are configured through the standard ``logging`` machinery.
    """

    @staticmethod
    def log_decode(word: int, rule: EncodingRule, operands: tuple[int, ...]) -> None:
        """Log one successful decode.

        Args:
            word: Raw instruction word
            rule: Matched rule
            operands: Extracted operand values, in descriptor order
        """
        digits = rule.width.size_bytes * 2
        parts = [
            f"0x{word:0{digits}x}".rjust(10),
            f"{rule.name:12s}",
            f"[{rule.category.value}]",
        ]
        if operands:
            parts.append("(" + ", ".join(str(value) for value in operands) + ")")
        logger.info(" ".join(parts))

    @staticmethod
    def log_decode_failure(word: int, error: DecodeError) -> None:
        """Log a word that did not decode.

        Args:
            word: Raw instruction word
            error: The NoMatchError or UnimplementedInstructionError raised
        """
        logger.warning(f"0x{word:08x} {type(error).__name__}: {error}")

    @staticmethod
    def log_catalog_summary(rules: Iterable[EncodingRule]) -> None:
        """Log per-category rule counts of a freshly built catalog.

        Args:
            rules: Catalog rules in priority order
        """
        if not logger.isEnabledFor(logging.DEBUG):
            return

        real: Counter[str] = Counter()
        placeholders = 0
        aliases = 0
        compressed = 0
        for rule in rules:
            if rule.is_placeholder:
                placeholders += 1
                continue
            real[rule.category.value] += 1
            aliases += rule.is_alias
            compressed += rule.is_compressed

        logger.debug("=" * 60)
        logger.debug("ENCODING CATALOG SUMMARY")
        logger.debug("=" * 60)
        for category, count in sorted(real.items()):
            logger.debug(f"  {category:14s}: {count:4d} rules")
        logger.debug(
            f"  real={sum(real.values())} (compressed={compressed}, aliases={aliases}) "
            f"placeholders={placeholders}"
        )
        logger.debug("=" * 60)
