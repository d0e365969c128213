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

"""Custom exceptions for catalog and decode errors.

Exceptions
==========

This module defines the exception hierarchy raised by the catalog and the
matcher. Lookup misses and decode failures are always raised to the caller;
nothing here is ever replaced by a default instruction.

    DecoderError
    ├── UnknownNameError
    ├── UnknownIdentityError
    ├── DecodeError
    │   ├── NoMatchError
    │   └── UnimplementedInstructionError
    └── CatalogError
        ├── DuplicateMnemonicError
        ├── InvalidEncodingError
        └── EncodingConflictError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rvdecode.catalog.inst_id import InstId


class DecoderError(Exception):
    """Base exception for all catalog and decode failures.

    All package-specific exceptions inherit from this base class, allowing
    callers to catch every failure with a single handler.
    """

    pass


class UnknownNameError(DecoderError, LookupError):
    """Mnemonic lookup miss.

    Raised when no rule is registered under the requested mnemonic.
    """

    def __init__(self, name: str):
        """Initialize with the mnemonic that was not found.

        Args:
            name: The mnemonic passed to the lookup
        """
        super().__init__(f"no instruction registered under mnemonic {name!r}")
        self.name = name


class UnknownIdentityError(DecoderError, LookupError):
    """Identity lookup miss.

    Raised when an identity outside the instruction identity domain is
    requested, or when a partial catalog has no rule for it.
    """

    def __init__(self, identity: object):
        """Initialize with the identity that was not found.

        Args:
            identity: The value passed to the lookup
        """
        super().__init__(f"no rule for instruction identity {identity!r}")
        self.identity = identity


class DecodeError(DecoderError):
    """Base exception for words that cannot be decoded."""

    def __init__(self, message: str, word: int):
        """Initialize with the word that failed to decode.

        Args:
            message: Error description
            word: The raw instruction word
        """
        super().__init__(message)
        self.word = word


class NoMatchError(DecodeError):
    """Word matches no encoded rule and no reserved instruction."""

    def __init__(self, word: int):
        super().__init__(f"word 0x{word:08x} matches no instruction encoding", word)


class UnimplementedInstructionError(DecodeError):
    """Word encodes a recognized instruction that has no wired encoding yet.

    Distinct from ``NoMatchError`` so callers can report
    "recognized-but-unimplemented" rather than "illegal".
    """

    def __init__(self, word: int, identity: InstId, name: str):
        """Initialize with the word and the reserved identity it encodes.

        Args:
            word: The raw instruction word
            identity: Identity of the placeholder rule that recognized the word
            name: Mnemonic of that placeholder rule
        """
        super().__init__(
            f"word 0x{word:08x} encodes {name!r}, which is not implemented", word
        )
        self.identity = identity
        self.name = name


class CatalogError(DecoderError):
    """Base exception for catalog construction failures.

    Raised while building the catalog from its rule table; a catalog that
    was built successfully never raises these.
    """

    pass


class DuplicateMnemonicError(CatalogError):
    """Two rules registered under the same mnemonic."""

    def __init__(self, name: str):
        super().__init__(f"mnemonic {name!r} is registered more than once")
        self.name = name


class InvalidEncodingError(CatalogError):
    """A rule's match pattern or operand layout is malformed.

    Examples: match bits outside the mask, a zero mask on a real rule, an
    operand field overlapping the match mask, a mask wider than the rule.
    """

    def __init__(self, name: str, reason: str):
        """Initialize with the offending rule and the reason.

        Args:
            name: Mnemonic of the malformed rule
            reason: What is wrong with it
        """
        super().__init__(f"invalid encoding for {name!r}: {reason}")
        self.name = name
        self.reason = reason


class EncodingConflictError(CatalogError):
    """A rule can never be matched because an earlier rule covers it.

    Raised for identical patterns that are not declared aliases, and for
    rules whose every matching word is already claimed by an earlier rule.
    """

    def __init__(self, name: str, other: str, reason: str):
        """Initialize with both rules involved in the conflict.

        Args:
            name: Mnemonic of the later (unreachable) rule
            other: Mnemonic of the earlier rule that claims its words
            reason: Kind of conflict
        """
        super().__init__(f"{name!r} conflicts with earlier {other!r}: {reason}")
        self.name = name
        self.other = other
