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

"""Encoding catalog and mnemonic index.

Encoding Catalog
================

The catalog is the immutable, priority-ordered collection of encoding rules
built from a rule table. Construction checks every cross-rule invariant once,
so a catalog that exists is consistent:

    - every mnemonic is unique (DuplicateMnemonicError)
    - every identity appears at most once, and with ``require_all_ids`` every
      InstId member has exactly one rule
    - no two real rules share a pattern unless the later one is a declared
      alias of the earlier one
    - no real rule is fully shadowed by an earlier rule

Usage::

    catalog = build_catalog()
    rule = catalog.by_id(InstId.ADDI)
    assert catalog.by_name(rule.name) is InstId.ADDI
"""

import logging
from collections.abc import Iterable, Iterator

from rvdecode.catalog.encoding import Category, EncodingRule
from rvdecode.catalog.inst_id import InstId
from rvdecode.catalog.rule_tables import RULE_TABLE
from rvdecode.exceptions import (
    CatalogError,
    DuplicateMnemonicError,
    EncodingConflictError,
    InvalidEncodingError,
    UnknownIdentityError,
    UnknownNameError,
)
from rvdecode.utils.decode_logger import DecodeLogger

logger = logging.getLogger(__name__)


class NameIndex:
    """Mnemonic to identity mapping, built in one pass over the rules."""

    def __init__(self, rules: Iterable[EncodingRule]):
        self._ids: dict[str, InstId] = {}
        for rule in rules:
            if rule.name in self._ids:
                raise DuplicateMnemonicError(rule.name)
            self._ids[rule.name] = rule.id

    def lookup(self, name: str) -> InstId:
        """Return the identity registered under ``name``.

        Raises:
            UnknownNameError: If no rule uses this mnemonic
        """
        try:
            return self._ids[name]
        except KeyError:
            raise UnknownNameError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)


def _check_conflicts(rules: tuple[EncodingRule, ...]) -> None:
    """Reject identical patterns that are not aliases and shadowed rules."""
    real = [rule for rule in rules if rule.pattern is not None]
    for position, later in enumerate(real):
        found_alias_target = False
        for earlier in real[:position]:
            if later.pattern == earlier.pattern:
                if later.alias_of is None or later.alias_of not in (
                    earlier.id,
                    earlier.alias_of,
                ):
                    raise EncodingConflictError(
                        later.name, earlier.name, "identical match pattern"
                    )
                found_alias_target = found_alias_target or later.alias_of == earlier.id
            elif earlier.pattern.covers(later.pattern):
                raise EncodingConflictError(
                    later.name, earlier.name, "every matching word is claimed earlier"
                )
        if later.alias_of is not None and not found_alias_target:
            raise InvalidEncodingError(
                later.name,
                f"alias_of {later.alias_of.name} is not an earlier rule "
                "with the identical pattern",
            )


class EncodingCatalog:
    """Immutable, priority-ordered set of encoding rules.

    Iteration yields rules in priority order: the first rule whose pattern
    matches a word is the decode result for that word.

    Args:
        rules: Rules in priority order
        require_all_ids: Require exactly one rule per InstId member. Partial
            catalogs (tests, experiments) pass False.

    Raises:
        DuplicateMnemonicError: Two rules share a mnemonic
        InvalidEncodingError: An identity is used twice, or an alias does not
            point at an earlier identical pattern
        EncodingConflictError: A rule can never be matched
        CatalogError: ``require_all_ids`` is set and identities are missing
    """

    def __init__(self, rules: Iterable[EncodingRule], require_all_ids: bool = True):
        self._rules = tuple(rules)
        self._names = NameIndex(self._rules)

        self._by_id: dict[InstId, EncodingRule] = {}
        for rule in self._rules:
            if rule.id in self._by_id:
                raise InvalidEncodingError(
                    rule.name,
                    f"identity {rule.id.name} is already used by "
                    f"{self._by_id[rule.id].name!r}",
                )
            self._by_id[rule.id] = rule

        if require_all_ids:
            missing = [inst_id.name for inst_id in InstId if inst_id not in self._by_id]
            if missing:
                raise CatalogError(f"no rule for identities: {', '.join(missing)}")

        _check_conflicts(self._rules)

    @property
    def rules(self) -> tuple[EncodingRule, ...]:
        """All rules in priority order, placeholders included."""
        return self._rules

    @property
    def names(self) -> NameIndex:
        return self._names

    def by_id(self, identity: InstId | int) -> EncodingRule:
        """Return the rule for an identity.

        Placeholder identities return their placeholder rule.

        Raises:
            UnknownIdentityError: If ``identity`` is a bool or not an InstId value, or
                this catalog has no rule for it
        """
        if isinstance(identity, bool):
            raise UnknownIdentityError(identity)
        try:
            inst_id = InstId(identity)
        except ValueError:
            raise UnknownIdentityError(identity) from None
        try:
            return self._by_id[inst_id]
        except KeyError:
            raise UnknownIdentityError(inst_id) from None

    def by_name(self, name: str) -> InstId:
        """Return the identity registered under a mnemonic.

        Raises:
            UnknownNameError: If no rule uses this mnemonic
        """
        return self._names.lookup(name)

    def rule_by_name(self, name: str) -> EncodingRule:
        return self._by_id[self.by_name(name)]

    def real_rules(self) -> tuple[EncodingRule, ...]:
        """Rules with a match pattern, aliases included."""
        return tuple(rule for rule in self._rules if not rule.is_placeholder)

    def placeholder_rules(self) -> tuple[EncodingRule, ...]:
        return tuple(rule for rule in self._rules if rule.is_placeholder)

    def rules_in_category(self, category: Category) -> tuple[EncodingRule, ...]:
        return tuple(rule for rule in self._rules if rule.category is category)

    def __iter__(self) -> Iterator[EncodingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._names
        if isinstance(item, EncodingRule):
            return self._by_id.get(item.id) == item
        return False

    def __repr__(self) -> str:
        return (
            f"EncodingCatalog({len(self._rules)} rules, "
            f"{len(self.placeholder_rules())} placeholders)"
        )


def build_catalog(
    rows: Iterable[EncodingRule] = RULE_TABLE, require_all_ids: bool = True
) -> EncodingCatalog:
    """Build a new catalog from a rule table.

    Each call returns a fresh, independent catalog; nothing is cached.

    Args:
        rows: Rules in priority order (defaults to the full RV32/RV64 table)
        require_all_ids: Require exactly one rule per InstId member

    Returns:
        The validated catalog
    """
    catalog = EncodingCatalog(rows, require_all_ids=require_all_ids)
    logger.debug("Built encoding catalog: %r", catalog)
    DecodeLogger.log_catalog_summary(catalog.rules)
    return catalog
