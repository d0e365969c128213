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

from __future__ import annotations

import logging

import pytest

from rvdecode.catalog import (
    Category,
    EncodingCatalog,
    EncodingRule,
    InstId,
    MatchPattern,
    build_catalog,
)
from rvdecode.config import IMM_TOP20_MASK, MASK16, TOP7_FUNCT3_LOW7_MASK
from rvdecode.exceptions import (
    CatalogError,
    DuplicateMnemonicError,
    EncodingConflictError,
    InvalidEncodingError,
    UnknownIdentityError,
    UnknownNameError,
)


def _r_type(name: str, inst_id: InstId, value: int) -> EncodingRule:
    return EncodingRule(
        name, inst_id, Category.INT, pattern=MatchPattern(value, TOP7_FUNCT3_LOW7_MASK)
    )


def test_every_identity_has_exactly_one_rule(catalog: EncodingCatalog) -> None:
    ids = [rule.id for rule in catalog]

    assert len(ids) == len(set(ids)) == len(InstId)
    assert set(ids) == set(InstId)


def test_name_round_trips_through_identity(catalog: EncodingCatalog) -> None:
    for inst_id in InstId:
        assert catalog.by_name(catalog.by_id(inst_id).name) is inst_id


def test_by_id_accepts_plain_integers(catalog: EncodingCatalog) -> None:
    assert catalog.by_id(int(InstId.ADD)).name == "add"


@pytest.mark.parametrize("identity", [-1, 10_000, "add", True, False])
def test_by_id_rejects_values_outside_the_identity_domain(
    catalog: EncodingCatalog, identity: object
) -> None:
    with pytest.raises(UnknownIdentityError) as exc_info:
        catalog.by_id(identity)

    assert exc_info.value.identity == identity
    assert isinstance(exc_info.value, LookupError)


def test_by_name_miss_raises(catalog: EncodingCatalog) -> None:
    with pytest.raises(UnknownNameError) as exc_info:
        catalog.by_name("nop")

    assert exc_info.value.name == "nop"


def test_rule_by_name(catalog: EncodingCatalog) -> None:
    rule = catalog.rule_by_name("jal")

    assert rule.id is InstId.JAL
    assert (rule.match_value, rule.match_mask) == (0x6F, 0x7F)


def test_placeholders_have_no_pattern(catalog: EncodingCatalog) -> None:
    placeholders = catalog.placeholder_rules()

    assert {rule.id for rule in placeholders} >= {InstId.MRET, InstId.ADDW, InstId.FADD_D}
    for rule in placeholders:
        assert rule.pattern is None
        assert rule.match_mask == 0
        assert not rule.matches(0)


def test_real_rules_have_well_formed_patterns(catalog: EncodingCatalog) -> None:
    for rule in catalog.real_rules():
        assert rule.match_mask != 0, rule.name
        assert rule.match_value & ~rule.match_mask == 0, rule.name
        if rule.is_compressed:
            assert rule.match_mask & ~MASK16 == 0, rule.name
            assert rule.match_value & 0x3 != 0x3, rule.name
        else:
            assert rule.match_value & 0x3 == 0x3, rule.name


def test_no_shared_patterns_except_aliases(catalog: EncodingCatalog) -> None:
    seen: dict[tuple[int, int], InstId] = {}
    for rule in catalog.real_rules():
        key = (rule.match_value, rule.match_mask)
        if key in seen:
            assert rule.alias_of is seen[key], rule.name
        else:
            seen[key] = rule.id


def test_xlen_aliases(catalog: EncodingCatalog) -> None:
    aliases = {rule.name: rule.alias_of for rule in catalog if rule.is_alias}

    assert aliases == {
        "c.lq": InstId.C_FLD,
        "c.ld": InstId.C_FLW,
        "c.sq": InstId.C_FSD,
        "c.sd": InstId.C_FSW,
        "c.ldsp": InstId.C_FLWSP,
    }


def test_compressed_stack_loads_have_distinct_slots(catalog: EncodingCatalog) -> None:
    assert catalog.by_id(InstId.C_FLDSP).match_value == 0x2002
    assert catalog.by_id(InstId.C_FLWSP).match_value == 0x6002
    assert catalog.by_id(InstId.C_LDSP).pattern == catalog.by_id(InstId.C_FLWSP).pattern


@pytest.mark.parametrize(
    "name, value, mask",
    [
        ("c.lw", 0x4000, 0xE003),
        ("c.jal", 0x2001, 0xE003),
        ("c.addi16sp", 0x6101, 0xEF83),
        ("c.srli64", 0x8001, 0xFC7F),
        ("c.srai64", 0x8401, 0xFC7F),
        ("c.slli64", 0x0002, 0xF07F),
        ("illegal", 0xFFFFFFFF, 0xFFFFFFFF),
    ],
)
def test_encodings(catalog: EncodingCatalog, name: str, value: int, mask: int) -> None:
    rule = catalog.rule_by_name(name)

    assert (rule.match_value, rule.match_mask) == (value, mask)


def test_upper_immediate_covers_twenty_bits(catalog: EncodingCatalog) -> None:
    imm = catalog.rule_by_name("lui").operands[1]

    assert imm.field.mask == IMM_TOP20_MASK == 0xFFFFF000


def test_categories(catalog: EncodingCatalog) -> None:
    csr_names = {rule.name for rule in catalog.rules_in_category(Category.CSR)}
    divide_names = {rule.name for rule in catalog.rules_in_category(Category.DIVIDE)}

    assert csr_names == {"csrrw", "csrrs", "csrrc", "csrrwi", "csrrsi", "csrrci"}
    assert divide_names == {"div", "divu", "rem", "remu"}
    assert catalog.by_id(InstId.FENCE).category is Category.INT
    assert catalog.by_id(InstId.ECALL).category is Category.UNCATEGORIZED


def test_membership(catalog: EncodingCatalog) -> None:
    rule = catalog.by_id(InstId.XOR)

    assert "xor" in catalog
    assert rule in catalog
    assert "xnor" not in catalog
    assert 42 not in catalog


def test_priority_order_is_table_order(catalog: EncodingCatalog) -> None:
    names = [rule.name for rule in catalog]

    assert names[0] == "illegal"
    assert names.index("c.ebreak") < names.index("c.jalr") < names.index("c.add")
    assert names.index("c.jr") < names.index("c.mv")
    assert names.index("c.addi16sp") < names.index("c.lui")
    assert names.index("c.slli64") < names.index("c.slli")


def test_build_catalog_returns_independent_catalogs() -> None:
    first = build_catalog()
    second = build_catalog()

    assert first is not second
    assert first.rules == second.rules


def test_build_catalog_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rvdecode"):
        build_catalog()

    assert "ENCODING CATALOG SUMMARY" in caplog.text
    assert "placeholders=" in caplog.text


def test_duplicate_mnemonic_rejected() -> None:
    rules = [_r_type("add", InstId.ADD, 0x33), _r_type("add", InstId.SUB, 0x40000033)]

    with pytest.raises(DuplicateMnemonicError) as exc_info:
        EncodingCatalog(rules, require_all_ids=False)

    assert exc_info.value.name == "add"


def test_reused_identity_rejected() -> None:
    rules = [_r_type("add", InstId.ADD, 0x33), _r_type("sub", InstId.ADD, 0x40000033)]

    with pytest.raises(InvalidEncodingError):
        EncodingCatalog(rules, require_all_ids=False)


def test_identical_pattern_without_alias_rejected() -> None:
    rules = [_r_type("add", InstId.ADD, 0x33), _r_type("add2", InstId.SUB, 0x33)]

    with pytest.raises(EncodingConflictError) as exc_info:
        EncodingCatalog(rules, require_all_ids=False)

    assert (exc_info.value.name, exc_info.value.other) == ("add2", "add")


def test_shadowed_rule_rejected(catalog: EncodingCatalog) -> None:
    rules = [catalog.rule_by_name("c.add"), catalog.rule_by_name("c.ebreak")]

    with pytest.raises(EncodingConflictError) as exc_info:
        EncodingCatalog(rules, require_all_ids=False)

    assert exc_info.value.other == "c.add"


def test_alias_without_earlier_target_rejected(catalog: EncodingCatalog) -> None:
    with pytest.raises(InvalidEncodingError):
        EncodingCatalog([catalog.rule_by_name("c.ldsp")], require_all_ids=False)


def test_partial_catalog_requires_opt_in() -> None:
    rules = [_r_type("add", InstId.ADD, 0x33)]

    with pytest.raises(CatalogError, match="no rule for identities"):
        EncodingCatalog(rules)

    partial = EncodingCatalog(rules, require_all_ids=False)
    assert len(partial) == 1
    with pytest.raises(UnknownIdentityError):
        partial.by_id(InstId.SUB)
