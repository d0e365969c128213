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

import pytest

from rvdecode.catalog import EncodingCatalog, InstId, NameIndex
from rvdecode.exceptions import DuplicateMnemonicError, UnknownNameError


def test_index_covers_every_rule(catalog: EncodingCatalog) -> None:
    index = catalog.names

    assert len(index) == len(catalog)
    assert list(index) == [rule.name for rule in catalog]


def test_lookup_is_exact(catalog: EncodingCatalog) -> None:
    index = catalog.names

    assert index.lookup("fencei") is InstId.FENCEI
    assert index.lookup("c.addi4spn") is InstId.C_ADDI4SPN
    assert "ADD" not in index
    with pytest.raises(UnknownNameError):
        index.lookup("ADD")


def test_duplicates_are_rejected_not_overwritten(catalog: EncodingCatalog) -> None:
    rules = [catalog.by_id(InstId.ADD), catalog.by_id(InstId.SUB), catalog.by_id(InstId.ADD)]

    with pytest.raises(DuplicateMnemonicError, match="'add'"):
        NameIndex(rules)


def test_empty_index() -> None:
    index = NameIndex([])

    assert len(index) == 0
    assert "add" not in index
