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

"""Shared fixtures: one full catalog and one decoder per test session."""

from __future__ import annotations

import pytest

from rvdecode import Decoder, EncodingCatalog, build_catalog


@pytest.fixture(scope="session")
def catalog() -> EncodingCatalog:
    return build_catalog()


@pytest.fixture(scope="session")
def decoder(catalog: EncodingCatalog) -> Decoder:
    return Decoder(catalog)
