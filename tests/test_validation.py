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

from rvdecode.exceptions import DecoderError
from rvdecode.utils.validation import ValidationError, assert_bit_width, assert_in_range


def test_bit_width_accepts_boundaries() -> None:
    assert_bit_width(0, 32)
    assert_bit_width(0xFFFFFFFF, 32)


def test_bit_width_reports_context() -> None:
    with pytest.raises(ValidationError) as exc_info:
        assert_bit_width(0x1_0000_0000, 32, "instruction word")

    error = exc_info.value
    assert error.context == {
        "value": "0x100000000",
        "bits": 32,
        "max_value": "0xffffffff",
    }
    assert "instruction word exceeds 32-bit width" in str(error)
    assert "max_value: 0xffffffff" in str(error)


def test_in_range_reports_distance() -> None:
    with pytest.raises(ValidationError) as exc_info:
        assert_in_range(10, 0, 7, "register field")

    assert exc_info.value.context["out_by"] == 3


def test_validation_error_is_a_decoder_error() -> None:
    error = ValidationError("bad")

    assert isinstance(error, DecoderError)
    assert isinstance(error, ValueError)
    assert str(error) == "bad"
