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

from rvdecode import (
    Category,
    DecodeError,
    Decoder,
    DecoderConfig,
    EncodingCatalog,
    InstId,
    NoMatchError,
    UnimplementedInstructionError,
)
from rvdecode.utils.validation import ValidationError


def test_add_with_all_zero_registers(decoder: Decoder) -> None:
    inst = decoder.decode(0x00000033)

    assert inst.name == "add"
    assert inst.identity is InstId.ADD
    assert inst.operands == (0, 0, 0)
    assert inst.category is Category.INT
    assert inst.size == 4
    assert not inst.is_compressed


def test_jal_with_zero_offset(decoder: Decoder) -> None:
    inst = decoder.decode(0x0000006F)

    assert inst.identity is InstId.JAL
    assert inst.operands == (0, 0)


def test_all_ones_is_the_illegal_instruction(decoder: Decoder) -> None:
    inst = decoder.decode(0xFFFFFFFF)

    assert inst.identity is InstId.ILLEGAL
    assert inst.operands == ()


def test_zero_word_decodes_as_addi4spn(decoder: Decoder) -> None:
    inst = decoder.decode(0)

    assert inst.identity is InstId.C_ADDI4SPN
    assert inst.operands == (8, 2, 0)
    assert inst.size == 2


@pytest.mark.parametrize(
    "word, name, operands",
    [
        (0x9002, "c.ebreak", ()),
        (0x9082, "c.jalr", (1, 1, 0)),
        (0x908A, "c.add", (1, 1, 2)),
        (0x8082, "c.jr", (0, 1, 0)),
        (0x852E, "c.mv", (10, 0, 11)),
        (0x7139, "c.addi16sp", (2, 2, -64)),
        (0x6505, "c.lui", (10, 4096)),
        (0x8001, "c.srli64", (8, 8, 0)),
        (0x800D, "c.srli", (8, 8, 3)),
        (0x8485, "c.srai", (9, 9, 1)),
        (0x0282, "c.slli64", (5, 5, 0)),
        (0x028A, "c.slli", (5, 5, 2)),
    ],
)
def test_narrow_encodings_win_over_broad_ones(
    decoder: Decoder, word: int, name: str, operands: tuple[int, ...]
) -> None:
    inst = decoder.decode(word)

    assert inst.name == name
    assert inst.operands == operands


def test_aliases_are_never_decoded(decoder: Decoder) -> None:
    assert decoder.decode(0x6532).identity is InstId.C_FLWSP
    assert decoder.decode(0x6000).identity is InstId.C_FLW
    assert decoder.decode(0x2000).identity is InstId.C_FLD


def test_placeholder_words_are_recognized_but_unimplemented(
    decoder: Decoder, catalog: EncodingCatalog
) -> None:
    for rule in catalog.placeholder_rules():
        with pytest.raises(UnimplementedInstructionError) as exc_info:
            decoder.decode(rule.recognition.value)

        assert exc_info.value.identity is rule.id
        assert exc_info.value.word == rule.recognition.value


@pytest.mark.parametrize(
    "word, identity",
    [
        (0x30200073, InstId.MRET),
        (0x10500073, InstId.WFI),
        (0x00C5853B, InstId.ADDW),  # addw a0, a1, a2
        (0x00C5F553, InstId.FADD_S),  # fadd.s fa0, fa1, fa2 (rm=dyn)
        (0x0EC5A52F, InstId.AMOSWAP_W),  # amoswap.w.aqrl a0, a2, (a1)
    ],
)
def test_unimplemented_instructions(decoder: Decoder, word: int, identity: InstId) -> None:
    with pytest.raises(UnimplementedInstructionError) as exc_info:
        decoder.decode(word)

    assert exc_info.value.identity is identity
    assert isinstance(exc_info.value, DecodeError)


def test_unknown_word_raises_no_match(decoder: Decoder) -> None:
    with pytest.raises(NoMatchError) as exc_info:
        decoder.decode(0x0000007F)

    assert exc_info.value.word == 0x7F


@pytest.mark.parametrize("word", [-1, 1 << 32])
def test_words_outside_32_bits_rejected(decoder: Decoder, word: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        decoder.decode(word)

    assert exc_info.value.context["bits"] == 32
    assert isinstance(exc_info.value, ValueError)


def test_compressed_word_in_low_half_of_fetch(decoder: Decoder) -> None:
    inst = decoder.decode(0xABCD0515)

    assert inst.name == "c.addi"
    assert inst.operands == (10, 10, 5)


def test_match_returns_rule(decoder: Decoder) -> None:
    assert decoder.match(0x00100073).name == "ebreak"


def test_str() -> None:
    decoder = Decoder()

    assert str(decoder.decode(0x023100B3)) == "mul 1, 2, 3"
    assert str(decoder.decode(0x00000073)) == "ecall"


def test_custom_compressed_decoders(catalog: EncodingCatalog) -> None:
    decoder = Decoder(catalog, compressed_decoders={InstId.C_ADDI: lambda half: (half,)})

    assert decoder.decode(0x0515).operands == (0x0515,)
    assert decoder.decode(0xABCD0515).operands == (0x0515,)
    assert decoder.decode(0x9002).operands == ()


def test_compressed_operands_can_be_disabled(catalog: EncodingCatalog) -> None:
    decoder = Decoder(catalog, config=DecoderConfig(decode_compressed_operands=False))

    inst = decoder.decode(0x0515)
    assert inst.identity is InstId.C_ADDI
    assert inst.operands == ()
    assert decoder.decode(0x00000033).operands == (0, 0, 0)


def test_structured_logging(
    catalog: EncodingCatalog, caplog: pytest.LogCaptureFixture
) -> None:
    decoder = Decoder(catalog, config=DecoderConfig(use_structured_logging=True))

    with caplog.at_level(logging.INFO, logger="rvdecode"):
        decoder.decode(0x00000033)
        with pytest.raises(NoMatchError):
            decoder.decode(0x0000007F)

    messages = [record.getMessage() for record in caplog.records]
    assert any("add" in message and "[int]" in message for message in messages)
    assert any("NoMatchError" in message for message in messages)
    assert caplog.records[-1].levelno == logging.WARNING


def test_no_logging_by_default(decoder: Decoder, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="rvdecode"):
        decoder.decode(0x00000033)

    assert caplog.records == []
