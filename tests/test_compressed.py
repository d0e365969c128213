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

"""Compressed operand decoding, against hand-assembled 16-bit words."""

from __future__ import annotations

import pytest

from rvdecode import Decoder, EncodingCatalog, InstId
from rvdecode.decoder.compressed import (
    COMPRESSED_DECODERS,
    decode_compressed_operands,
    expand_reg,
)
from rvdecode.exceptions import UnknownIdentityError
from rvdecode.utils.validation import ValidationError


@pytest.mark.parametrize(
    "half, name, operands",
    [
        # Quadrant 0
        (0x0808, "c.addi4spn", (10, 2, 16)),  # addi a0, sp, 16
        (0x41C8, "c.lw", (10, 11, 4)),  # lw a0, 4(a1)
        (0xC1A8, "c.sw", (11, 10, 64)),  # sw a0, 64(a1)
        (0x2588, "c.fld", (10, 11, 8)),  # fld fa0, 8(a1)
        # Quadrant 1
        (0x0515, "c.addi", (10, 10, 5)),  # addi a0, a0, 5
        (0x557D, "c.li", (10, 0, -1)),  # li a0, -1
        (0x2001, "c.jal", (1, 0)),
        (0xA021, "c.j", (0, 8)),
        (0xBFFD, "c.j", (0, -2)),
        (0x717D, "c.addi16sp", (2, 2, -16)),
        (0x757D, "c.lui", (10, -4096)),
        (0x987D, "c.andi", (8, 8, -1)),  # andi s0, s0, -1
        (0x8C05, "c.sub", (8, 8, 9)),  # sub s0, s0, s1
        (0x8D6D, "c.and", (10, 10, 11)),  # and a0, a0, a1
        (0x9C25, "c.addw", (8, 8, 9)),
        (0xC401, "c.beqz", (8, 0, 8)),  # beqz s0, 8
        (0xFD75, "c.bnez", (10, 0, -4)),  # bnez a0, -4
        # Quadrant 2
        (0x4532, "c.lwsp", (10, 2, 12)),  # lw a0, 12(sp)
        (0xC606, "c.swsp", (2, 1, 12)),  # sw ra, 12(sp)
        (0x2522, "c.fldsp", (10, 2, 8)),  # fld fa0, 8(sp)
        (0xA42A, "c.fsdsp", (2, 10, 8)),  # fsd fa0, 8(sp)
        (0x6532, "c.flwsp", (10, 2, 12)),  # flw fa0, 12(sp)
    ],
)
def test_decode_compressed(
    decoder: Decoder, half: int, name: str, operands: tuple[int, ...]
) -> None:
    inst = decoder.decode(half)

    assert inst.name == name
    assert inst.is_compressed
    assert inst.size == 2
    assert inst.operands == operands


def test_operand_count_matches_descriptors(decoder: Decoder, catalog: EncodingCatalog) -> None:
    for rule in catalog.real_rules():
        if rule.is_compressed and not rule.is_alias:
            assert len(decoder.operands(rule, rule.match_value)) == rule.operand_count, rule.name


def test_every_compressed_identity_has_a_routine(catalog: EncodingCatalog) -> None:
    compressed = {rule.id for rule in catalog if rule.is_compressed}

    assert compressed == set(COMPRESSED_DECODERS)


def test_rv64_routines_are_reachable_by_identity() -> None:
    # lq s0, 256(s0): c.fld's slot, read with the RV128 layout
    assert COMPRESSED_DECODERS[InstId.C_LQ](0x2400) == (8, 8, 256)
    assert COMPRESSED_DECODERS[InstId.C_LDSP](0x2522) == (10, 2, 8)
    assert decode_compressed_operands(InstId.C_SD, 0xE588) == (11, 10, 8)


def test_expand_reg() -> None:
    assert expand_reg(0) == 8
    assert expand_reg(7) == 15
    with pytest.raises(ValidationError):
        expand_reg(8)


def test_decode_compressed_operands_rejects_bad_input() -> None:
    with pytest.raises(UnknownIdentityError):
        decode_compressed_operands(InstId.ADD, 0x0033)
    with pytest.raises(ValidationError):
        decode_compressed_operands(InstId.C_ADDI, 0x10515)


def test_decode_compressed_operands_dispatches_through_given_routines() -> None:
    routines = {InstId.C_LI: lambda half: [half & 0x3]}

    assert decode_compressed_operands(InstId.C_LI, 0x4501, routines) == (1,)
    with pytest.raises(UnknownIdentityError):
        decode_compressed_operands(InstId.C_ADDI, 0x0515, routines)
