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

"""Operand extraction for 32-bit encodings, against hand-assembled words."""

from __future__ import annotations

import pytest

from rvdecode import Category, Decoder, EncodingCatalog, InstId
from rvdecode.catalog import ImmFormat
from rvdecode.decoder.operands import IMMEDIATE_ASSEMBLERS, extract_operand, extract_operands


@pytest.mark.parametrize(
    "word, name, operands",
    [
        (0xFFF10093, "addi", (1, 2, -1)),  # addi x1, x2, -1
        (0x00412083, "lw", (1, 2, 4)),  # lw x1, 4(x2)
        (0x123452B7, "lui", (5, 0x12345000)),  # lui x5, 0x12345
        (0x800000B7, "lui", (1, -0x80000000)),  # lui x1, 0x80000
        (0xFE512E23, "sw", (2, 5, -4)),  # sw x5, -4(x2)
        (0xFE208CE3, "beq", (1, 2, -8)),  # beq x1, x2, -8
        (0x00019863, "bne", (3, 0, 16)),  # bne x3, x0, 16
        (0x001000EF, "jal", (1, 2048)),  # jal x1, 2048
        (0xFFDFF06F, "jal", (0, -4)),  # jal x0, -4
        (0x01F09093, "slli", (1, 1, 31)),  # slli x1, x1, 31
        (0x4051D113, "srai", (2, 3, 5)),  # srai x2, x3, 5
        (0x403100B3, "sub", (1, 2, 3)),  # sub x1, x2, x3
        (0x300110F3, "csrrw", (1, 2, 0x300)),  # csrrw x1, mstatus, x2
        (0x30046073, "csrrsi", (0, 8, 0x300)),  # csrrsi x0, mstatus, 8
        (0x0330000F, "fence", (3, 3)),  # fence rw, rw
        (0x0000100F, "fencei", ()),
        (0x00100073, "ebreak", ()),
    ],
)
def test_generic_extraction(
    decoder: Decoder, word: int, name: str, operands: tuple[int, ...]
) -> None:
    inst = decoder.decode(word)

    assert inst.name == name
    assert inst.operands == operands


def test_multiply_and_divide_categories(decoder: Decoder) -> None:
    mul = decoder.decode(0x023100B3)  # mul x1, x2, x3
    divu = decoder.decode(0x02005033)  # divu x0, x0, x0

    assert (mul.identity, mul.category, mul.operands) == (InstId.MUL, Category.MULTIPLY, (1, 2, 3))
    assert (divu.identity, divu.category) == (InstId.DIVU, Category.DIVIDE)


def test_every_format_has_an_assembler() -> None:
    assert set(IMMEDIATE_ASSEMBLERS) == set(ImmFormat)


def test_extract_operands_uses_descriptor_order(catalog: EncodingCatalog) -> None:
    store = catalog.by_id(InstId.SB)

    # sb x7, 1(x6): rs1, rs2, imm
    assert extract_operands(store, 0x007300A3) == (6, 7, 1)


def test_swizzled_operands_are_not_generic(catalog: EncodingCatalog) -> None:
    operand = catalog.by_id(InstId.C_ADDI).operands[2]

    assert not operand.is_generic
    with pytest.raises(TypeError):
        extract_operand(operand, 0x0515)
