#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of AVR opcode templates."""

import pytest

from spiprog.avr.opcode import OpcodeBit, OpcodeBitType, OpcodeTemplate
from spiprog.exceptions import SPIProgValueError
from tests.conftest import CHIP_ERASE, PGM_ENABLE


@pytest.mark.parametrize(
    "template, expected",
    [
        (PGM_ENABLE, bytes([0xAC, 0x53, 0x00, 0x00])),
        (CHIP_ERASE, bytes([0xAC, 0x80, 0x00, 0x00])),
        ("1 " * 32, bytes([0xFF, 0xFF, 0xFF, 0xFF])),
        (
            "0 1 0 1 0 0 0 0  0 0 0 0 1 0 0 0  x x x x x x x x  o o o o o o o o",
            bytes([0x50, 0x08, 0x00, 0x00]),
        ),
    ],
)
def test_set_bits(template: str, expected: bytes) -> None:
    """Fixed value bits are applied on top of an all-zero frame."""
    assert OpcodeTemplate.parse(template).set_bits(bytearray(4)) == expected


def test_set_bits_keeps_other_bits() -> None:
    """Bits other than fixed values are not touched."""
    template = OpcodeTemplate.parse(PGM_ENABLE)
    assert template.set_bits(bytes([0x00, 0x00, 0x12, 0x34])) == bytes([0xAC, 0x53, 0x12, 0x34])
    assert template.set_bits(bytes([0xFF, 0xFF, 0xFF, 0xFF])) == bytes([0xAC, 0x53, 0xFF, 0xFF])


def test_set_bits_in_place() -> None:
    frame = bytearray(4)
    assert OpcodeTemplate.parse(PGM_ENABLE).set_bits(frame) is frame
    assert frame == bytearray([0xAC, 0x53, 0x00, 0x00])


def test_parse_bit_kinds() -> None:
    template = OpcodeTemplate.parse(
        "0 1 0 0 1 1 0 1 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 a16 i x o a 0 0 0 0"
    )
    assert template.bits[31] == OpcodeBit(OpcodeBitType.VALUE, bitno=31, value=0)
    assert template.bits[30] == OpcodeBit(OpcodeBitType.VALUE, bitno=30, value=1)
    assert template.bits[8] == OpcodeBit(OpcodeBitType.ADDRESS, bitno=16)
    assert template.bits[7].type == OpcodeBitType.INPUT
    assert template.bits[6].type == OpcodeBitType.IGNORE
    assert template.bits[5].type == OpcodeBitType.OUTPUT
    assert template.bits[4] == OpcodeBit(OpcodeBitType.ADDRESS, bitno=4)


def test_str() -> None:
    text = "0 1 0 0 1 1 0 1 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 a16 i x o a4 0 0 0 0"
    template = OpcodeTemplate.parse(text)
    assert str(template) == text
    assert OpcodeTemplate.parse(str(template)) == template


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1 0 1 0",
        "1 " * 33,
        "1 0 1 0 1 1 0 0 0 1 0 1 0 0 1 1 x x x x x x x x x x x x x x x 2",
        "1 0 1 0 1 1 0 0 0 1 0 1 0 0 1 1 x x x x x x x x x x x x x x x ax",
    ],
)
def test_parse_invalid(text: str) -> None:
    with pytest.raises(SPIProgValueError):
        OpcodeTemplate.parse(text)


def test_set_bits_invalid_length() -> None:
    with pytest.raises(SPIProgValueError):
        OpcodeTemplate.parse(PGM_ENABLE).set_bits(bytearray(3))


def test_template_wrong_bit_count() -> None:
    with pytest.raises(SPIProgValueError):
        OpcodeTemplate([OpcodeBit(OpcodeBitType.IGNORE)] * 31)
