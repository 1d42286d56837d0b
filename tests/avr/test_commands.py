#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of AVR command frame construction and response validation."""

import pytest

from spiprog.avr.commands import build_command, validate_enable
from spiprog.avr.opcode import OpcodeTemplate
from spiprog.avr.part import AvrOperation, AvrPart
from spiprog.exceptions import SPIProgMissingOpcode, SPIProgValueError


def test_build_enable(part: AvrPart) -> None:
    assert build_command(part, AvrOperation.PGM_ENABLE) == bytes([0xAC, 0x53, 0x00, 0x00])


def test_build_erase(part: AvrPart) -> None:
    assert build_command(part, AvrOperation.CHIP_ERASE) == bytes([0xAC, 0x80, 0x00, 0x00])


def test_build_enable_only_sets_two_bytes() -> None:
    """A template setting byte 0 to 0xAC and byte 1 to 0x53 leaves the rest zero."""
    template = OpcodeTemplate.parse(
        "1 0 1 0 1 1 0 0 0 1 0 1 0 0 1 1 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0"
    )
    part = AvrPart("p", "P", ops={AvrOperation.PGM_ENABLE: template})
    assert build_command(part, AvrOperation.PGM_ENABLE) == bytes([0xAC, 0x53, 0x00, 0x00])


def test_build_missing_opcode(part: AvrPart) -> None:
    with pytest.raises(SPIProgMissingOpcode, match="writepage"):
        build_command(part, AvrOperation.WRITEPAGE)


@pytest.mark.parametrize(
    "response, result",
    [
        (bytes([0x00, 0x53, 0x53, 0x00]), True),
        (bytes([0xFF, 0xFF, 0x53, 0xFF]), True),
        (bytes([0x00, 0x00, 0x00, 0x00]), False),
        (bytes([0x00, 0x53, 0x00, 0x53]), False),
        (bytes([0xAC, 0x53, 0x54, 0x00]), False),
    ],
)
def test_validate_enable(response: bytes, result: bool) -> None:
    assert validate_enable(bytes([0xAC, 0x53, 0x00, 0x00]), response) is result


def test_validate_enable_wrong_length() -> None:
    with pytest.raises(SPIProgValueError):
        validate_enable(bytes([0xAC, 0x53, 0x00, 0x00]), bytes([0x00, 0x53, 0x53]))
