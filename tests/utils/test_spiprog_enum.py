#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of SPIPROG enumeration."""

import pytest

from spiprog.exceptions import SPIProgKeyError
from spiprog.utils.spiprog_enum import SpiProgEnum


class Color(SpiProgEnum):
    """Test enumeration."""

    RED = (1, "red", "Red color")
    GREEN = (2, "green")


def test_lookup() -> None:
    assert Color.from_label("GREEN") is Color.GREEN
    assert Color.from_label("red") is Color.RED
    assert Color.GREEN.description is None


def test_equality() -> None:
    assert Color.RED == 1
    assert Color.RED == "red"
    assert Color.RED != Color.GREEN
    assert Color.RED != 2
    assert Color.labels() == ["red", "green"]
    assert len({Color.RED, Color.RED, Color.GREEN}) == 2


@pytest.mark.parametrize("label", ["blue", "", None, 1])
def test_unknown_label(label) -> None:
    with pytest.raises(SPIProgKeyError, match="red, green"):
        Color.from_label(label)
