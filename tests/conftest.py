#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any

import pytest

from tests.cli_runner import CliRunner

os.environ["SPIPROG_DEBUG_LOGGING_DISABLED"] = "True"

# pylint: disable=wrong-import-position
from spiprog.avr.opcode import OpcodeTemplate
from spiprog.avr.part import AvrOperation, AvrPart, PartFlag

PGM_ENABLE = "1 0 1 0 1 1 0 0 0 1 0 1 0 0 1 1 x x x x x x x x x x x x x x x x"
CHIP_ERASE = "1 0 1 0 1 1 0 0 1 0 0 x x x x x x x x x x x x x x x x x x x x x"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    logging.debug(f"data_dir for module: {request.fspath}")
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def part() -> AvrPart:
    """ISP programmable part with program enable and chip erase instructions."""
    return AvrPart(
        id="m328p",
        desc="ATmega328P",
        ops={
            AvrOperation.PGM_ENABLE: OpcodeTemplate.parse(PGM_ENABLE),
            AvrOperation.CHIP_ERASE: OpcodeTemplate.parse(CHIP_ERASE),
        },
        chip_erase_delay=9000,
    )


@pytest.fixture
def tpi_part() -> AvrPart:
    """Part programmable only through TPI."""
    return AvrPart(
        id="t10",
        desc="ATtiny10",
        ops={AvrOperation.PGM_ENABLE: OpcodeTemplate.parse(PGM_ENABLE)},
        flags=[PartFlag.TPI],
        chip_erase_delay=4000,
    )
