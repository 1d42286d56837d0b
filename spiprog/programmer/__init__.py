#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG programmer backends."""

from spiprog.programmer.base import ProgrammerBase, ProgrammerState
from spiprog.programmer.linuxspi import LinuxSpiProgrammer

PROGRAMMERS: dict[str, type[ProgrammerBase]] = {
    LinuxSpiProgrammer.TYPE: LinuxSpiProgrammer,
}

__all__ = ["PROGRAMMERS", "LinuxSpiProgrammer", "ProgrammerBase", "ProgrammerState"]
