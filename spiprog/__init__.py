#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG - AVR in-system programmer over the Linux spidev interface.

The package drives the serial programming handshake of AVR microcontrollers
through a kernel-exposed SPI device node (``/dev/spidevB.C``): it builds the
4-byte ISP instruction frames from per-part opcode templates, performs the
bounded program-enable handshake and the chip erase sequence.

MULTIPLE INTERFACES:
    - Pure Python library (``spiprog.programmer.linuxspi.LinuxSpiProgrammer``)
    - ``spiprog`` command line tool
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_spiprog_version() -> Version:
    """Get SPIPROG version information.

    :return: Parsed version object containing SPIPROG version information.
    """
    from .__version__ import __version__ as spiprog_version

    return parse(spiprog_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_spiprog_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)


# The SPIPROG behavior settings
SPIPROG_VERSION_BASE = version.base_version
SPIPROG_DATA_FOLDER = os.environ.get("SPIPROG_DATA_FOLDER") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data"
)
SPIPROG_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="spiprog",
    version=SPIPROG_VERSION_BASE,
)

SPIPROG_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("SPIPROG_DEBUG_LOGGING_DISABLED"))
SPIPROG_DEBUG_LOG_FILE = os.environ.get(
    "SPIPROG_DEBUG_LOG_FILE", os.path.join(SPIPROG_PLATFORM_DIRS.user_log_dir, "debug.log")
)
