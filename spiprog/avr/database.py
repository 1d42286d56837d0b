#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Built-in database of AVR part descriptions.

Part descriptions are stored as YAML files in ``<SPIPROG_DATA_FOLDER>/parts``.
"""

import logging
import os
from functools import lru_cache

from spiprog import SPIPROG_DATA_FOLDER
from spiprog.avr.part import AvrPart
from spiprog.exceptions import SPIProgKeyError

logger = logging.getLogger(__name__)

PARTS_FOLDER = os.path.join(SPIPROG_DATA_FOLDER, "parts")


@lru_cache(maxsize=1)
def get_parts() -> tuple[AvrPart, ...]:
    """Get all parts from the built-in database.

    :return: Part descriptions sorted by identifier.
    """
    parts = []
    for file_name in sorted(os.listdir(PARTS_FOLDER)):
        if not file_name.endswith((".yaml", ".yml", ".json")):
            continue
        parts.append(AvrPart.load(os.path.join(PARTS_FOLDER, file_name)))
    logger.debug(f"Loaded {len(parts)} parts from {PARTS_FOLDER}")
    return tuple(sorted(parts, key=lambda part: part.id))


def get_part(name: str) -> AvrPart:
    """Find part by its identifier or description (case-insensitive).

    :param name: Part identifier (e.g. ``m328p``) or description (e.g. ``ATmega328P``).
    :raises SPIProgKeyError: Unknown part.
    :return: Part description.
    """
    for part in get_parts():
        if name.lower() in (part.id.lower(), part.desc.lower()):
            return part
    raise SPIProgKeyError(
        f"Unknown part '{name}', known parts: {', '.join(part.id for part in get_parts())}"
    )
