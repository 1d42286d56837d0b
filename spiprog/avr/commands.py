#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""AVR serial programming command frames.

Command frames are 4 bytes long. They are built from an all-zero frame with the
fixed bits of the part's opcode template applied on top.
"""

import logging

from spiprog.avr.opcode import CMD_LENGTH
from spiprog.avr.part import AvrOperation, AvrPart
from spiprog.exceptions import SPIProgValueError
from spiprog.utils.misc import hex_bytes

logger = logging.getLogger(__name__)

# Byte of the command echoed back by the target in response to program enable
ENABLE_ECHO_CMD_INDEX = 1
ENABLE_ECHO_RESPONSE_INDEX = 2


def build_command(part: AvrPart, operation: AvrOperation) -> bytes:
    """Build the command frame of an operation for given part.

    :param part: Target part description.
    :param operation: Requested operation.
    :raises SPIProgMissingOpcode: The part has no template for the operation.
    :return: 4-byte command frame.
    """
    template = part.get_op(operation)
    cmd = bytes(template.set_bits(bytearray(CMD_LENGTH)))
    logger.debug(f"{part.desc}: {operation.label} -> [{hex_bytes(cmd)}]")
    return cmd


def validate_enable(cmd: bytes, response: bytes) -> bool:
    """Check the response to the program enable instruction.

    A target that accepted the instruction echoes the second command byte back
    as the third response byte.

    :param cmd: Sent program enable command.
    :param response: Response received during the same exchange.
    :raises SPIProgValueError: Command or response of wrong length.
    :return: True if the target is in sync.
    """
    if len(cmd) != CMD_LENGTH or len(response) != CMD_LENGTH:
        raise SPIProgValueError(
            f"Command and response must be {CMD_LENGTH} bytes long, "
            f"got {len(cmd)} and {len(response)}"
        )
    return response[ENABLE_ECHO_RESPONSE_INDEX] == cmd[ENABLE_ECHO_CMD_INDEX]
