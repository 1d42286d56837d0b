#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""AVR ISP programmer using the Linux spidev driver.

This module implements the serial programming handshake of AVR parts on top of
an SPI channel:

1. ``open`` records the spidev device node,
2. ``enable`` sends the program enable instruction until the target echoes it back,
3. ``chip_erase`` sends the chip erase instruction, waits for the part specific
   erase time and runs the enable handshake again, because the erase resets the
   target's serial programming state.

The device node is opened for each exchange only, so ``close`` has nothing to
release.
"""

import logging
import time
from typing import Optional

from spiprog.avr.commands import build_command, validate_enable
from spiprog.avr.opcode import CMD_LENGTH
from spiprog.avr.part import AvrOperation, AvrPart
from spiprog.exceptions import (
    SPIProgDeviceNotResponding,
    SPIProgFatalConfigError,
    SPIProgNotOpenedError,
    SPIProgUnsupportedProtocol,
    SPIProgValueError,
)
from spiprog.programmer.base import ProgrammerBase, ProgrammerState
from spiprog.transport.base import SpiChannelBase
from spiprog.transport.spidev_channel import SpidevChannel
from spiprog.utils.misc import hex_bytes

logger = logging.getLogger(__name__)


class LinuxSpiProgrammer(ProgrammerBase):
    """AVR ISP programmer on a Linux spidev device node.

    Usage::

        programmer = LinuxSpiProgrammer()
        programmer.open("/dev/spidev0.0")
        programmer.enable(part)
        programmer.chip_erase(part)
        programmer.close()

    The programmer provides no locking; calls against one port must be serialized
    by the caller.

    :cvar TYPE: Programmer type name.
    :cvar DESCRIPTION: Human readable description of the backend.
    :cvar ENABLE_RETRIES: Maximal number of program enable attempts.
    :cvar UNKNOWN_PORT: Port name meaning that no port was configured.
    """

    TYPE = "linuxspi"
    DESCRIPTION = "SPI using Linux spidev driver"
    ENABLE_RETRIES = 65
    UNKNOWN_PORT = "unknown"

    def __init__(self, channel: Optional[SpiChannelBase] = None) -> None:
        """Initialize the programmer.

        :param channel: SPI channel used for exchanges, defaults to spidev channel.
        """
        self.channel = channel if channel is not None else SpidevChannel()
        self._port: Optional[str] = None
        self._state = ProgrammerState.CLOSED

    @property
    def state(self) -> ProgrammerState:
        """Current lifecycle state."""
        return self._state

    @property
    def port(self) -> Optional[str]:
        """The spidev device node, None until opened."""
        return self._port

    def open(self, port: Optional[str]) -> None:
        """Record the spidev device node.

        The port can be set only once per programmer instance.

        :param port: Path to the spidev device node.
        :raises SPIProgFatalConfigError: Missing or unknown port, or port already set.
        """
        if not port or port == self.UNKNOWN_PORT:
            logger.critical("No port specified. Port should point to an SPI interface.")
            raise SPIProgFatalConfigError(
                "No port specified. Port should point to an SPI interface."
            )
        if self._port is not None:
            raise SPIProgFatalConfigError(f"Port already set to {self._port}")
        self._port = port
        self._state = ProgrammerState.OPEN
        logger.info(f"Using SPI port {port}")

    def close(self) -> None:
        """Finish the session.

        The device node is released after every exchange, so no protocol action is needed.
        """
        logger.debug(f"Closing {self}")
        self._state = ProgrammerState.CLOSED

    def _check_opened(self) -> str:
        if self._state == ProgrammerState.CLOSED or self._port is None:
            raise SPIProgNotOpenedError("Programmer is not opened, call open() first")
        return self._port

    def _cmd(self, cmd: bytes) -> bytes:
        port = self._check_opened()
        return self.channel.duplex(port, cmd, CMD_LENGTH)

    def raw_command(self, cmd: bytes) -> bytes:
        """Send a raw 4-byte instruction and return the response.

        :param cmd: Instruction frame.
        :raises SPIProgValueError: Frame is not 4 bytes long.
        :raises SPIProgTransportError: The exchange failed.
        :return: 4-byte response frame.
        """
        if len(cmd) != CMD_LENGTH:
            raise SPIProgValueError(f"Command must be {CMD_LENGTH} bytes long, got {len(cmd)}")
        return self._cmd(bytes(cmd))

    def program_enable(self, part: AvrPart) -> bool:
        """Make one program enable attempt.

        :param part: Target part description.
        :raises SPIProgMissingOpcode: The part has no program enable instruction.
        :raises SPIProgTransportError: The exchange failed.
        :return: True if the target echoed the instruction back.
        """
        cmd = build_command(part, AvrOperation.PGM_ENABLE)
        res = self._cmd(cmd)
        return validate_enable(cmd, res)

    def enable(self, part: AvrPart) -> None:
        """Bring the target into serial programming mode.

        Only an echo mismatch is retried, a transport failure aborts the handshake.

        :param part: Target part description.
        :raises SPIProgUnsupportedProtocol: The part is not programmable over SPI.
        :raises SPIProgMissingOpcode: The part has no program enable instruction.
        :raises SPIProgTransportError: An exchange failed.
        :raises SPIProgDeviceNotResponding: No attempt succeeded.
        """
        self._check_opened()
        if part.alternate_protocol_only:
            logger.error(f"Programmer {self.TYPE} does not support {part.desc} protocol")
            raise SPIProgUnsupportedProtocol(
                f"Programmer {self.TYPE} does not support TPI/PDI/UPDI part {part.desc}"
            )
        # fail before any transfer when the instruction is missing
        part.get_op(AvrOperation.PGM_ENABLE)

        for attempt in range(1, self.ENABLE_RETRIES + 1):
            if self.program_enable(part):
                logger.info(f"{part.desc}: programming enabled after {attempt} attempt(s)")
                self._state = ProgrammerState.ENABLED
                return
            logger.debug(f"{part.desc}: program enable echo mismatch, attempt {attempt}")

        logger.error(f"AVR device {part.desc} not responding")
        raise SPIProgDeviceNotResponding(
            f"AVR device {part.desc} not responding after {self.ENABLE_RETRIES} attempts"
        )

    def chip_erase(self, part: AvrPart) -> None:
        """Erase the whole target chip and resynchronize.

        :param part: Target part description.
        :raises SPIProgMissingOpcode: The part has no chip erase instruction.
        :raises SPIProgTransportError: An exchange failed.
        :raises SPIProgError: Any error of the following :meth:`enable`.
        """
        self._check_opened()
        cmd = build_command(part, AvrOperation.CHIP_ERASE)
        res = self._cmd(cmd)
        logger.debug(f"{part.desc}: chip erase response <{hex_bytes(res)}>")
        # the erase drops the target out of programming mode
        if self._state == ProgrammerState.ENABLED:
            self._state = ProgrammerState.OPEN
        time.sleep(part.chip_erase_delay / 1_000_000)
        self.enable(part)
        logger.info(f"{part.desc}: chip erased")
