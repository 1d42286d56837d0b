#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPI channel over the Linux spidev driver.

The device node is opened for read-write access right before the exchange and
closed right after it on every exit path; no handle is kept between calls.
"""

import logging
from typing import Optional

import spidev

from spiprog.exceptions import SPIProgOpenFailed, SPIProgShortTransfer, SPIProgValueError
from spiprog.transport.base import DEFAULT_TRANSFER_CONFIG, SpiChannelBase, SpiTransferConfig
from spiprog.utils.misc import hex_bytes

logger = logging.getLogger(__name__)


class SpidevChannel(SpiChannelBase):
    """Full-duplex SPI exchanges through ``/dev/spidevB.C`` device nodes."""

    def __init__(self, config: Optional[SpiTransferConfig] = None) -> None:
        """Initialize the channel.

        :param config: Transfer parameters, defaults to 500 kHz, 8 bits per word, 1 us delay.
        """
        self.config = config or DEFAULT_TRANSFER_CONFIG

    def __str__(self) -> str:
        return (
            f"spidev({self.config.speed_hz} Hz, {self.config.bits_per_word} bits/word, "
            f"{self.config.delay_usecs} us delay)"
        )

    def duplex(self, port: str, tx: bytes, length: int) -> bytes:
        """Exchange data with the SPI device in full duplex mode.

        :param port: Path to the spidev device node.
        :param tx: Data to transmit, exactly ``length`` bytes.
        :param length: Number of bytes to exchange.
        :raises SPIProgValueError: Transmit data length does not match ``length``.
        :raises SPIProgOpenFailed: The device node cannot be opened.
        :raises SPIProgShortTransfer: The exchange did not transfer ``length`` bytes.
        :return: Exactly ``length`` received bytes.
        """
        if len(tx) != length:
            raise SPIProgValueError(f"Transmit data must be {length} bytes, got {len(tx)}")

        spi = spidev.SpiDev()
        try:
            spi.open_path(port)
        except OSError as exc:
            logger.error(f"Unable to open SPI port {port}: {exc}")
            raise SPIProgOpenFailed(f"Unable to open SPI port {port}") from exc

        try:
            logger.debug(f"->SPI {port} [{hex_bytes(tx)}]")
            rx = spi.xfer2(
                list(tx),
                self.config.speed_hz,
                self.config.delay_usecs,
                self.config.bits_per_word,
            )
        except OSError as exc:
            logger.error(f"Unable to send SPI message: {exc}")
            raise SPIProgShortTransfer(f"Unable to send SPI message to {port}: {exc}") from exc
        finally:
            spi.close()

        if len(rx) != length:
            logger.error(f"Unable to send SPI message: {len(rx)} of {length} bytes transferred")
            raise SPIProgShortTransfer(
                f"SPI transfer on {port} returned {len(rx)} bytes, expected {length}"
            )
        data = bytes(rx)
        logger.debug(f"<-SPI {port} <{hex_bytes(data)}>")
        return data
