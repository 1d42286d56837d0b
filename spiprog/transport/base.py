#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPI channel base class.

A channel performs one atomic full-duplex exchange against a named SPI bus. It
keeps no state between exchanges, so a single channel object can serve any
number of programmer sessions one call at a time.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SpiTransferConfig:
    """Fixed parameters of every SPI exchange.

    :param speed_hz: SPI clock; 500 kHz settles around the standard 400 kHz on most buses.
    :param bits_per_word: Word size.
    :param delay_usecs: Delay after the transfer before the chip select is released.
    """

    speed_hz: int = 500_000
    bits_per_word: int = 8
    delay_usecs: int = 1


DEFAULT_TRANSFER_CONFIG = SpiTransferConfig()


class SpiChannelBase(ABC):
    """Abstract base class of SPI channels."""

    @abstractmethod
    def duplex(self, port: str, tx: bytes, length: int) -> bytes:
        """Exchange data with the SPI device in full duplex mode.

        :param port: SPI bus identifier (e.g. ``/dev/spidev0.0``).
        :param tx: Data to transmit, exactly ``length`` bytes.
        :param length: Number of bytes to exchange.
        :raises SPIProgOpenFailed: The bus cannot be acquired.
        :raises SPIProgShortTransfer: The exchange did not transfer ``length`` bytes.
        :return: Exactly ``length`` received bytes.
        """

    @abstractmethod
    def __str__(self) -> str:
        """Return string containing information about the channel."""
