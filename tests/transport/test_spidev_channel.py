#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the spidev SPI channel."""

from unittest.mock import MagicMock, patch

import pytest

from spiprog.exceptions import (
    SPIProgOpenFailed,
    SPIProgShortTransfer,
    SPIProgTransportError,
    SPIProgValueError,
)
from spiprog.transport.base import SpiTransferConfig
from spiprog.transport.spidev_channel import SpidevChannel

PORT = "/dev/spidev0.0"
FRAME = bytes([0xAC, 0x53, 0x00, 0x00])


@pytest.fixture
def spi_mock():
    """Mocked spidev.SpiDev instance."""
    with patch("spiprog.transport.spidev_channel.spidev.SpiDev") as spidev_cls:
        spi = MagicMock()
        spidev_cls.return_value = spi
        yield spi


def test_duplex(spi_mock: MagicMock) -> None:
    spi_mock.xfer2.return_value = [0x00, 0xAC, 0x53, 0x00]
    channel = SpidevChannel()
    assert channel.duplex(PORT, FRAME, 4) == bytes([0x00, 0xAC, 0x53, 0x00])
    spi_mock.open_path.assert_called_once_with(PORT)
    spi_mock.xfer2.assert_called_once_with([0xAC, 0x53, 0x00, 0x00], 500_000, 1, 8)
    spi_mock.close.assert_called_once()


def test_duplex_custom_config(spi_mock: MagicMock) -> None:
    spi_mock.xfer2.return_value = [0, 0, 0, 0]
    channel = SpidevChannel(SpiTransferConfig(speed_hz=100_000, delay_usecs=10))
    channel.duplex(PORT, FRAME, 4)
    spi_mock.xfer2.assert_called_once_with(list(FRAME), 100_000, 10, 8)
    assert "100000 Hz" in str(channel)


def test_open_failed(spi_mock: MagicMock) -> None:
    spi_mock.open_path.side_effect = FileNotFoundError(2, "No such file or directory")
    with pytest.raises(SPIProgOpenFailed, match=PORT):
        SpidevChannel().duplex(PORT, FRAME, 4)
    spi_mock.xfer2.assert_not_called()


def test_transfer_failed(spi_mock: MagicMock) -> None:
    spi_mock.xfer2.side_effect = OSError(5, "Input/output error")
    with pytest.raises(SPIProgShortTransfer):
        SpidevChannel().duplex(PORT, FRAME, 4)
    spi_mock.close.assert_called_once()


def test_short_transfer(spi_mock: MagicMock) -> None:
    spi_mock.xfer2.return_value = [0x00, 0xAC]
    with pytest.raises(SPIProgShortTransfer, match="2 bytes"):
        SpidevChannel().duplex(PORT, FRAME, 4)
    spi_mock.close.assert_called_once()


def test_transport_errors_are_connection_errors() -> None:
    assert issubclass(SPIProgOpenFailed, SPIProgTransportError)
    assert issubclass(SPIProgShortTransfer, ConnectionError)


def test_tx_length_mismatch(spi_mock: MagicMock) -> None:
    with pytest.raises(SPIProgValueError):
        SpidevChannel().duplex(PORT, FRAME[:3], 4)
    spi_mock.open_path.assert_not_called()
