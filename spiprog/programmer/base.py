#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Programmer base class.

This module provides the abstract interface every programmer backend implements,
whatever transport it uses (spidev, bit-banged GPIO, ...).
"""

from abc import ABC, abstractmethod
from typing import Optional

from spiprog.avr.part import AvrPart
from spiprog.utils.spiprog_enum import SpiProgEnum


class ProgrammerState(SpiProgEnum):
    """Lifecycle state of a programmer session."""

    CLOSED = (0, "closed", "No port configured")
    OPEN = (1, "open", "Port configured, target not in programming mode")
    ENABLED = (2, "enabled", "Target accepted the program enable instruction")


class ProgrammerBase(ABC):
    """Abstract base class of programmer backends.

    :cvar TYPE: Programmer type name.
    :cvar DESCRIPTION: Human readable description of the backend.
    """

    TYPE: str
    DESCRIPTION: str

    @property
    @abstractmethod
    def state(self) -> ProgrammerState:
        """Current lifecycle state."""

    @property
    @abstractmethod
    def port(self) -> Optional[str]:
        """Port the programmer talks to, None until opened."""

    @abstractmethod
    def open(self, port: str) -> None:
        """Configure the port of the programmer.

        :param port: Port identifier.
        :raises SPIProgFatalConfigError: The port is unusable.
        """

    @abstractmethod
    def close(self) -> None:
        """Finish the session."""

    @abstractmethod
    def enable(self, part: AvrPart) -> None:
        """Bring the target into programming mode.

        :param part: Target part description.
        """

    @abstractmethod
    def chip_erase(self, part: AvrPart) -> None:
        """Erase the whole target chip.

        :param part: Target part description.
        """

    @abstractmethod
    def raw_command(self, cmd: bytes) -> bytes:
        """Send a raw 4-byte instruction and return the response.

        :param cmd: Instruction frame.
        :return: Response frame.
        """

    def __str__(self) -> str:
        return f"{self.TYPE} programmer on {self.port or 'no port'} ({self.state.label})"
