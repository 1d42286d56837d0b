#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG exception classes.

This module defines the exception hierarchy used throughout SPIPROG. Errors are
grouped by how the caller is expected to react: configuration errors stop the
workflow outright, transport errors abort only the current operation, protocol
errors mean the operation is not defined for the part, and handshake errors
mean the target never answered the program enable instruction.
"""

from typing import Optional

#######################################################################
# # SPI Programmer Exceptions
#######################################################################


class SPIProgError(Exception):
    """SPIPROG Base Exception.

    Base exception class for all SPIPROG-related errors.

    :cvar fmt: Default error message format template.
    """

    fmt = "SPIPROG: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base SPIPROG Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class SPIProgKeyError(SPIProgError, KeyError):
    """SPIPROG Key Error exception for missing or invalid keys."""


class SPIProgValueError(SPIProgError, ValueError):
    """SPIPROG standard value error exception."""


class SPIProgFatalConfigError(SPIProgError):
    """Unusable programmer configuration.

    Raised when the programmer is configured with a missing or unknown port. There
    is no meaningful recovery; the library never catches this exception and the
    command line tool terminates with exit code 1.
    """


#######################################################################
# # Transport
#######################################################################


class SPIProgTransportError(SPIProgError, ConnectionError):
    """SPI device node acquisition or transfer failure.

    Aborts the current operation only, never retried automatically.
    """


class SPIProgOpenFailed(SPIProgTransportError):
    """The SPI device node cannot be opened for read-write access."""


class SPIProgShortTransfer(SPIProgTransportError):
    """The SPI exchange did not transfer the requested number of bytes."""


class SPIProgNotOpenedError(SPIProgTransportError):
    """Operation requested on a programmer without a port."""


#######################################################################
# # Protocol
#######################################################################


class SPIProgProtocolError(SPIProgError):
    """The requested operation is not defined for the part or protocol."""


class SPIProgMissingOpcode(SPIProgProtocolError):
    """The part has no opcode template for the requested operation."""


class SPIProgUnsupportedProtocol(SPIProgProtocolError):
    """The part can be programmed only through a different protocol (e.g. TPI)."""


#######################################################################
# # Handshake
#######################################################################


class SPIProgHandshakeError(SPIProgError):
    """Program enable handshake failure."""


class SPIProgDeviceNotResponding(SPIProgHandshakeError):
    """All program enable attempts produced echo mismatches."""
