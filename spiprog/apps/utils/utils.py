#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG application utilities: error handling and argument parsing."""

import logging
import re
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from spiprog import SPIPROG_DEBUG_LOG_FILE, SPIPROG_DEBUG_LOGGING_DISABLED
from spiprog.exceptions import SPIProgError, SPIProgFatalConfigError

logger = logging.getLogger(__name__)


class SPIProgAppError(SPIProgError):
    """SPIPROG application error exception for CLI tools.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


def catch_spiprog_error(function: Callable) -> Callable:
    """Turn exceptions escaping a CLI entry point into an error message and exit code.

    Exit codes: the error code of ``SPIProgAppError``, 1 for an unusable programmer
    configuration, 2 for any other ``SPIProgError`` and 3 for unexpected errors.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except SPIProgAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            sys.exit(app_exc.error_code if 0 < app_exc.error_code < 256 else 1)
        except SPIProgFatalConfigError as fatal_exc:
            click.echo(f"{fatal_exc.__class__.__name__}: {fatal_exc}", err=True)
            sys.exit(1)
        except SPIProgError as spiprog_exc:
            click.echo(f"{spiprog_exc.__class__.__name__}: {spiprog_exc}", err=True)
            logger.debug(str(spiprog_exc), exc_info=True)
            if not SPIPROG_DEBUG_LOGGING_DISABLED:
                click.secho(f"See debug log file {SPIPROG_DEBUG_LOG_FILE}", fg="yellow", err=True)
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            sys.exit(3)

    return wrapper


def parse_hex_data(hex_data: str) -> bytes:
    """Parse hex-data into bytes.

    :param hex_data: input hex-data, e.g: ``AC 53 00 00``, ``{{AC530000}}``, ``0xAC530000``
    :raises SPIProgError: Failure to parse given input
    :return: data parsed from input
    """
    hex_data = hex_data.replace(" ", "")
    hex_data = hex_data.replace("{{", "").replace("}}", "").replace("[[", "").replace("]]", "")
    if hex_data.lower().startswith("0x"):
        hex_data = hex_data[2:]
    if not hex_data or not re.fullmatch(r"[0-9a-fA-F]*", hex_data) or len(hex_data) % 2:
        raise SPIProgError(f"Incorrect hex-data: '{hex_data}' is not a valid hex string")
    return bytes.fromhex(hex_data)
