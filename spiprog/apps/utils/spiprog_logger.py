#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG logging utilities with colored console output support."""

import logging
import logging.handlers
import os
import platform
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from spiprog import SPIPROG_DEBUG_LOG_FILE, SPIPROG_DEBUG_LOGGING_DISABLED, __version__

colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Formatter with a per-level format, optionally wrapped in colorama colors.

    Everything except INFO carries the source location and the time since start.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORS = {
        logging.DEBUG: colorama.Fore.BLUE,
        logging.INFO: colorama.Fore.WHITE + colorama.Style.BRIGHT,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }

    def __init__(self, colored: bool = True) -> None:
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        fmt = self.FORMAT if record.levelno == logging.INFO else self.FORMAT_DEBUG
        if self.colored:
            fmt = self.COLORS.get(record.levelno, "") + fmt + colorama.Style.RESET_ALL
        return logging.Formatter(fmt).format(record)


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    create_debug_logger: bool = True,
) -> None:
    """Attach console and debug file handlers to the ``spiprog`` logger.

    Console output is colored only on a terminal and when ``NO_COLOR`` is not set,
    unless ``colored`` forces the choice. The rotating debug file receives every
    record down to DEBUG unless ``SPIPROG_DEBUG_LOGGING_DISABLED`` is set.

    :param level: Console logging level, defaults to logging.WARNING.
    :param stream: Console stream, defaults to sys.stderr.
    :param colored: Force colored (True) or plain (False) console output.
    :param create_debug_logger: Create the rotating debug log file handler.
    """
    spiprog_logger = logging.getLogger("spiprog")
    spiprog_logger.setLevel(logging.DEBUG)

    if colored is None:
        # https://no-color.org/
        colored = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level or logging.WARNING)
    handler.setFormatter(ColoredFormatter(colored))
    spiprog_logger.addHandler(handler)

    if not create_debug_logger or SPIPROG_DEBUG_LOGGING_DISABLED:
        return
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and h.baseFilename == SPIPROG_DEBUG_LOG_FILE
        for h in spiprog_logger.handlers
    ):
        return
    try:
        os.makedirs(os.path.dirname(SPIPROG_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            SPIPROG_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        spiprog_logger.warning(f"Failed to initialize debug logging: {exc}")
        return
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    spiprog_logger.addHandler(debug_handler)

    spiprog_logger.debug(f"spiprog {__version__} started {datetime.now():%Y-%m-%d %H:%M:%S}")
    spiprog_logger.debug(f"Python {sys.version.split()[0]} on {platform.platform()}")
    spiprog_logger.debug(f"Command line: {sys.argv}")
