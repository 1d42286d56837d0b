#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Common click options of SPIPROG applications."""

import logging
from typing import Callable, TypeVar

import click

from spiprog import __version__ as spiprog_version

FC = TypeVar("FC", bound=Callable)


def spiprog_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(spiprog_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def spiprog_port_option(options: FC) -> FC:
    """Port click option.

    Provides: `port: str` path to the spidev device node.

    :return: click decorator
    """
    return click.option(
        "-p",
        "--port",
        metavar="<device>",
        help="SPI device node, e.g. /dev/spidev0.0",
    )(options)


def spiprog_part_options(options: FC) -> FC:
    """Part selection click options.

    Provides: `part: str` built-in part name and `part_file: str` path to part description.

    :return: click decorator
    """
    options = click.option(
        "-c",
        "--part-file",
        type=click.Path(resolve_path=True, exists=True, dir_okay=False),
        help="Path to the YAML/JSON part description file.",
    )(options)
    options = click.option(
        "-P",
        "--part",
        metavar="<part>",
        help="Built-in part identifier or name, e.g. m328p or ATmega328P.",
    )(options)
    return options
