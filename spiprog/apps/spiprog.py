#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause
"""AVR ISP programmer over the Linux spidev driver."""

import sys
from typing import Optional

import click

from spiprog.apps.utils import spiprog_logger
from spiprog.apps.utils.common_cli_options import (
    spiprog_apps_common_options,
    spiprog_part_options,
    spiprog_port_option,
)
from spiprog.apps.utils.utils import SPIProgAppError, catch_spiprog_error, parse_hex_data
from spiprog.avr.database import get_part, get_parts
from spiprog.avr.part import AvrPart
from spiprog.programmer.linuxspi import LinuxSpiProgrammer
from spiprog.utils.misc import hex_bytes


@click.group(name="spiprog", no_args_is_help=True)
@spiprog_apps_common_options
@spiprog_port_option
@spiprog_part_options
@click.pass_context
def main(
    ctx: click.Context,
    port: Optional[str],
    part: Optional[str],
    part_file: Optional[str],
    log_level: int,
) -> int:
    """Utility for programming AVR parts through a Linux spidev SPI bus."""
    spiprog_logger.install(level=log_level)
    ctx.obj = {"port": port, "part": part, "part_file": part_file}
    return 0


def _get_part(ctx: click.Context) -> AvrPart:
    if ctx.obj["part_file"]:
        return AvrPart.load(ctx.obj["part_file"])
    if ctx.obj["part"]:
        return get_part(ctx.obj["part"])
    raise SPIProgAppError("Part must be provided, use --part or --part-file")


def _get_programmer(ctx: click.Context) -> LinuxSpiProgrammer:
    programmer = LinuxSpiProgrammer()
    programmer.open(ctx.obj["port"])
    ctx.call_on_close(programmer.close)
    return programmer


@main.command()
@click.pass_context
def enable(ctx: click.Context) -> None:
    """Bring the part into serial programming mode."""
    part = _get_part(ctx)
    programmer = _get_programmer(ctx)
    programmer.enable(part)
    click.echo(f"Programming enabled on {part.desc}")


@main.command()
@click.pass_context
def erase(ctx: click.Context) -> None:
    """Erase the whole chip (flash, EEPROM and lock bits)."""
    part = _get_part(ctx)
    programmer = _get_programmer(ctx)
    programmer.enable(part)
    programmer.chip_erase(part)
    click.echo(f"Chip {part.desc} erased")


@main.command(no_args_is_help=True)
@click.argument("data", type=str, required=True)
@click.pass_context
def cmd(ctx: click.Context, data: str) -> None:
    """Send a raw 4-byte instruction, e.g. "AC 53 00 00", and print the response."""
    frame = parse_hex_data(data)
    programmer = _get_programmer(ctx)
    response = programmer.raw_command(frame)
    click.echo(f"[{hex_bytes(frame)}] -> <{hex_bytes(response)}>")


@main.command()
def parts() -> None:
    """List built-in part descriptions."""
    for part in get_parts():
        flags = f" ({', '.join(sorted(flag.label for flag in part.flags))})" if part.flags else ""
        click.echo(f"{part.id:<8} {part.desc}{flags}")


@catch_spiprog_error
def safe_main() -> None:
    """Calls the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
