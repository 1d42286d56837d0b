#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""AVR part description.

A part description tells the programmer how to talk to one AVR device: the
opcode templates of its serial programming instructions, its capability flags
and the time the chip needs to finish a chip erase.

Part descriptions are YAML or JSON documents::

    id: m328p
    desc: ATmega328P
    chip_erase_delay: 9000      # microseconds
    flags: []                   # e.g. [tpi]
    ops:
      pgm_enable: "1 0 1 0 1 1 0 0 0 1 0 1 0 0 1 1 x x x x x x x x x x x x x x x x"
      chip_erase: "1 0 1 0 1 1 0 0 1 0 0 x x x x x x x x x x x x x x x x x x x x x"
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

import fastjsonschema
from typing_extensions import Self

from spiprog.avr.opcode import OpcodeTemplate
from spiprog.exceptions import SPIProgError, SPIProgMissingOpcode, SPIProgValueError
from spiprog.utils.misc import load_configuration, value_to_int
from spiprog.utils.spiprog_enum import SpiProgEnum

logger = logging.getLogger(__name__)


class AvrOperation(SpiProgEnum):
    """Serial programming operations a part may define an opcode for."""

    READ = (0, "read", "Read memory byte")
    WRITE = (1, "write", "Write memory byte")
    READ_LO = (2, "read_lo", "Read low byte of a program memory word")
    READ_HI = (3, "read_hi", "Read high byte of a program memory word")
    WRITE_LO = (4, "write_lo", "Write low byte of a program memory word")
    WRITE_HI = (5, "write_hi", "Write high byte of a program memory word")
    LOADPAGE_LO = (6, "loadpage_lo", "Load low byte of a page buffer word")
    LOADPAGE_HI = (7, "loadpage_hi", "Load high byte of a page buffer word")
    LOAD_EXT_ADDR = (8, "load_ext_addr", "Load extended address byte")
    WRITEPAGE = (9, "writepage", "Write page buffer to memory")
    CHIP_ERASE = (10, "chip_erase", "Erase the whole chip")
    PGM_ENABLE = (11, "pgm_enable", "Enter serial programming mode")


class PartFlag(SpiProgEnum):
    """Part capability flags."""

    TPI = (0x01, "tpi", "Programmable only through the Tiny Programming Interface")
    PDI = (0x02, "pdi", "Programmable only through the Program and Debug Interface")
    UPDI = (0x04, "updi", "Programmable only through the Unified Program and Debug Interface")


# Flags marking parts that cannot be served by a plain SPI (ISP) programmer
ALTERNATE_PROTOCOL_FLAGS = (PartFlag.TPI, PartFlag.PDI, PartFlag.UPDI)

PART_SCHEMA: dict[str, Any] = {
    "type": "object",
    "title": "AVR part description",
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "desc": {"type": "string", "minLength": 1},
        "chip_erase_delay": {"anyOf": [{"type": "integer", "minimum": 0}, {"type": "string"}]},
        "flags": {"type": "array", "items": {"type": "string", "enum": PartFlag.labels()}},
        "ops": {
            "type": "object",
            "propertyNames": {"enum": AvrOperation.labels()},
            "additionalProperties": {"type": "string"},
        },
    },
    "required": ["id", "desc", "ops"],
}

_validate_part = fastjsonschema.compile(PART_SCHEMA)


class AvrPart:
    """Description of one AVR part as consumed by the programmer.

    :param id: Short part identifier (e.g. ``m328p``).
    :param desc: Human readable part name, used for diagnostics only.
    :param ops: Opcode templates keyed by operation.
    :param flags: Capability flags.
    :param chip_erase_delay: Time the chip needs to complete a chip erase in microseconds.
    :raises SPIProgValueError: Negative chip erase delay.
    """

    def __init__(
        self,
        id: str,  # pylint: disable=redefined-builtin
        desc: str,
        ops: Optional[Mapping[AvrOperation, OpcodeTemplate]] = None,
        flags: Iterable[PartFlag] = (),
        chip_erase_delay: int = 0,
    ) -> None:
        if chip_erase_delay < 0:
            raise SPIProgValueError(
                f"Chip erase delay of part {desc} must not be negative, got {chip_erase_delay}"
            )
        self.id = id
        self.desc = desc
        self.ops: dict[AvrOperation, OpcodeTemplate] = dict(ops or {})
        self.flags = frozenset(flags)
        self.chip_erase_delay = chip_erase_delay

    def __repr__(self) -> str:
        return f"AvrPart(id={self.id!r}, desc={self.desc!r})"

    def __str__(self) -> str:
        return self.desc

    def has_flag(self, flag: PartFlag) -> bool:
        """Check whether the part has given capability flag.

        :param flag: Flag to check.
        :return: True if the flag is set.
        """
        return flag in self.flags

    @property
    def alternate_protocol_only(self) -> bool:
        """True if the part cannot be programmed through the SPI ISP protocol."""
        return any(self.has_flag(flag) for flag in ALTERNATE_PROTOCOL_FLAGS)

    def get_op(self, operation: AvrOperation) -> OpcodeTemplate:
        """Get the opcode template of an operation.

        :param operation: Requested operation.
        :raises SPIProgMissingOpcode: The part does not define the operation.
        :return: Opcode template.
        """
        template = self.ops.get(operation)
        if template is None:
            raise SPIProgMissingOpcode(
                f"{operation.label} instruction not defined for part \"{self.desc}\""
            )
        return template

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Self:
        """Create part description from configuration data.

        :param config: Part configuration dictionary.
        :raises SPIProgError: Configuration does not match the part schema.
        :return: Part description.
        """
        try:
            _validate_part(config)
        except fastjsonschema.JsonSchemaValueException as exc:
            raise SPIProgError(f"Invalid part description: {exc.message}") from exc

        ops = {
            AvrOperation.from_label(name): OpcodeTemplate.parse(text)
            for name, text in config["ops"].items()
        }
        flags = [PartFlag.from_label(flag) for flag in config.get("flags", [])]
        part = cls(
            id=config["id"],
            desc=config["desc"],
            ops=ops,
            flags=flags,
            chip_erase_delay=value_to_int(config.get("chip_erase_delay", 0)),
        )
        logger.debug(f"Loaded part {part.desc} with operations: {[op.label for op in ops]}")
        return part

    @classmethod
    def load(cls, path: str, search_paths: Optional[list[str]] = None) -> Self:
        """Load part description from YAML or JSON file.

        :param path: Path to the part description file.
        :param search_paths: List of paths where to search for the file.
        :return: Part description.
        """
        return cls.from_config(load_configuration(path, search_paths=search_paths))

    def to_config(self) -> dict[str, Union[str, int, list, dict]]:
        """Export the part description into configuration data.

        :return: Configuration dictionary accepted by :meth:`from_config`.
        """
        return {
            "id": self.id,
            "desc": self.desc,
            "chip_erase_delay": self.chip_erase_delay,
            "flags": sorted(flag.label for flag in self.flags),
            "ops": {op.label: str(template) for op, template in self.ops.items()},
        }
