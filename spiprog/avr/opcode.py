#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""AVR serial programming opcode templates.

Every serial programming instruction is 32 bits wide, sent as 4 bytes MSB first.
An opcode template describes the meaning of each of those bits for one operation
of one part, written as 32 space separated tokens starting with bit 31::

    pgm_enable: "1 0 1 0 1 1 0 0  0 1 0 1 0 0 1 1  x x x x x x x x  x x x x x x x x"

Token meaning:

- ``0`` / ``1``: fixed value bit,
- ``x``: ignored bit (sent as 0),
- ``aN``: bit N of the memory address (``a`` alone uses the bit position modulo 8),
- ``i``: input data bit (host to target),
- ``o``: output data bit (target to host).
"""

from dataclasses import dataclass
from typing import Sequence, Union

from typing_extensions import Self

from spiprog.exceptions import SPIProgValueError
from spiprog.utils.spiprog_enum import SpiProgEnum

OPCODE_BITS = 32
CMD_LENGTH = OPCODE_BITS // 8


class OpcodeBitType(SpiProgEnum):
    """Kind of a single bit in an opcode template."""

    IGNORE = (0, "x", "Ignored bit")
    VALUE = (1, "value", "Fixed value bit")
    ADDRESS = (2, "a", "Address bit")
    INPUT = (3, "i", "Input data bit")
    OUTPUT = (4, "o", "Output data bit")


@dataclass(frozen=True)
class OpcodeBit:
    """Single bit descriptor of an opcode template.

    :param type: Kind of the bit.
    :param bitno: Bit number within the address/data word (address and data bits only).
    :param value: Fixed value (value bits only).
    """

    type: OpcodeBitType
    bitno: int = 0
    value: int = 0

    def __str__(self) -> str:
        if self.type == OpcodeBitType.VALUE:
            return str(self.value)
        if self.type == OpcodeBitType.ADDRESS:
            return f"a{self.bitno}"
        return self.type.label


class OpcodeTemplate:
    """Per-part, per-operation description of a 4-byte instruction frame.

    ``bits[i]`` describes bit ``i`` of the 32-bit instruction; bit 31 is the MSB of
    the first byte on the wire.
    """

    def __init__(self, bits: Sequence[OpcodeBit]) -> None:
        """Initialize the template.

        :param bits: 32 bit descriptors, index 0 being the LSB of the last byte.
        :raises SPIProgValueError: Wrong number of bits.
        """
        if len(bits) != OPCODE_BITS:
            raise SPIProgValueError(
                f"Opcode template must describe {OPCODE_BITS} bits, got {len(bits)}"
            )
        self.bits = tuple(bits)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the textual form of an opcode template.

        :param text: 32 whitespace separated tokens, bit 31 first.
        :raises SPIProgValueError: Wrong token count or unknown token.
        :return: Parsed template.
        """
        tokens = text.split()
        if len(tokens) != OPCODE_BITS:
            raise SPIProgValueError(
                f"Opcode template must have {OPCODE_BITS} tokens, got {len(tokens)}: '{text}'"
            )
        bits: list[OpcodeBit] = [OpcodeBit(OpcodeBitType.IGNORE)] * OPCODE_BITS
        for position, token in enumerate(tokens):
            bitno = OPCODE_BITS - 1 - position
            bits[bitno] = cls._parse_token(token.lower(), bitno)
        return cls(bits)

    @staticmethod
    def _parse_token(token: str, bitno: int) -> OpcodeBit:
        if token in ("0", "1"):
            return OpcodeBit(OpcodeBitType.VALUE, bitno=bitno, value=int(token))
        if token == "x":
            return OpcodeBit(OpcodeBitType.IGNORE, bitno=bitno)
        if token == "i":
            return OpcodeBit(OpcodeBitType.INPUT, bitno=bitno % 8)
        if token == "o":
            return OpcodeBit(OpcodeBitType.OUTPUT, bitno=bitno % 8)
        if token.startswith("a"):
            if len(token) == 1:
                return OpcodeBit(OpcodeBitType.ADDRESS, bitno=bitno % 8)
            if token[1:].isdigit():
                return OpcodeBit(OpcodeBitType.ADDRESS, bitno=int(token[1:]))
        raise SPIProgValueError(f"Invalid opcode bit '{token}' at bit {bitno}")

    def set_bits(self, cmd: Union[bytearray, bytes]) -> bytearray:
        """Apply the fixed value bits of the template to a command frame.

        Bits of other kinds are left untouched.

        :param cmd: 4-byte command frame.
        :return: The updated frame (``cmd`` itself when it is a bytearray).
        """
        if len(cmd) != CMD_LENGTH:
            raise SPIProgValueError(f"Command must be {CMD_LENGTH} bytes long, got {len(cmd)}")
        frame = cmd if isinstance(cmd, bytearray) else bytearray(cmd)
        for i, bit in enumerate(self.bits):
            if bit.type != OpcodeBitType.VALUE:
                continue
            j = CMD_LENGTH - 1 - i // 8
            mask = 1 << (i % 8)
            if bit.value:
                frame[j] |= mask
            else:
                frame[j] &= ~mask & 0xFF
        return frame

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OpcodeTemplate) and self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __str__(self) -> str:
        return " ".join(str(bit) for bit in reversed(self.bits))

    def __repr__(self) -> str:
        return f"OpcodeTemplate('{self}')"
