#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPIPROG custom enumeration with tag/label/description members.

Members are declared as ``NAME = (tag, label, description)`` and can be looked up
by case-insensitive label, which is how operation names and part flags are
written in part description files.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self

from spiprog.exceptions import SPIProgKeyError


@dataclass(frozen=True)
class SpiProgEnumMember:
    """SPIPROG Enum member representation."""

    tag: int
    label: str
    description: Optional[str] = None


class SpiProgEnum(SpiProgEnumMember, Enum):
    """SPIPROG enhanced enumeration.

    Equality is satisfied by the member itself, its tag or its label.
    """

    def __eq__(self, other: object) -> bool:
        return self is other or other in (self.tag, self.label)

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Labels of all members in declaration order."""
        return [member.label for member in cls]

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label (case-insensitive).

        :param label: Member label, e.g. ``chip_erase``.
        :raises SPIProgKeyError: No member has the label.
        :return: Enum member.
        """
        if isinstance(label, str):
            for member in cls:
                if member.label.lower() == label.lower():
                    return member
        raise SPIProgKeyError(
            f"Unknown {cls.__name__} '{label}', expected one of: {', '.join(cls.labels())}"
        )
