#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SPI channel stub replaying prepared responses."""

from typing import Any, Optional

from spiprog.transport.base import SpiChannelBase

ECHO_OK = bytes([0x00, 0x53, 0x53, 0x00])
ECHO_BAD = bytes([0x00, 0x53, 0x00, 0x00])


class StubChannel(SpiChannelBase):
    """SPI channel replaying prepared responses and recording sent frames.

    Each item of ``responses`` is either response bytes or an exception to raise.
    The last item is repeated once the list is exhausted.
    """

    def __init__(self, responses: Optional[list[Any]] = None) -> None:
        self.responses = list(responses or [ECHO_OK])
        self.sent: list[tuple[str, bytes]] = []

    def duplex(self, port: str, tx: bytes, length: int) -> bytes:
        self.sent.append((port, bytes(tx)))
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return bytes(response)

    def __str__(self) -> str:
        return "stub"

    @property
    def frames(self) -> list[bytes]:
        """Sent frames without the port."""
        return [frame for _, frame in self.sent]
