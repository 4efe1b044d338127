# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Lintgate Contributors
#
# This file is part of Lintgate.
#
# Lintgate is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Lintgate is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import sys
from dataclasses import dataclass, field
from typing import Literal, Protocol, TextIO

Color = Literal["blue", "red", "yellow", "green"]


class Style(Protocol):
    """
    Coloring strategy for user-facing messages.
    """

    def paint(self, message: str, color: Color) -> str:
        raise NotImplementedError()


class Console(Protocol):
    """
    Console-equivalent output channel.
    """

    def print(self, message: str) -> None:
        raise NotImplementedError()


class PlainStyle:
    """No colors: messages are returned unchanged."""

    def paint(self, message: str, color: Color) -> str:
        return message


class StdoutConsole:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def print(self, message: str) -> None:
        print(message, file=self._stream or sys.stdout)


@dataclass
class BufferedConsole:
    """
    Collects printed messages in memory.

    Used when embedding lintgate in another tool that renders output itself.
    """

    lines: list[str] = field(default_factory=list)

    def print(self, message: str) -> None:
        self.lines.append(message)
