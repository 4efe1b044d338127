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

from lintgate.reporting.console import BufferedConsole, Color, Console, PlainStyle, StdoutConsole, Style
from lintgate.reporting.renderer import ReportDelivery, ReportRenderer, success_line, summary_line
from lintgate.reporting.types import RenderedRun, Routing, RunOutcome

__all__ = [
    "Color",
    "Style",
    "Console",
    "PlainStyle",
    "StdoutConsole",
    "BufferedConsole",
    "Routing",
    "RenderedRun",
    "RunOutcome",
    "ReportRenderer",
    "ReportDelivery",
    "summary_line",
    "success_line",
]
