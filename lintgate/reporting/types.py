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

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Routing(str, Enum):
    """
    Where the end-of-run report goes.

    FILE    -> written to the configured output file, never fails the build
    CONSOLE -> printed; may fail the build
    """

    FILE = "file"
    CONSOLE = "console"


@dataclass(frozen=True, slots=True)
class RenderedRun:
    """
    Report text for a finished run plus the routing decision.

    summary is the first line of body when the run has failures, otherwise None.
    """

    routing: Routing
    body: str
    summary: str | None
    output_path: Path | None
    should_fail: bool


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """
    Result of LintPipeline.run_once().
    """

    total_files: int
    total_failures: int
    routing: Routing
    body: str
    output_path: Path | None = None

    @property
    def passed(self) -> bool:
        return self.total_failures == 0
