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

from dataclasses import dataclass, field

from lintgate.linting.types import ResultRecord


@dataclass
class RunAccumulator:
    """
    Counters and error text collected over one run.

    One instance per run; error_blocks is append-only.
    """

    total_files: int = 0
    total_failures: int = 0
    error_blocks: list[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return self.total_failures > 0

    def record(self, record: ResultRecord) -> None:
        self.total_files += 1
        if record.failure_count > 0:
            self.total_failures += record.failure_count

    def add_error(self, block: str) -> None:
        self.error_blocks.append(block)
