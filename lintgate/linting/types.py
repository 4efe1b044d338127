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


@dataclass(frozen=True, slots=True)
class LintResult:
    """
    What a lint engine reports for one file.

    failure_count: number of rule violations
    output:        formatted diagnostics (possibly empty)
    """

    failure_count: int
    output: str = ""

    def __post_init__(self) -> None:
        if self.failure_count < 0:
            raise ValueError(f"failure_count must be non-negative, got {self.failure_count}")


@dataclass(frozen=True, slots=True)
class ResultRecord:
    """
    Outcome of analyzing a single file during a run.
    """

    relative_path: str
    failure_count: int
    rendered_output: str = ""

    @property
    def passed(self) -> bool:
        return self.failure_count == 0

    @classmethod
    def from_lint_result(cls, relative_path: str, result: LintResult) -> "ResultRecord":
        return cls(
            relative_path=relative_path,
            failure_count=result.failure_count,
            rendered_output=result.output,
        )


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """
    Per-file value handed back to the file source for placement.

    did_pass keeps the file source contract's polarity: it is True when the
    file has lint failures. Use `passed` for the plain boolean.
    """

    output: str
    did_pass: bool
    errors: str

    @property
    def passed(self) -> bool:
        return not self.did_pass

    def to_dict(self) -> dict[str, object]:
        return {"output": self.output, "didPass": self.did_pass, "errors": self.errors}
