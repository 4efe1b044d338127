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

from collections.abc import Mapping
from typing import Any


class LintgateError(Exception):
    """
    Base class for all lintgate errors.

    Lint failures themselves are never raised: they are recorded per file and
    only surface at the end of a run (see BuildFailure).
    """

    code: str
    message: str
    path: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "lintgate_error",
        path: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.details = details

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigurationError(LintgateError):
    """Raised at construction time when the rules configuration is missing or malformed."""

    pass


class AnalysisError(LintgateError):
    """Raised when the lint engine itself fails on a file."""

    pass


class BuildFailure(LintgateError):
    """
    Raised after a console-routed run printed its report, when the build was
    configured to fail and at least one lint failure was found.
    """

    total_failures: int
    total_files: int

    def __init__(self, total_failures: int, total_files: int) -> None:
        super().__init__(
            message=f"Build failed due to lint errors! ({total_failures} errors in {total_files} files)",
            code="build_failed",
            details={"total_failures": total_failures, "total_files": total_files},
        )
        self.total_failures = total_failures
        self.total_files = total_files
