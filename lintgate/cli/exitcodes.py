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

from lintgate.core.errors import BuildFailure

# CI-friendly semantics
EXIT_OK = 0
EXIT_LINT_FAILURES = 1
EXIT_ENGINE_ERROR = 2


def exit_code_from_error(error: BaseException) -> int:
    """
    Determine exit code for a run that raised.
    Policy:
      - BuildFailure (lint errors with --fail-build) => EXIT_LINT_FAILURES
      - anything else (configuration, engine, I/O)   => EXIT_ENGINE_ERROR

    A run that returns normally always exits with EXIT_OK.
    """
    if isinstance(error, BuildFailure):
        return EXIT_LINT_FAILURES
    return EXIT_ENGINE_ERROR
