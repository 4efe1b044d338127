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

from lintgate._version import __version__
from lintgate.core.config import AnalysisConfiguration, LintOptions
from lintgate.core.errors import AnalysisError, BuildFailure, ConfigurationError, LintgateError
from lintgate.core.pipeline import LintPipeline
from lintgate.linting.types import FileOutcome, LintResult, ResultRecord
from lintgate.reporting.types import Routing, RunOutcome

__all__ = [
    "__version__",
    "LintOptions",
    "AnalysisConfiguration",
    "LintPipeline",
    "LintResult",
    "ResultRecord",
    "FileOutcome",
    "Routing",
    "RunOutcome",
    "LintgateError",
    "ConfigurationError",
    "AnalysisError",
    "BuildFailure",
]
