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

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

DEFAULT_CONFIG_FILE: Final[str] = "lintgate.json"
DEFAULT_FORMATTER: Final[str] = "prose"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = ("py",)
DEFAULT_TARGET_EXTENSION: Final[str] = "_lint_test.py"

# (relative_path, not_passed, escaped_errors) -> stub source
TestGenerator = Callable[[str, bool, str], str]
ErrorHook = Callable[[str], None]


@dataclass(frozen=True)
class LintOptions:
    """
    Caller-facing options, as passed when constructing a pipeline.

    Nothing here is validated yet; DefaultConfigurationLoader turns this into
    an AnalysisConfiguration.
    """

    configuration: str | Path | None = None  # rules file (default: lintgate.json)
    output_file: str | Path | None = None  # route the report to a file
    fail_build: bool = False
    disable_test_generator: bool = False
    test_generator: TestGenerator | None = None
    formatter: str | None = None
    log_error: ErrorHook | None = None  # receives each error line (for tests)
    annotation: str | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    target_extension: str = DEFAULT_TARGET_EXTENSION


@dataclass(frozen=True)
class AnalysisConfiguration:
    """
    Validated, immutable configuration for every run of a pipeline.

    `document` is the whole parsed rules file; engines may read keys beyond
    `rules` from it.
    """

    source_path: Path
    rules: Mapping[str, Any]
    document: Mapping[str, Any] = field(default_factory=dict)
    output_file: Path | None = None
    fail_build: bool = False
    disable_test_generator: bool = False
    test_generator: TestGenerator | None = None
    formatter: str = DEFAULT_FORMATTER
    annotation: str | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    target_extension: str = DEFAULT_TARGET_EXTENSION

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to store read-only views
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        object.__setattr__(self, "document", MappingProxyType(dict(self.document)))

    @property
    def routes_to_file(self) -> bool:
        return self.output_file is not None
