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

from typing import TYPE_CHECKING, Protocol

from lintgate.linting.types import FileOutcome, LintResult

if TYPE_CHECKING:
    from lintgate.core.config import AnalysisConfiguration


class LintEngine(Protocol):
    """
    Lint engine contract.

    The engine owns rule evaluation and message formatting. Lintgate only
    consumes the failure count and the rendered text.
    """

    @property
    def name(self) -> str:
        """
        Short engine name used in run summaries.
        Example: "tslint", "ruff".
        """
        raise NotImplementedError()

    def lint(self, relative_path: str, content: str, config: "AnalysisConfiguration") -> LintResult:
        """
        Lint one file's content.

        config.rules and config.formatter are the engine's inputs; the
        remaining fields belong to the pipeline.
        """
        raise NotImplementedError()


class FileProcessor(Protocol):
    """
    What a file source calls back into for every selected file.
    """

    @property
    def extensions(self) -> tuple[str, ...]:
        """
        File suffixes (without the dot) this processor accepts.
        """
        raise NotImplementedError()

    @property
    def target_extension(self) -> str:
        """
        Suffix appended to the source file stem when placing generated output
        (e.g. "_lint_test.py" or ".lint.ts"; include any separator).
        """
        raise NotImplementedError()

    def process_file(self, content: str, relative_path: str) -> FileOutcome:
        raise NotImplementedError()


class FileSource(Protocol):
    """
    Tree walker / cache that selects files and places per-file output.

    build() must call processor.process_file() once per selected file and is
    responsible for writing non-empty FileOutcome.output into its target tree.
    """

    def build(self, processor: FileProcessor) -> None:
        raise NotImplementedError()
