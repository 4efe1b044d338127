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

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from lintgate.core.accumulator import RunAccumulator
from lintgate.core.config import AnalysisConfiguration, LintOptions
from lintgate.core.errors import AnalysisError, BuildFailure
from lintgate.core.loader import DefaultConfigurationLoader
from lintgate.linting.interfaces import FileSource, LintEngine
from lintgate.linting.types import FileOutcome, ResultRecord
from lintgate.reporting.console import Console, PlainStyle, StdoutConsole, Style
from lintgate.reporting.renderer import ReportDelivery, ReportRenderer
from lintgate.reporting.types import RunOutcome
from lintgate.stubs.synthesizer import StubSynthesizer


class LintPipeline:
    """
    Lints every file a FileSource hands over and reports once per run.

    Construction validates the rules file (ConfigurationError on any problem),
    so a pipeline that exists is always runnable. Each run_once() call:
      1) starts a fresh RunAccumulator
      2) lets the file source call process_file() per file
      3) renders and delivers the report, even if step 2 raised
    """

    def __init__(
        self,
        engine: LintEngine,
        options: LintOptions | None = None,
        *,
        console: Console | None = None,
        style: Style | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.engine = engine
        self.options = options or LintOptions()
        self.console = console or StdoutConsole()
        self.style = style or PlainStyle()

        loader = DefaultConfigurationLoader(console=self.console, style=self.style)
        self.config: AnalysisConfiguration = loader.load(self.options, cwd=cwd)

        self.synthesizer = StubSynthesizer(generator=self.config.test_generator)
        self.renderer = ReportRenderer(engine_name=engine.name, style=self.style)
        self.delivery = ReportDelivery(console=self.console, style=self.style)

        self._accumulator: RunAccumulator | None = None
        self.last_outcome: RunOutcome | None = None

    def __repr__(self) -> str:
        return f"LintPipeline(engine={self.engine.name!r}, annotation={self.config.annotation!r})"

    # FileProcessor

    @property
    def extensions(self) -> tuple[str, ...]:
        return self.config.extensions

    @property
    def target_extension(self) -> str:
        return self.config.target_extension

    def process_file(self, content: str, relative_path: str) -> FileOutcome:
        accumulator = self._require_run()

        try:
            result = self.engine.lint(relative_path, content, self.config)
        except Exception as e:
            raise AnalysisError(
                code="engine_failed",
                message=f"Lint engine '{self.engine.name}' failed: {e!r}",
                path=relative_path,
                details={"engine": self.engine.name},
            ) from e

        record = ResultRecord.from_lint_result(relative_path, result)
        accumulator.record(record)

        if not record.passed:
            for line in record.rendered_output.split("\n"):
                self.log_error(line)

        output = ""
        if not self.config.disable_test_generator:
            output = self.synthesizer.synthesize(relative_path, not record.passed, record.rendered_output)

        return FileOutcome(output=output, did_pass=not record.passed, errors=record.rendered_output)

    # Run lifecycle

    def run_once(self, file_source: FileSource) -> RunOutcome:
        with self.run_scope():
            file_source.build(self)

        if self.last_outcome is None:
            raise RuntimeError("run finished without an outcome")
        return self.last_outcome

    @contextmanager
    def run_scope(self) -> Iterator[RunAccumulator]:
        """
        Hold one run open. The report is rendered and delivered on every exit
        path. When the run was interrupted by an error, that error propagates
        even if the partial report would also fail the build.
        """
        accumulator = RunAccumulator()
        self._accumulator = accumulator
        self.last_outcome = None
        try:
            yield accumulator
        except BaseException:
            self._accumulator = None
            try:
                self.finalize(accumulator)
            except BuildFailure:
                # the report was delivered; the interrupting error wins
                pass
            raise
        else:
            self._accumulator = None
            self.finalize(accumulator)

    def finalize(self, accumulator: RunAccumulator) -> RunOutcome:
        rendered = self.renderer.render(accumulator, self.config)
        if rendered.summary is not None:
            self._emit(rendered.summary)

        self.last_outcome = RunOutcome(
            total_files=accumulator.total_files,
            total_failures=accumulator.total_failures,
            routing=rendered.routing,
            body=rendered.body,
            output_path=rendered.output_path,
        )
        self.delivery.deliver(rendered, accumulator)
        return self.last_outcome

    # Error log

    def log_error(self, line: str) -> None:
        accumulator = self._require_run()
        accumulator.add_error(self.style.paint(line, "red"))
        self._emit(line)

    def _emit(self, line: str) -> None:
        if self.options.log_error is not None:
            self.options.log_error(line)

    def _require_run(self) -> RunAccumulator:
        if self._accumulator is None:
            raise RuntimeError("process_file() called outside of a run; use run_once() or run_scope()")
        return self._accumulator
