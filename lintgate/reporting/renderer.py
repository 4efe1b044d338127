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

from lintgate.core.accumulator import RunAccumulator
from lintgate.core.config import AnalysisConfiguration
from lintgate.core.errors import BuildFailure
from lintgate.reporting.console import Console, PlainStyle, Style
from lintgate.reporting.types import RenderedRun, Routing


def summary_line(total_failures: int, total_files: int, engine_name: str = "lint") -> str:
    return f"======= Found {total_failures} {engine_name} errors in {total_files} files ======="


def success_line(total_files: int) -> str:
    return f"Finished linting {total_files} successfully"


class ReportRenderer:
    """
    End-of-run report. Pure rendering: reads the accumulator, never mutates it.

    With failures the body is the summary line, a blank line, then every error
    block. Without failures it is a single success line.
    """

    def __init__(self, engine_name: str = "lint", style: Style | None = None) -> None:
        self.engine_name = engine_name
        self.style = style or PlainStyle()

    def render(self, accumulator: RunAccumulator, config: AnalysisConfiguration) -> RenderedRun:
        summary: str | None = None
        if accumulator.has_failures:
            summary = summary_line(accumulator.total_failures, accumulator.total_files, self.engine_name)
            body = "\n".join([self.style.paint(summary, "yellow"), "", *accumulator.error_blocks])
        else:
            body = self.style.paint(success_line(accumulator.total_files), "green")

        if config.output_file is not None:
            return RenderedRun(
                routing=Routing.FILE,
                body=body,
                summary=summary,
                output_path=config.output_file,
                should_fail=False,
            )

        return RenderedRun(
            routing=Routing.CONSOLE,
            body=body,
            summary=summary,
            output_path=None,
            should_fail=config.fail_build and accumulator.has_failures,
        )


class ReportDelivery:
    """
    Applies a RenderedRun: writes the report file or prints to the console,
    then raises BuildFailure when the rendered run says so.
    """

    def __init__(self, console: Console, style: Style | None = None) -> None:
        self.console = console
        self.style = style or PlainStyle()

    def deliver(self, rendered: RenderedRun, accumulator: RunAccumulator) -> None:
        if rendered.routing is Routing.FILE and rendered.output_path is not None:
            rendered.output_path.parent.mkdir(parents=True, exist_ok=True)
            rendered.output_path.write_text(rendered.body, encoding="utf-8")
            self.console.print(self.style.paint(f"Lint output written to file: {rendered.output_path}", "blue"))
            return

        self.console.print(rendered.body)
        if rendered.should_fail:
            raise BuildFailure(total_failures=accumulator.total_failures, total_files=accumulator.total_files)
