from pathlib import Path

import pytest

from lintgate.core.accumulator import RunAccumulator
from lintgate.core.config import AnalysisConfiguration
from lintgate.core.errors import BuildFailure
from lintgate.linting.types import ResultRecord
from lintgate.reporting.console import BufferedConsole
from lintgate.reporting.renderer import ReportDelivery, ReportRenderer, success_line, summary_line
from lintgate.reporting.types import Routing

# ----------------------------
# Helpers
# ----------------------------


class TagStyle:
    """Marks colored messages so tests can see which color was requested."""

    def paint(self, message, color):
        return f"<{color}>{message}</{color}>"


def make_config(**overrides) -> AnalysisConfiguration:
    return AnalysisConfiguration(source_path=Path("lintgate.json"), rules={"no-any": True}, **overrides)


def make_accumulator(*records: ResultRecord) -> RunAccumulator:
    acc = RunAccumulator()
    for r in records:
        acc.record(r)
        if not r.passed:
            acc.error_blocks.extend(r.rendered_output.split("\n"))
    return acc


CLEAN = ResultRecord(relative_path="b.ts", failure_count=0)
DIRTY = ResultRecord(relative_path="a.ts", failure_count=3, rendered_output="e1\ne2\ne3")


class TestAccumulator:
    def test_counts_files_and_failures(self):
        acc = make_accumulator(DIRTY, CLEAN, ResultRecord(relative_path="c.ts", failure_count=2, rendered_output="x"))

        assert acc.total_files == 3
        assert acc.total_failures == 5
        assert acc.has_failures

    def test_empty(self):
        acc = RunAccumulator()

        assert (acc.total_files, acc.total_failures, acc.error_blocks) == (0, 0, [])
        assert not acc.has_failures


class TestRender:
    def test_success_body(self):
        rendered = ReportRenderer().render(make_accumulator(CLEAN, CLEAN), make_config())

        assert rendered.body == "Finished linting 2 successfully"
        assert rendered.summary is None
        assert rendered.routing is Routing.CONSOLE
        assert rendered.should_fail is False

    def test_success_with_zero_files(self):
        rendered = ReportRenderer().render(RunAccumulator(), make_config(fail_build=True))

        assert rendered.body == success_line(0)
        assert rendered.should_fail is False

    def test_failure_body(self):
        rendered = ReportRenderer(engine_name="tslint").render(make_accumulator(DIRTY, CLEAN), make_config())

        assert rendered.summary == "======= Found 3 tslint errors in 2 files ======="
        assert rendered.body == rendered.summary + "\n\ne1\ne2\ne3"

    def test_failure_fails_build_only_when_configured(self):
        acc = make_accumulator(DIRTY)

        assert ReportRenderer().render(acc, make_config(fail_build=True)).should_fail is True
        assert ReportRenderer().render(acc, make_config(fail_build=False)).should_fail is False

    @pytest.mark.parametrize("fail_build", [True, False])
    def test_file_routing_never_fails(self, tmp_path, fail_build):
        cfg = make_config(output_file=tmp_path / "out.log", fail_build=fail_build)

        rendered = ReportRenderer().render(make_accumulator(DIRTY), cfg)

        assert rendered.routing is Routing.FILE
        assert rendered.output_path == tmp_path / "out.log"
        assert rendered.should_fail is False

    def test_style_is_applied(self):
        style = TagStyle()

        failing = ReportRenderer(style=style).render(make_accumulator(DIRTY), make_config())
        passing = ReportRenderer(style=style).render(make_accumulator(CLEAN), make_config())

        assert failing.body.startswith("<yellow>======= Found 3 lint errors in 1 files =======</yellow>\n\n")
        assert failing.summary == summary_line(3, 1)
        assert passing.body == "<green>Finished linting 1 successfully</green>"

    def test_render_does_not_mutate_accumulator(self):
        acc = make_accumulator(DIRTY)
        before = (acc.total_files, acc.total_failures, list(acc.error_blocks))

        ReportRenderer().render(acc, make_config())

        assert (acc.total_files, acc.total_failures, acc.error_blocks) == before


class TestDelivery:
    def test_console_routing_prints_body(self):
        console = BufferedConsole()
        acc = make_accumulator(CLEAN)
        rendered = ReportRenderer().render(acc, make_config())

        ReportDelivery(console).deliver(rendered, acc)

        assert console.lines == ["Finished linting 1 successfully"]

    def test_console_routing_raises_after_printing(self):
        console = BufferedConsole()
        acc = make_accumulator(DIRTY, CLEAN)
        rendered = ReportRenderer().render(acc, make_config(fail_build=True))

        with pytest.raises(BuildFailure) as exc:
            ReportDelivery(console).deliver(rendered, acc)

        assert console.lines == [rendered.body]
        assert (exc.value.total_failures, exc.value.total_files) == (3, 2)
        assert "3 errors in 2 files" in str(exc.value)

    def test_file_routing_writes_and_overwrites(self, tmp_path):
        out = tmp_path / "reports" / "lint.log"
        out.parent.mkdir()
        out.write_text("stale content from a previous run", encoding="utf-8")
        console = BufferedConsole()
        acc = make_accumulator(DIRTY)
        rendered = ReportRenderer().render(acc, make_config(output_file=out, fail_build=True))

        ReportDelivery(console).deliver(rendered, acc)

        assert out.read_text(encoding="utf-8") == rendered.body
        assert console.lines == [f"Lint output written to file: {out}"]

    def test_file_routing_creates_parent_directories(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "lint.log"
        acc = make_accumulator(CLEAN)
        rendered = ReportRenderer().render(acc, make_config(output_file=out))

        ReportDelivery(BufferedConsole()).deliver(rendered, acc)

        assert out.read_text(encoding="utf-8") == "Finished linting 1 successfully"
