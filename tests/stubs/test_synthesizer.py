import re

import pytest

from lintgate.stubs.synthesizer import (
    StubSynthesizer,
    escape_error_string,
    pytest_template,
    qunit_template,
    unescape_error_string,
)

# A quote preceded by an even number (including zero) of backslashes is unescaped.
UNESCAPED_QUOTE = re.compile(r"(?<!\\)(?:\\\\)*'")

SAMPLES = [
    "",
    "plain",
    "line one\nline two",
    "it's 'quoted'",
    "C:\\path\\to\\file.ts[1, 2]: don't\n",
    "trailing backslash \\",
    "literal \\n is not a newline\n'\\'",
    "a.py:1:1: E1 bad\r\nmore",
    "bare \r return",
    'say """hi"""',
]


def run_stub(source: str) -> None:
    """Execute a generated pytest stub and call its single test function."""
    namespace: dict = {}
    exec(compile(source, "<stub>", "exec"), namespace)
    (test_fn,) = [v for k, v in namespace.items() if k.startswith("test_")]
    test_fn()


class TestEscaping:
    @pytest.mark.parametrize("text", SAMPLES)
    def test_escaped_text_has_no_newlines_or_bare_quotes(self, text):
        escaped = escape_error_string(text)

        assert "\n" not in escaped
        assert "\r" not in escaped
        assert UNESCAPED_QUOTE.search(escaped) is None

    @pytest.mark.parametrize("text", SAMPLES)
    def test_unescape_recovers_original(self, text):
        assert unescape_error_string(escape_error_string(text)) == text

    def test_escape_sequences(self):
        assert escape_error_string("a\nb'c") == "a\\nb\\'c"
        assert escape_error_string("a\r\nb") == "a\\r\\nb"


class TestDefaultTemplate:
    def test_clean_file_stub(self):
        stub = StubSynthesizer().synthesize("src/app/a.py", False, "")

        assert stub == (
            '"""Lint - src/app"""\n'
            "\n"
            "\n"
            "def test_src_app_a_py_should_pass_lint():\n"
            "    assert True, 'src/app/a.py should pass lint.'\n"
        )

    def test_top_level_file_uses_dot_module(self):
        stub = StubSynthesizer().synthesize("a.py", False, "")

        assert stub.startswith('"""Lint - ."""\n')

    def test_failing_stub_embeds_escaped_errors(self):
        stub = StubSynthesizer().synthesize("a.py", True, "a.py:1: don't\na.py:2: bad")

        assert r"assert False, 'a.py should pass lint.\na.py:1: don\'t\na.py:2: bad'" in stub

    def test_clean_stub_passes_when_executed(self):
        run_stub(StubSynthesizer().synthesize("pkg/mod.py", False, ""))

    @pytest.mark.parametrize("errors", [s for s in SAMPLES if s])
    def test_failing_stub_fails_with_original_message(self, errors):
        stub = StubSynthesizer().synthesize("pkg/mod.py", True, errors)

        with pytest.raises(AssertionError) as exc:
            run_stub(stub)

        assert str(exc.value) == "pkg/mod.py should pass lint.\n" + errors

    @pytest.mark.parametrize("path", ["it's/a.py", "dir\\win/a.py", 'odd"""dir/a.py', "trail\\/a.py"])
    def test_paths_with_quotes_compile(self, path):
        stub = StubSynthesizer().synthesize(path, True, "a.py:1: bad")

        with pytest.raises(AssertionError) as exc:
            run_stub(stub)

        assert str(exc.value) == f"{path} should pass lint.\na.py:1: bad"

    def test_is_deterministic(self):
        synth = StubSynthesizer()
        args = ("src/a.py", True, "x\n'y'")

        assert synth.synthesize(*args) == synth.synthesize(*args)

    def test_default_is_pytest_template(self):
        assert StubSynthesizer().synthesize("a.py", False, "") == pytest_template("a.py", False, "")


class TestCustomGenerator:
    def test_delegates_with_escaped_errors(self):
        calls = []

        def generator(path, not_passed, errors):
            calls.append((path, not_passed, errors))
            return "custom"

        out = StubSynthesizer(generator=generator).synthesize("a.ts", True, "x\ny")

        assert out == "custom"
        assert calls == [("a.ts", True, "\\nx\\ny")]

    def test_empty_errors_are_passed_as_empty(self):
        calls = []
        StubSynthesizer(generator=lambda *a: calls.append(a) or "").synthesize("a.ts", False, "")

        assert calls == [("a.ts", False, "")]

    def test_qunit_template(self):
        out = StubSynthesizer(generator=qunit_template).synthesize("app/a.ts", True, "boom")

        assert out == (
            "QUnit.module('Lint - app');\n"
            "QUnit.test('app/a.ts should pass lint', function(assert) {\n"
            "  assert.expect(1);\n"
            "  assert.ok(false, 'app/a.ts should pass lint.\\nboom');\n"
            "});\n"
        )

    def test_qunit_template_escapes_path(self):
        out = qunit_template("it's/a.ts", False, "")

        assert "QUnit.module('Lint - it\\'s');" in out
        assert "assert.ok(true, 'it\\'s/a.ts should pass lint.');" in out

    def test_qunit_template_clean(self):
        assert "assert.ok(true, 'a.ts should pass lint.');" in qunit_template("a.ts", False, "")
