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

"""
Test stub generation.

A stub is a tiny test module asserting that one linted file is lint-clean.
The file path and its diagnostics are embedded in string literals of the
generated source, so both are escaped first.
"""

import posixpath
import re
from dataclasses import dataclass

from lintgate.core.config import TestGenerator

_ESCAPES = (("\\", "\\\\"), ("\n", "\\n"), ("\r", "\\r"), ("'", "\\'"), ('"', '\\"'))
_UNESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r", "'": "'", '"': '"'}


def escape_error_string(text: str) -> str:
    """
    Escape text for a quoted literal: backslashes are doubled, newlines and
    carriage returns become backslash-n / backslash-r and both quote
    characters get a leading backslash.
    """
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def unescape_error_string(text: str) -> str:
    """Inverse of escape_error_string."""
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text)


def _module_label(relative_path: str) -> str:
    return escape_error_string(posixpath.dirname(relative_path) or ".")


def _identifier(relative_path: str) -> str:
    return re.sub(r"\W", "_", relative_path).strip("_") or "file"


def pytest_template(relative_path: str, not_passed: bool, errors: str) -> str:
    """Default stub: one pytest module per directory label, one test per file."""
    path = escape_error_string(relative_path)
    return (
        f'"""Lint - {_module_label(relative_path)}"""\n'
        "\n"
        "\n"
        f"def test_{_identifier(relative_path)}_should_pass_lint():\n"
        f"    assert {not not_passed}, '{path} should pass lint.{errors}'\n"
    )


def qunit_template(relative_path: str, not_passed: bool, errors: str) -> str:
    """QUnit stub, for pipelines whose generated tests run in a browser."""
    path = escape_error_string(relative_path)
    return (
        f"QUnit.module('Lint - {_module_label(relative_path)}');\n"
        f"QUnit.test('{path} should pass lint', function(assert) {{\n"
        "  assert.expect(1);\n"
        f"  assert.ok({str(not not_passed).lower()}, '{path} should pass lint.{errors}');\n"
        "});\n"
    )


@dataclass(frozen=True)
class StubSynthesizer:
    """
    Turns one file's lint outcome into injectable test source.

    generator overrides the default pytest template; it receives the already
    escaped error text (prefixed with an escaped newline) or "".
    """

    generator: TestGenerator | None = None

    def synthesize(self, relative_path: str, not_passed: bool, errors_text: str) -> str:
        errors = "\\n" + escape_error_string(errors_text) if errors_text else ""
        template = self.generator or pytest_template
        return template(relative_path, not_passed, errors)
