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

import fnmatch
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from lintgate.linting.interfaces import FileProcessor
from lintgate.linting.types import FileOutcome

DEFAULT_EXCLUDE_GLOBS: tuple[str, ...] = (
    "**/.git/**",
    "**/.venv/**",
    "**/venv/**",
    "**/__pycache__/**",
    "**/node_modules/**",
)


@dataclass
class DirectoryFileSource:
    """
    Plain FileSource over a directory tree.

    Every file whose suffix matches processor.extensions is processed, in
    sorted path order, on every build. There is no caching: each build() is a
    full pass. Non-empty outputs are written under out_dir (when set) as
    <relative path without suffix><target_extension>, so the default
    "_lint_test.py" turns pkg/mod.py into pkg/mod_lint_test.py.
    """

    root: Path
    out_dir: Path | None = None
    exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS
    encoding: str = "utf-8"
    outcomes: dict[str, FileOutcome] = field(default_factory=dict)

    def iter_files(self, extensions: tuple[str, ...]) -> Iterator[Path]:
        suffixes = {f".{ext.lstrip('.')}" for ext in extensions}
        out_dir = self.out_dir.resolve() if self.out_dir is not None else None
        for path in sorted(self.root.rglob("*")):
            if not path.is_file() or path.suffix not in suffixes:
                continue
            if out_dir is not None and path.resolve().is_relative_to(out_dir):
                continue
            rel = path.relative_to(self.root).as_posix()
            if any(fnmatch.fnmatch(f"/{rel}", glob.replace("**/", "*/")) for glob in self.exclude_globs):
                continue
            yield path

    def output_path(self, relative_path: str, target_extension: str) -> Path:
        if self.out_dir is None:
            raise ValueError("DirectoryFileSource has no out_dir")
        rel = Path(relative_path)
        return self.out_dir / rel.parent / f"{rel.stem}{target_extension}"

    def build(self, processor: FileProcessor) -> None:
        self.outcomes = {}
        for path in self.iter_files(processor.extensions):
            relative_path = path.relative_to(self.root).as_posix()
            content = path.read_text(encoding=self.encoding)

            outcome = processor.process_file(content, relative_path)
            self.outcomes[relative_path] = outcome

            if outcome.output and self.out_dir is not None:
                target = self.output_path(relative_path, processor.target_extension)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(outcome.output, encoding=self.encoding)
