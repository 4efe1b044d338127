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

import sys
from pathlib import Path

from lintgate.cli._io import ensure_repo_root
from lintgate.cli.exitcodes import EXIT_ENGINE_ERROR, EXIT_OK
from lintgate.core.config import DEFAULT_EXTENSIONS, LintOptions
from lintgate.core.pipeline import LintPipeline
from lintgate.linting.directory import DirectoryFileSource
from lintgate.linting.registry import EngineRegistry


def run(
    *,
    path: str,
    config: str | None,
    output_file: str | None,
    fail_build: bool,
    disable_test_generator: bool,
    stubs_dir: str | None,
    engine: str | None,
    formatter: str | None,
    extensions: tuple[str, ...] | None,
    annotation: str | None = None,
) -> int:
    """
    Lint every matching file under path and report once.

    Stubs are only generated when stubs_dir is given. An annotation is echoed
    before linting starts. Errors (configuration, engine, BuildFailure)
    propagate to the caller, which maps them to exit codes.
    """
    repo_root = Path(ensure_repo_root(path))

    registry = EngineRegistry()
    registry.load_entrypoints()
    lint_engine = registry.get(engine)
    if lint_engine is None:
        available = ", ".join(registry.names()) or "none installed"
        wanted = f"'{engine}'" if engine else "a default engine (pass --engine)"
        print(f"lintgate: error: cannot select {wanted}; available engines: {available}", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    options = LintOptions(
        configuration=config,
        output_file=output_file,
        fail_build=fail_build,
        disable_test_generator=disable_test_generator or stubs_dir is None,
        formatter=formatter,
        annotation=annotation,
        extensions=extensions or DEFAULT_EXTENSIONS,
    )
    pipeline = LintPipeline(lint_engine, options)
    if annotation:
        print(f"Lint run: {annotation} (engine: {lint_engine.name})")

    source = DirectoryFileSource(root=repo_root, out_dir=Path(stubs_dir) if stubs_dir else None)
    pipeline.run_once(source)

    return EXIT_OK


def list_engines() -> int:
    registry = EngineRegistry()
    registry.load_entrypoints()

    loaded = registry.all()
    if not loaded:
        print("No lint engines installed.")
    for item in loaded:
        print(f"{item.engine.name}\t{item.source}")

    for err in registry.load_errors():
        print(f"lintgate: warning: failed to load {err.source}: {err.error}", file=sys.stderr)

    return EXIT_OK
