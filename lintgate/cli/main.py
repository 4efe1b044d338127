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

import argparse
import sys

from lintgate.cli import run
from lintgate.cli._io import normalize_extensions
from lintgate.cli.exitcodes import EXIT_ENGINE_ERROR, exit_code_from_error
from lintgate.core.errors import BuildFailure


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lintgate", description="Lintgate — lint a source tree and gate the build")

    sub = p.add_subparsers(dest="cmd", required=True)

    # run
    run_p = sub.add_parser("run", help="Lint a source tree and report.")
    run_p.add_argument("path", nargs="?", default=".", help="Source tree root (default: .)")
    run_p.add_argument("--config", default=None, help="Rules file (default: ./lintgate.json).")
    run_p.add_argument("--output-file", dest="output_file", default=None, help="Write the report to this file.")
    run_p.add_argument(
        "--fail-build", dest="fail_build", action="store_true", help="Exit non-zero when lint errors are found."
    )
    run_p.add_argument(
        "--disable-test-generator",
        dest="disable_test_generator",
        action="store_true",
        help="Do not generate test stubs.",
    )
    run_p.add_argument("--stubs-dir", dest="stubs_dir", default=None, help="Directory for generated test stubs.")
    run_p.add_argument("--engine", default=None, help="Lint engine name (see `lintgate engines`).")
    run_p.add_argument("--formatter", default=None, help="Engine output formatter (default: prose).")
    run_p.add_argument("--ext", action="append", default=None, help="File extension to lint (repeatable).")
    run_p.add_argument("--annotation", default=None, help="Free-form label for this run.")

    # engines
    sub.add_parser("engines", help="List installed lint engines.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "run":
            return run.run(
                path=args.path,
                config=args.config,
                output_file=args.output_file,
                fail_build=args.fail_build,
                disable_test_generator=args.disable_test_generator,
                stubs_dir=args.stubs_dir,
                engine=args.engine,
                formatter=args.formatter,
                extensions=normalize_extensions(args.ext),
                annotation=args.annotation,
            )

        if args.cmd == "engines":
            return run.list_engines()

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except BuildFailure as e:
        print(f"lintgate: {e}", file=sys.stderr)
        return exit_code_from_error(e)

    except Exception as e:
        print(f"lintgate: error: {e}", file=sys.stderr)
        return exit_code_from_error(e)


if __name__ == "__main__":
    sys.exit(main())
