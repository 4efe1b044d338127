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

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from lintgate.core.config import DEFAULT_CONFIG_FILE, DEFAULT_FORMATTER, AnalysisConfiguration, LintOptions
from lintgate.core.errors import ConfigurationError
from lintgate.reporting.console import Console, PlainStyle, StdoutConsole, Style

RULES_FORMAT_HINT = (
    "The format of the config file is { rules: { /* rules list */ } }, where /* rules list */ "
    "is a key: value comma-separated list of rulename: rule-options pairs."
)


class DefaultConfigurationLoader:
    """
    Builds an AnalysisConfiguration from caller options and a rules file
    (lintgate.json / *.yaml / *.yml).

    Every problem with the rules file is a ConfigurationError; an empty rule
    set is only reported as a warning.
    """

    def __init__(self, *, console: Console | None = None, style: Style | None = None) -> None:
        self.console = console or StdoutConsole()
        self.style = style or PlainStyle()

    def resolve_path(self, configuration: str | Path | None, cwd: Path | None = None) -> Path:
        root = Path(cwd) if cwd is not None else Path.cwd()
        if configuration:
            return (root / Path(configuration)).resolve()

        self.console.print(
            self.style.paint(f"Using {DEFAULT_CONFIG_FILE} as the default file for linting rules", "blue")
        )
        return (root / DEFAULT_CONFIG_FILE).resolve()

    def load(self, options: LintOptions, cwd: Path | None = None) -> AnalysisConfiguration:
        path = self.resolve_path(options.configuration, cwd)
        document = self.read_document(path)
        rules = self.validate_rules(document, path)

        if not rules:
            self.console.print(self.style.paint("No rules defined for linting", "yellow"))

        output_file: Path | None = None
        if options.output_file:
            output_file = Path(options.output_file)
            if cwd is not None and not output_file.is_absolute():
                output_file = Path(cwd) / output_file

        return AnalysisConfiguration(
            source_path=path,
            rules=rules,
            document=document,
            output_file=output_file,
            fail_build=bool(options.fail_build),
            disable_test_generator=bool(options.disable_test_generator),
            test_generator=options.test_generator,
            formatter=options.formatter or DEFAULT_FORMATTER,
            annotation=options.annotation,
            extensions=tuple(ext.lstrip(".") for ext in options.extensions),
            target_extension=options.target_extension,
        )

    def read_document(self, path: Path) -> Mapping[str, Any]:
        if not path.exists():
            raise ConfigurationError(
                code="config_not_found",
                message=f"Cannot find lint configuration file: {path}",
                details={"path": str(path)},
            )

        if not path.is_file():
            raise ConfigurationError(
                code="config_not_file",
                message=f"Lint configuration path is not a file: {path}",
                details={"path": str(path)},
            )

        try:
            data = self._parse(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                code="config_parse_error",
                message=f"Cannot parse configuration file: {path}",
                details={"path": str(path), "error": str(e)},
            ) from e

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                code="config_not_mapping",
                message=f"Configuration root must be a mapping/object: {path}",
                details={"path": str(path)},
            )
        return data

    def validate_rules(self, document: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
        rules = document.get("rules")
        if rules is None:
            raise ConfigurationError(code="rules_missing", message=RULES_FORMAT_HINT, details={"path": str(path)})

        if not isinstance(rules, Mapping):
            raise ConfigurationError(
                code="rules_not_mapping",
                message=f"'rules' must be a mapping/object. {RULES_FORMAT_HINT}",
                details={"path": str(path)},
            )
        return rules

    def _parse(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        if suffix == ".json":
            return json.loads(raw)

        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(raw)

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw)
        except ValueError:
            return yaml.safe_load(raw)
