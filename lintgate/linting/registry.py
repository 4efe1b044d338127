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

from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Final

from lintgate.linting.interfaces import LintEngine

ENTRYPOINT_GROUP: Final[str] = "lintgate.engines"


@dataclass(frozen=True, slots=True)
class LoadedEngine:
    """
    Engine instance together with where it came from.
    """

    engine: LintEngine
    source: str  # e.g. "lintgate_tslint.engine:TSLintEngine"


@dataclass(frozen=True, slots=True)
class PluginLoadError:
    """
    A plugin that failed to load (kept non-fatal).
    """

    source: str
    error: str


class EngineRegistry:
    """
    Discovers and stores lint engines.

    Typical lifecycle:
      reg = EngineRegistry()
      reg.load_entrypoints()
      engine = reg.get("tslint")
    """

    def __init__(self) -> None:
        self._loaded: list[LoadedEngine] = []
        self._load_errors: list[PluginLoadError] = []
        self._entrypoints_loaded: bool = False

    def load_entrypoints(self) -> None:
        """
        Discover engines registered under the 'lintgate.engines' entry point group.

        An entry point may name a class/factory (called with no arguments) or
        an engine instance. Import errors are recorded, never raised. Repeated
        calls are no-ops.
        """
        if self._entrypoints_loaded:
            return

        for ep in entry_points(group=ENTRYPOINT_GROUP):
            source = f"{ep.module}:{ep.attr}"
            try:
                loaded_obj = ep.load()
                engine = loaded_obj() if callable(loaded_obj) else loaded_obj
                _ = engine.name  # may throw if missing
                self._loaded.append(LoadedEngine(engine=engine, source=source))
            except Exception as e:
                self._load_errors.append(PluginLoadError(source=source, error=repr(e)))

        self._entrypoints_loaded = True

    def register(self, engine: LintEngine, *, source: str = "manual") -> None:
        """
        Manual registration (useful for unit tests or embedding).
        """
        self._loaded.append(LoadedEngine(engine=engine, source=source))

    def all(self) -> tuple[LoadedEngine, ...]:
        """
        All loaded engines, sorted by name then source.
        """
        return tuple(sorted(self._loaded, key=lambda e: (e.engine.name, e.source)))

    def names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(e.engine.name for e in self.all()))

    def load_errors(self) -> tuple[PluginLoadError, ...]:
        return tuple(self._load_errors)

    def get(self, name: str | None = None) -> LintEngine | None:
        """
        Look up an engine by name.

        Without a name, returns the only loaded engine, or None when zero or
        several engines are available.
        """
        loaded = self.all()
        if name is None:
            return loaded[0].engine if len(loaded) == 1 else None
        for item in loaded:
            if item.engine.name == name:
                return item.engine
        return None
