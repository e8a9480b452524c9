"""Configuration for the demonstration driver.

Defaults reproduce the classic list and tree walkthroughs; a TOML file
with a [demo] table can override any of them.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError
from .position import Position


def resolve_log_level(name: str) -> int:
    """Maps a level name such as "debug" to its logging constant."""
    levels = logging.getLevelNamesMapping()
    if not isinstance(name, str) or name.upper() not in levels:
        raise ConfigError(f"Unknown log level: {name!r}")
    return levels[name.upper()]


@dataclass
class DemoConfig:
    """Parameters for the list and tree demonstrations.

    Attributes:
        list_values: Values inserted into the demo list, in order
        list_indices: Index each of list_values is inserted at
        tree_paths: Positions as 'L'/'R' strings, "" is the root
        tree_inserts: (index into tree_paths, value) pairs passed to add_at_position
        log_level: Logging level name for the driver
    """

    list_values: list[int] = field(default_factory=lambda: [20, 21, 22, 23, 24])
    list_indices: list[int] = field(default_factory=lambda: [0, 1, 0, 2, 0])
    tree_paths: list[str] = field(default_factory=lambda: ["RL", "L", "", "R"])
    tree_inserts: list[tuple[int, int]] = field(
        default_factory=lambda: [(0, 1), (1, 2), (0, 3), (0, 4), (0, 5)]
    )
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if len(self.list_values) != len(self.list_indices):
            raise ConfigError(
                "list_values and list_indices must have the same length, "
                f"found {len(self.list_values)} and {len(self.list_indices)}"
            )
        for name in ("list_values", "list_indices"):
            for v in getattr(self, name):
                # bool is an int subclass, reject it explicitly
                if not isinstance(v, int) or isinstance(v, bool):
                    raise ConfigError(f"{name} must contain only ints, found: {v!r}")
        # the k-th insert sees a list of k elements
        for k, index in enumerate(self.list_indices):
            if not 0 <= index <= k:
                raise ConfigError(
                    f"list_indices[{k}] must be between 0 and {k}, found: {index}"
                )
        try:
            self.tree_inserts = [(int(i), v) for i, v in self.tree_inserts]
        except (TypeError, ValueError) as e:
            raise ConfigError(f"tree_inserts must be (index, value) pairs: {e}") from e
        for path_index, _ in self.tree_inserts:
            if not 0 <= path_index < len(self.tree_paths):
                raise ConfigError(f"tree_inserts refers to unknown path {path_index}")
        try:
            self.positions()
        except ValueError as e:
            raise ConfigError(str(e)) from e
        resolve_log_level(self.log_level)
        self.log_level = self.log_level.upper()

    def positions(self) -> list[Position]:
        return [Position.parse(p) for p in self.tree_paths]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DemoConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        try:
            return cls(**data)
        except (TypeError, AttributeError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e


def load_config(path: Path) -> DemoConfig:
    """Reads a DemoConfig from the [demo] table of a TOML file."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    demo = data.get("demo", {})
    if not isinstance(demo, dict):
        raise ConfigError(f"[demo] in {path} must be a table")
    return DemoConfig.from_dict(demo)
