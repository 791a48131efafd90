"""
Load breakpoint tables and value maps from JSON.

Format::

    {
        "kind": "standard",
        "useShortestSide": false,
        "breakpoints": {"extraLarge": 1440, "large": 1024},
        "values": {"small": "mobile", "large": "desktop"}
    }

Every key is optional. Missing thresholds keep their defaults.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from responsive_size.core.breakpoints import BaseBreakpoints, Breakpoints, BreakpointsGranular
from responsive_size.core.errors import BreakpointConfigError
from responsive_size.core.handler import BreakpointsHandler, normalize_values

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RESPONSIVE_SIZE_CONFIG"

TABLE_KINDS: dict[str, type[BaseBreakpoints]] = {
    "standard": Breakpoints,
    "granular": BreakpointsGranular,
}


@dataclass
class ResponsiveConfig:
    """A breakpoint table plus an optional value map."""
    breakpoints: BaseBreakpoints = field(default_factory=lambda: Breakpoints.DEFAULT)
    values: dict[str, Any] = field(default_factory=dict)
    use_shortest_side: bool = False
    source_path: Optional[Path] = None

    @property
    def kind(self) -> str:
        for name, table_cls in TABLE_KINDS.items():
            if isinstance(self.breakpoints, table_cls):
                return name
        return type(self.breakpoints).__name__

    @classmethod
    def from_dict(cls, data: dict[str, Any], source_path: Optional[Path] = None) -> "ResponsiveConfig":
        """Validate and build a config from parsed JSON."""
        where = f" in {source_path}" if source_path else ""
        if not isinstance(data, dict):
            raise BreakpointConfigError(f"Config{where} must be a JSON object")

        kind = data.get("kind", "standard")
        if kind not in TABLE_KINDS:
            raise BreakpointConfigError(
                f"Unknown breakpoint kind {kind!r}{where} (expected: {', '.join(TABLE_KINDS)})"
            )
        table_cls = TABLE_KINDS[kind]

        thresholds = data.get("breakpoints", {})
        values = data.get("values", {})
        if not isinstance(thresholds, dict) or not isinstance(values, dict):
            raise BreakpointConfigError(f"'breakpoints' and 'values'{where} must be JSON objects")

        try:
            breakpoints = table_cls.from_mapping(thresholds)
            # Reject unknown categories now rather than at first use
            normalize_values(breakpoints, values)
        except BreakpointConfigError as e:
            raise BreakpointConfigError(f"{e}{where}") from e

        use_shortest_side = data.get("useShortestSide", False)
        if not isinstance(use_shortest_side, bool):
            raise BreakpointConfigError(
                f"'useShortestSide'{where} must be true or false, got {use_shortest_side!r}"
            )

        return cls(
            breakpoints=breakpoints,
            values=dict(values),
            use_shortest_side=use_shortest_side,
            source_path=source_path,
        )

    def handler(self, on_changed: Optional[Callable[[Any], None]] = None) -> BreakpointsHandler:
        """Build a handler from this config's table and values."""
        return BreakpointsHandler(self.values, breakpoints=self.breakpoints, on_changed=on_changed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "useShortestSide": self.use_shortest_side,
            "breakpoints": self.breakpoints.to_dict(),
            "values": dict(self.values),
        }


def load_config(path: str | Path) -> ResponsiveConfig:
    """Load a config file."""
    path = Path(path).expanduser()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise BreakpointConfigError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise BreakpointConfigError(f"Invalid JSON in {path}: {e}") from e

    config = ResponsiveConfig.from_dict(data, source_path=path)
    logger.debug("Loaded %s breakpoints from %s", config.kind, path)
    return config


def default_config_path() -> Optional[Path]:
    """Config file named by the RESPONSIVE_SIZE_CONFIG environment variable."""
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path).expanduser()
    return None


def resolve_config(path: Optional[Path] = None, granular: bool = False) -> ResponsiveConfig:
    """
    Config for a CLI invocation.

    An explicit path wins, then the environment variable, then the
    default standard (or granular) table with no values. Asking for
    the granular table while the loaded config is standard raises
    BreakpointConfigError.
    """
    path = path or default_config_path()
    if path is not None:
        config = load_config(path)
        if granular and config.kind != "granular":
            raise BreakpointConfigError(
                f"--granular conflicts with {config.kind} breakpoints in {path}"
            )
        return config
    table = BreakpointsGranular.DEFAULT if granular else Breakpoints.DEFAULT
    return ResponsiveConfig(breakpoints=table)
