"""Run configuration loaded from YAML.

Example::

    logging:
      level: DEBUG
      file: steiner.log
    solver:
      reset_marks: true
      write_marks: true
    output:
      format: yaml
      path: results/tree.yaml
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from .core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "yaml")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.level}")


@dataclass
class SolverConfig:
    """Solver behaviour.

    reset_marks: clear existing edge marks before marking the new tree
    write_marks: mark the tree's edges on the graph at all
    """
    reset_marks: bool = True
    write_marks: bool = True

    def __post_init__(self):
        for name in ("reset_marks", "write_marks"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(
                    f"solver.{name} must be true or false, got {getattr(self, name)!r}"
                )


@dataclass
class OutputConfig:
    format: str = "text"
    path: Optional[str] = None
    show_paths: bool = False

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format: {self.format}")


@dataclass
class SteinerConfig:
    """Top-level configuration for a CLI run."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _build_section(cls, name: str, raw: Any):
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(f"Unknown keys in '{name}': {sorted(unknown)}")
    return cls(**raw)


def config_from_dict(data: Optional[Dict[str, Any]]) -> SteinerConfig:
    """Build a SteinerConfig from a parsed mapping."""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Config must be a mapping")
    sections = {"logging": LoggingConfig, "solver": SolverConfig, "output": OutputConfig}
    unknown = set(data) - set(sections)
    if unknown:
        raise ConfigurationError(f"Unknown config sections: {sorted(unknown)}")
    return SteinerConfig(**{
        name: _build_section(cls, name, data.get(name))
        for name, cls in sections.items()
    })


def load_config(path: Optional[str] = None) -> SteinerConfig:
    """Load configuration from a YAML file (defaults when ``path`` is None)."""
    if path is None:
        return SteinerConfig()
    with open(path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    return config_from_dict(config)
