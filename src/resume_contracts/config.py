"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import get_args

import yaml

from resume_contracts.models.layout import ColumnDistribution

CONFIG_ENV_VAR = "RESUME_CONTRACTS_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ValidationConfig:
    strict_layout: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict_layout, bool):
            raise ValueError(f"strict_layout must be true or false, got {self.strict_layout!r}")


@dataclass(frozen=True)
class ResolverConfig:
    default_distribution: str = "70-30"
    validate_output: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.validate_output, bool):
            raise ValueError(f"validate_output must be true or false, got {self.validate_output!r}")
        allowed = get_args(ColumnDistribution)
        if self.default_distribution not in allowed:
            raise ValueError(
                f"default_distribution must be one of {allowed}, got {self.default_distribution!r}"
            )


@dataclass(frozen=True)
class OutputConfig:
    indent: int = 2

    def __post_init__(self) -> None:
        if not 0 <= self.indent <= 8:
            raise ValueError(f"indent must be between 0 and 8, got {self.indent}")


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {self.level!r}")


@dataclass(frozen=True)
class AppConfig:
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        candidates.append(Path.cwd() / "config.yaml")
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        validation=ValidationConfig(**(raw.get("validation") or {})),
        resolver=ResolverConfig(**(raw.get("resolver") or {})),
        output=OutputConfig(**(raw.get("output") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
