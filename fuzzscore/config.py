from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping, Type, TypeVar

import tomllib

from .distance import available_backends
from .preprocess import StringOptions


@dataclass(frozen=True)
class EngineConfig:
    """Selects the implementation used for Levenshtein distances."""

    backend: str = "python"

    def __post_init__(self) -> None:
        if self.backend not in available_backends():
            choices = ", ".join(available_backends())
            raise ValueError(
                f"Unknown distance backend {self.backend!r}; expected one of: {choices}"
            )


@dataclass(frozen=True)
class WeightingConfig:
    """Heuristic constants used by the weighted ratio."""

    length_ratio_threshold: float = 0.7
    simple_weight: float = 0.9
    token_sort_weight: float = 0.1
    partial_scale: float = 0.9
    unbase_scale: float = 0.95
    long_length_ratio: float = 0.125
    long_partial_scale: float = 0.6

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Weighting '{name}' must be a number.")
            if not 0.0 <= float(value) <= 1.0:
                raise ValueError(f"Weighting '{name}' must lie in [0, 1], got {value}")
        if self.long_length_ratio > self.length_ratio_threshold:
            raise ValueError(
                "Weighting 'long_length_ratio' must not exceed 'length_ratio_threshold'."
            )


@dataclass(frozen=True)
class OptionsConfig:
    """Default preprocessing flags applied to every comparison."""

    case_sensitive: bool = False
    preserve_whitespace: bool = False

    def to_flags(self) -> StringOptions:
        flags = StringOptions.NONE
        if self.case_sensitive:
            flags |= StringOptions.CASE_SENSITIVE
        if self.preserve_whitespace:
            flags |= StringOptions.PRESERVE_WHITESPACE
        return flags


@dataclass(frozen=True)
class AppConfig:
    """Full application configuration tree."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    weighting: WeightingConfig = field(default_factory=WeightingConfig)
    options: OptionsConfig = field(default_factory=OptionsConfig)


T = TypeVar("T")


def coerce_config(config: Any, cls: Type[T], label: str) -> T:
    """Build a config section from ``None``, an instance, or a TOML table."""

    if config is None:
        return cls()
    if isinstance(config, cls):
        return config
    if isinstance(config, Mapping):
        return cls(**config)
    raise TypeError(
        f"Config section '{label}' must be a table or {cls.__name__}, "
        f"got {type(config).__name__}"
    )


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from a TOML file."""

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as fh:
        raw: Mapping[str, Any] = tomllib.load(fh)

    return AppConfig(
        engine=coerce_config(raw.get("engine"), EngineConfig, "engine"),
        weighting=coerce_config(raw.get("weighting"), WeightingConfig, "weighting"),
        options=coerce_config(raw.get("options"), OptionsConfig, "options"),
    )


__all__ = [
    "AppConfig",
    "EngineConfig",
    "OptionsConfig",
    "WeightingConfig",
    "coerce_config",
    "load_config",
]
