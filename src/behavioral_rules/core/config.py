"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

from .enums import DimensionSet, LookbackWindow
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ThresholdConfig(BaseModel):
    min_sample_size: int = Field(default=5, ge=1)  # Trades per group and overall
    win_rate_diff: float = Field(default=15.0, ge=0.0)  # Percentage points vs baseline
    min_expectancy: float = 0.3  # R per trade for do-more
    strict_multiplier: float = Field(default=1.5, ge=1.0)  # Required-condition scaling
    no_trade_max_win_rate: float = Field(default=35.0, ge=0.0, le=100.0)
    no_trade_max_expectancy: float = -0.5

    @property
    def strict_win_rate_diff(self) -> float:
        return self.win_rate_diff * self.strict_multiplier

    @property
    def strict_expectancy(self) -> float:
        return self.min_expectancy * self.strict_multiplier

    @property
    def strict_sample_size(self) -> int:
        return self.min_sample_size * 2


class RuleCapConfig(BaseModel):
    do_more: int = Field(default=5, ge=0)
    stop_doing: int = Field(default=5, ge=0)
    required_conditions: int = Field(default=3, ge=0)
    no_trade: int = Field(default=3, ge=0)


class MiningConfig(BaseModel):
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    caps: RuleCapConfig = Field(default_factory=RuleCapConfig)
    dimension_set: DimensionSet = DimensionSet.STANDARD
    lookback: LookbackWindow = LookbackWindow.ALL

    @model_validator(mode="after")
    def _check_no_trade_below_do_more(self) -> MiningConfig:
        t = self.thresholds
        if t.no_trade_max_expectancy >= t.min_expectancy:
            raise ValueError(
                "no_trade_max_expectancy must be below min_expectancy"
            )
        return self


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, with environment variables filling in
    anything the file does not set.
    """

    mining: MiningConfig = Field(default_factory=MiningConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "RULES_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: The file is missing, is not valid TOML, or holds
            values that fail validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        import tomli

        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
