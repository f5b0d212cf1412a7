"""
Unified configuration state for wallet-history.

This module provides a single source of truth for chart configuration,
combining YAML files with environment overrides, type validation,
and sensible defaults.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wallet_history.charting.styles import ChartStyle, Rgba
from wallet_history.infrastructure.observability import get_infrastructure_logger
from wallet_history.shared.exceptions import ConfigurationError
from wallet_history.shared.models.enums import ChartView, Granularity, ValueFormat

logger = get_infrastructure_logger("config-loader")


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class ChartStyleConfig(BaseModel):
    """Colours, spacing and text used by the chart renderer."""

    model_config = ConfigDict(extra="allow")

    padding: float = Field(default=40.0, ge=0)
    background: str = Field(default="#00000000")
    grid_color: str = Field(default="#3B82F61A")
    line_color: str = Field(default="#3B82F6FF")
    fill_top_color: str = Field(default="#3B82F64D")
    fill_bottom_color: str = Field(default="#3B82F600")
    marker_color: str = Field(default="#3B82F6FF")
    text_color: str = Field(default="#9CA3AFFF")
    line_width: float = Field(default=2.0, gt=0)
    grid_line_width: float = Field(default=1.0, gt=0)
    marker_radius: float = Field(default=3.0, ge=0)
    font_size: int = Field(default=11, ge=1, le=96)
    placeholder_text: str = Field(default="No balance history yet")

    @field_validator(
        "background",
        "grid_color",
        "line_color",
        "fill_top_color",
        "fill_bottom_color",
        "marker_color",
        "text_color",
    )
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Colours must be #RRGGBB or #RRGGBBAA."""
        Rgba.from_hex(v)
        return v

    def to_style(self) -> ChartStyle:
        """Resolve hex strings into the renderer's ChartStyle."""
        return ChartStyle(
            padding=self.padding,
            background=Rgba.from_hex(self.background),
            grid_color=Rgba.from_hex(self.grid_color),
            line_color=Rgba.from_hex(self.line_color),
            fill_top_color=Rgba.from_hex(self.fill_top_color),
            fill_bottom_color=Rgba.from_hex(self.fill_bottom_color),
            marker_color=Rgba.from_hex(self.marker_color),
            text_color=Rgba.from_hex(self.text_color),
            line_width=self.line_width,
            grid_line_width=self.grid_line_width,
            marker_radius=self.marker_radius,
            font_size=self.font_size,
            placeholder_text=self.placeholder_text,
        )


class HoverConfig(BaseModel):
    """Pointer lookup settings."""

    model_config = ConfigDict(extra="allow")

    threshold: float = Field(default=15.0, gt=0)


class FormattingConfig(BaseModel):
    """Number formatting for axis labels and tooltips."""

    model_config = ConfigDict(extra="allow")

    currency_symbol: str = Field(default="CW")
    decimals: int = Field(default=2, ge=0, le=8)


class ViewConfig(BaseModel):
    """Fixed time-grid shape and axis style for a chart view."""

    model_config = ConfigDict(extra="allow")

    bucket_count: int = Field(..., ge=1, le=366)
    granularity: Granularity
    grid_lines: int = Field(default=5, ge=1, le=12)
    value_format: ValueFormat = Field(default=ValueFormat.PLAIN)


def _default_views() -> dict[ChartView, ViewConfig]:
    return {
        ChartView.DASHBOARD: ViewConfig(
            bucket_count=24,
            granularity=Granularity.HOUR,
            grid_lines=5,
            value_format=ValueFormat.PLAIN,
        ),
        ChartView.REPORTS_30D: ViewConfig(
            bucket_count=30,
            granularity=Granularity.DAY,
            grid_lines=4,
            value_format=ValueFormat.CURRENCY,
        ),
        ChartView.REPORTS_90D: ViewConfig(
            bucket_count=90,
            granularity=Granularity.DAY,
            grid_lines=4,
            value_format=ValueFormat.CURRENCY,
        ),
        ChartView.REPORTS_365D: ViewConfig(
            bucket_count=365,
            granularity=Granularity.DAY,
            grid_lines=4,
            value_format=ValueFormat.CURRENCY,
        ),
    }


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)


class ConfigState(BaseModel):
    """
    Root configuration state - single source of truth for all chart config.
    """

    model_config = ConfigDict(extra="allow")

    chart: ChartStyleConfig = Field(default_factory=ChartStyleConfig)
    hover: HoverConfig = Field(default_factory=HoverConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    views: dict[ChartView, ViewConfig] = Field(default_factory=_default_views)

    # Environment metadata
    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")

    @field_validator("views", mode="before")
    @classmethod
    def merge_default_views(cls, v: Any) -> Any:
        """YAML may override some views; the rest keep their defaults."""
        if not isinstance(v, dict):
            return v
        merged: dict[Any, Any] = {
            key.value: view.model_dump() for key, view in _default_views().items()
        }
        for key, override in v.items():
            name = key.value if isinstance(key, ChartView) else str(key)
            if isinstance(override, ViewConfig):
                override = override.model_dump()
            if name in merged and isinstance(override, dict):
                merged[name] = {**merged[name], **override}
            else:
                merged[name] = override
        return merged

    def view(self, view: ChartView | str) -> ViewConfig:
        """
        Get the grid/axis configuration for a view.

        Raises:
            ValueError: If the view is unknown
        """
        try:
            return self.views[ChartView(view)]
        except (KeyError, ValueError) as e:
            raise ValueError(f"No chart view configured for {view!r}") from e


# =============================================================================
# CONFIG LOADER - Clean, Validated Loading
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration from YAML files.

    Merges:
      1. Global defaults (hardcoded)
      2. chart.yaml from config_dir
      3. env/<env>.yaml from config_dir
      4. Environment variable overrides
    """

    def __init__(self, config_dir: str = "./config", env: str | None = None):
        self.config_dir = Path(config_dir)
        self._yaml_cache: dict[Path, Any] = {}
        self.env = env or os.getenv("WALLET_HISTORY_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file with caching."""
        if path in self._yaml_cache:
            return self._yaml_cache[path]

        if not path.exists():
            logger.debug("config_file_missing", path=str(path))
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}", source=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Expected a mapping at the top of {path}", source=str(path)
            )

        self._yaml_cache[path] = data
        logger.debug("config_file_loaded", path=str(path))
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        if currency := os.getenv("WALLET_HISTORY_CURRENCY"):
            config.setdefault("formatting", {})["currency_symbol"] = currency

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Returns:
            ConfigState: Validated configuration object

        Raises:
            ConfigurationError: If configuration is invalid
        """
        logger.info("config_loading", config_dir=str(self.config_dir), env=self.env)

        config: dict[str, Any] = {}

        config = self._merge_dicts(config, self._load_yaml(self.config_dir / "chart.yaml"))

        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)

        config = self._apply_env_overrides(config)
        # Environment metadata comes from the loader, not from the files
        config.pop("env", None)
        config.pop("config_dir", None)

        try:
            state = ConfigState(env=self.env, config_dir=str(self.config_dir), **config)
        except ValidationError as e:
            logger.error("config_validation_failed", errors=e.error_count())
            raise ConfigurationError(
                f"Configuration validation failed: {e}", source=str(self.config_dir)
            ) from e

        logger.info(
            "config_loaded",
            env=state.env,
            views=len(state.views),
            currency=state.formatting.currency_symbol,
        )
        return state


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================


def get_config(config_dir: str | None = None) -> ConfigState:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to
            $WALLET_HISTORY_CONFIG_DIR, then ./config

    Returns:
        ConfigState: Validated configuration object
    """
    if config_dir is None:
        config_dir = os.getenv("WALLET_HISTORY_CONFIG_DIR", "./config")
        if not Path(config_dir).exists():
            logger.warning("config_dir_missing", config_dir=config_dir)

    return ConfigLoader(config_dir=config_dir).load()
