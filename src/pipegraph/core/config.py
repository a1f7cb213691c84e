# src/pipegraph/core/config.py
"""
Configuration schema and loading for pipegraph.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class LayoutSettings(BaseModel):
    """Geometry constants of the layout engine, in renderer pixels.

    Negative paddings or non-positive sizes would let nested boxes overlap or
    let chains under-report their bounds, so they are rejected here rather
    than guarded inside the engine.

    Example YAML:
        layout:
          vertical_padding: 20
          horizontal_padding: 60
          component_width: 170
    """

    model_config = {"frozen": True}

    vertical_padding: float = Field(
        default=20,
        ge=0,
        description="Gap between vertically stacked components and between sections",
    )
    horizontal_padding: float = Field(
        default=60,
        ge=0,
        description="Gap between horizontally chained components",
    )
    branch_padding: float = Field(
        default=20,
        ge=0,
        description="Gap between parallel branches of a processor",
    )
    child_bump_offset: float = Field(
        default=20,
        ge=0,
        description="Indent of nested processor pipelines, scanners and batch groups",
    )
    component_width: float = Field(default=170, gt=0, description="Width of every node box")
    component_height: float = Field(default=50, gt=0, description="Height of a component or title box")
    component_title_height: float = Field(
        default=20,
        gt=0,
        description="Height of a compact title bar nested inside another component",
    )

    @model_validator(mode="after")
    def validate_title_fits(self) -> "LayoutSettings":
        """A compact title bar must not be taller than a full component."""
        if self.component_title_height > self.component_height:
            raise ValueError(
                f"component_title_height ({self.component_title_height}) must not exceed "
                f"component_height ({self.component_height})"
            )
        return self


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(default=False, description="Emit JSON log lines instead of console output")


class PipegraphSettings(BaseModel):
    """Top-level pipegraph configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    layout: LayoutSettings = Field(
        default_factory=LayoutSettings,
        description="Layout geometry constants",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )


def load_settings(config_path: Path) -> PipegraphSettings:
    """Load settings from YAML file with environment variable overrides.

    Precedence:
    1. Environment variables (PIPEGRAPH_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: PIPEGRAPH_LAYOUT__VERTICAL_PADDING for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated PipegraphSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="PIPEGRAPH",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): _lowercase_keys(v) for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys
    }

    return PipegraphSettings(**raw_config)


def _lowercase_keys(value: object) -> object:
    """Lowercase nested mapping keys (env overrides arrive uppercased)."""
    if isinstance(value, dict):
        return {str(k).lower(): _lowercase_keys(v) for k, v in value.items()}
    return value
