"""Configuration management for railgraph using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".railgraph.json"


class OutputFormat(str, Enum):
    """Output format types."""
    DOT = "dot"
    XMI = "xmi"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class DiagramConfig(BaseModel):
    """Diagram configuration section."""
    hops: int = 0
    size: tuple[int, int] | None = None
    show_label: bool = Field(alias="showLabel", default=False)
    schema_version: str = Field(alias="schemaVersion", default="")

    @field_validator("hops")
    @classmethod
    def validate_hops(cls, v):
        if v < 0:
            raise ValueError("hops must be >= 0")
        return v

    @field_validator("size")
    @classmethod
    def validate_size(cls, v):
        if v is not None and (v[0] <= 0 or v[1] <= 0):
            raise ValueError(f"size must be positive, got: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class ModelsConfig(BaseModel):
    """Models diagram configuration section."""
    brief: bool = False
    hide_magic: bool = Field(alias="hideMagic", default=False)
    hide_types: bool = Field(alias="hideTypes", default=False)
    inheritance: bool = False
    transitive: bool = False
    only_simple_edge: bool = Field(alias="onlySimpleEdge", default=False)
    all_classes: bool = Field(alias="allClasses", default=False)
    modules: bool = False
    fontsize: int | None = None

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.DOT

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class RailgraphConfig(BaseModel):
    """Complete railgraph configuration model."""
    diagram: DiagramConfig = Field(default_factory=DiagramConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> RailgraphConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .railgraph.json

    Returns:
        RailgraphConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return RailgraphConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .railgraph.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> RailgraphConfig:
    """Create default configuration."""
    return RailgraphConfig()
