"""
Pipeline configuration management.

Settings come from, in increasing order of precedence: model defaults,
an optional YAML file, environment variables, explicit overrides (CLI flags).
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.errors import ConfigError
from src.observability.logger import LOG_LEVELS
from src.reference.readers import ROOM_COLUMNS
from src.utils.validation import validate_delimiter, validate_file_path

# Environment variable -> config field
ENV_OVERRIDES = {
    "ENRICH_INPUT_PATH": "input_path",
    "ENRICH_OUTPUT_PATH": "output_path",
    "ENRICH_ROOMS_PATH": "rooms_path",
    "ENRICH_HOTELS_PATH": "hotels_path",
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
}


class PipelineConfig(BaseModel):
    """
    Settings for one enrichment run.

    Attributes:
        input_path: Pipe-delimited file with incomplete bookings
        output_path: File the enriched bookings are written to (created if missing)
        rooms_path: Headerless rooms reference file
        hotels_path: JSON-lines hotels reference file
        input_delimiter: Field delimiter of the input file
        output_delimiter: Field delimiter of the output file
        rooms_delimiter: Field delimiter of the rooms file
        room_columns: Room field held by each column of the rooms file
        log_level: Log level name
        log_format: "json" or "text"
    """

    input_path: str = "input.csv"
    output_path: str = "output.csv"
    rooms_path: str = "room_names.csv"
    hotels_path: str = "hotels.json"
    input_delimiter: str = "|"
    output_delimiter: str = ";"
    rooms_delimiter: str = "|"
    room_columns: list[str] = Field(default_factory=lambda: list(ROOM_COLUMNS))
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("input_path", "output_path", "rooms_path", "hotels_path")
    @classmethod
    def check_path(cls, v, info):
        return validate_file_path(v, info.field_name)

    @field_validator("input_delimiter", "output_delimiter", "rooms_delimiter")
    @classmethod
    def check_delimiter(cls, v, info):
        return validate_delimiter(v, info.field_name)

    @field_validator("room_columns")
    @classmethod
    def check_room_columns(cls, v):
        """Validate that every room field appears exactly once."""
        if sorted(v) != sorted(ROOM_COLUMNS):
            raise ValueError(f"room_columns must be an ordering of {list(ROOM_COLUMNS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}")
        return v.upper()

    class Config:
        extra = "forbid"


class PipelineConfigLoader:
    """
    Loads pipeline settings from a YAML configuration file.

    Expected YAML format:
    ```yaml
    pipeline:
      input_path: data/input.csv
      output_path: data/output.csv
      rooms_path: data/room_names.csv
      hotels_path: data/hotels.json
      room_columns: [hotel_code, source, room_name, room_code]
      log_format: text
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigError(f"Pipeline configuration file not found: {config_path}")

    def load_settings(self) -> dict[str, Any]:
        """
        Read the ``pipeline`` section of the YAML file.

        Returns:
            Raw settings dictionary

        Raises:
            ConfigError: If the file is unreadable, YAML is invalid or the
                section is missing
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read pipeline configuration {self.config_path}: {e}") from e

        if not config or "pipeline" not in config:
            raise ConfigError("Configuration file must contain 'pipeline' section")

        settings = config["pipeline"]
        if not isinstance(settings, dict):
            raise ConfigError("'pipeline' section must be a mapping")

        return settings


def load_pipeline_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> PipelineConfig:
    """
    Build the pipeline configuration.

    Args:
        config_path: Optional YAML configuration file
        overrides: Explicit settings, None values are ignored

    Returns:
        Validated PipelineConfig

    Raises:
        ConfigError: If any source holds invalid settings
    """
    settings: dict[str, Any] = {}
    if config_path is not None:
        settings.update(PipelineConfigLoader(config_path).load_settings())

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            settings[field_name] = value

    if overrides:
        settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return PipelineConfig(**settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid pipeline configuration: {e}") from e
