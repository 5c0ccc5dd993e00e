import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dmmf_graph.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class GeneratorConfig(BaseModel):
    """Options that shape the import statements and flags computed for the graph."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prisma_client_path: str = Field(
        "@prisma/client",
        description="Module the generated code imports the database client from.",
    )
    input_type_path: str = Field(
        "inputTypeSchemas",
        description="Directory (relative to the output root) holding input type schemas.",
    )
    enum_path: str = Field(
        "enums",
        description="Directory (relative to the output root) holding enum schemas.",
    )
    helpers_path: str = Field(
        "helpers",
        description="Module (relative to the output root) exporting JSON value helpers.",
    )
    create_optional_default_values_types: bool = Field(
        False,
        description="Emit extra types where fields with defaults are optional.",
    )

    @field_validator(
        "prisma_client_path", "input_type_path", "enum_path", "helpers_path"
    )
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure path options are non-empty and carry no trailing slash."""
        stripped = v.strip()
        if not stripped.rstrip("/"):
            raise ValueError("Path options must not be empty")
        return stripped.rstrip("/")

    @field_validator("input_type_path", "enum_path", "helpers_path")
    @classmethod
    def validate_relative_path(cls, v: str) -> str:
        """Output directories are joined below the output root, so drop leading slashes."""
        return v.lstrip("/")


def validate_and_parse_config(
    raw_config: Dict[str, Any], config_file: Optional[str] = None
) -> GeneratorConfig:
    """Validate a raw configuration mapping into a GeneratorConfig."""
    try:
        return GeneratorConfig.model_validate(raw_config)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"]) or "<root>"
            error_messages.append(f"{loc}: {error['msg']}")
        raise ConfigurationError(
            "Invalid generator configuration",
            config_file=config_file,
            context={"errors": "; ".join(error_messages)},
        ) from e


def load_config(config_path: Optional[str] = None, **overrides: Any) -> GeneratorConfig:
    """
    Load configuration from a YAML file, merge keyword overrides and validate.

    A missing or empty file yields the defaults. Overrides whose value is None
    are ignored so callers can forward optional CLI values directly.
    """
    raw_config: Dict[str, Any] = {}

    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Error parsing YAML file {config_path}: {e}", config_file=config_path
                ) from e
            if yaml_config and not isinstance(yaml_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a mapping", config_file=config_path
                )
            raw_config.update(yaml_config or {})
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            logger.warning(f"Config file not found at {config_path}. Using defaults.")

    overridden_keys = set()
    for key, value in overrides.items():
        if value is not None:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys: {sorted(overridden_keys)}")

    return validate_and_parse_config(raw_config, config_file=config_path)
