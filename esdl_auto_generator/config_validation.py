import yaml
import logging
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from esdl_auto_generator.constants import DefaultConfig
from esdl_auto_generator.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


# --- Pydantic Model for Configuration Schema ---


class ToolConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    input_path: str = Field(
        ...,
        min_length=1,
        description="Path to the parsed schema document (JSON or YAML).",
    )
    output_path: str = Field(
        default=DefaultConfig.OUTPUT_PATH,
        min_length=1,
        description="Path of the ESDL file to write.",
    )
    module_name: str = Field(
        default=DefaultConfig.MODULE_NAME,
        min_length=1,
        description="Name of the ESDL module the types are declared in.",
    )

    @field_validator("module_name")
    @classmethod
    def check_module_name(cls, v: str) -> str:
        """ESDL module names are plain identifiers."""
        if not v.isidentifier():
            raise ValueError(f"'{v}' is not a valid module name.")
        return v

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any], config_file: Optional[str] = None) -> ToolConfigSchema:
    """
    Validates a raw configuration dictionary against the ToolConfigSchema.

    Raises:
        ConfigurationError: with one context entry per invalid location
    """
    try:
        validated_config = ToolConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        context: Dict[str, Any] = {}
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            context[loc_str] = error.get("msg", "Unknown validation error")
        raise ConfigurationError(
            "Configuration validation failed! Please check your config file or arguments.",
            config_file=config_file,
            context=context,
        ) from e


def load_config(config_path: Optional[str], cli_args: Namespace) -> ToolConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigurationError("Config file not found", config_file=config_path)
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file: {e}", config_file=config_path) from e

        if yaml_config and isinstance(yaml_config, dict):
            raw_config.update(yaml_config)
            logger.debug(f"Loaded configuration from {config_path}")
        elif yaml_config:
            logger.warning(
                f"Content in config file {config_path} is not a dictionary. Ignoring file content."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    overridden_keys = set()
    for key, value in vars(cli_args).items():
        if value is not None and key in ToolConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {overridden_keys}")

    # 3. Validate
    validated_config = validate_and_parse_config(raw_config, config_file=config_path)
    logger.debug(f"Effective configuration: {validated_config.model_dump()}")
    return validated_config
