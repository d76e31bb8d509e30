import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from cerberus import Validator
from pydantic import ValidationError

from salon_forecast.config.models import ForecastSettings
from salon_forecast.models import Rank, Role
from salon_forecast.seasons import SeasonCategory

# Environment variable naming a settings file to use when none is passed
SETTINGS_ENV_VAR = "SALON_FORECAST_CONFIG"

SETTINGS_SCHEMA: Dict[str, Any] = {
    "activity_policy": {
        "type": "string",
        "required": False,
        "allowed": ["binary_leave", "leave_ratio", "working_days"],
    },
    "standard_working_days": {"type": "number", "required": False, "min": 1},
    "promo_period": {"type": "boolean", "required": False},
    "deduction_overflow": {
        "type": "string",
        "required": False,
        "allowed": ["allow", "clamp", "reject"],
    },
    "standards": {
        "type": "list",
        "required": False,
        "schema": {
            "type": "dict",
            "schema": {
                "role": {"type": "string", "required": True, "allowed": [r.value for r in Role]},
                "rank": {"type": "string", "required": True, "allowed": [r.value for r in Rank]},
                "season": {
                    "type": "string",
                    "required": True,
                    "allowed": [s.value for s in SeasonCategory],
                },
                "treatment": {"type": "integer", "required": True, "min": 0},
                "retail": {"type": "integer", "required": True, "min": 0},
            },
        },
    },
}

# Configure logger for this module
logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration. An empty file gives
        an empty dictionary.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def parse_settings(config_data: Dict[str, Any]) -> ForecastSettings:
    """
    Validates raw settings: structure first (cerberus), then semantics (pydantic).

    Raises:
        ConfigLoadError: On any validation failure.
    """
    v = Validator(SETTINGS_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    try:
        settings = ForecastSettings(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid forecast settings: {e}") from e

    logger.debug(f"Forecast settings loaded: {settings}")
    return settings


def load_settings(config_path: Optional[Union[str, Path]] = None) -> ForecastSettings:
    """
    Load forecast settings from ``config_path``, falling back to the file named
    by SALON_FORECAST_CONFIG, and to the defaults when neither is given.
    """
    if config_path is None:
        config_path = os.environ.get(SETTINGS_ENV_VAR) or None
        if config_path is None:
            logger.info("No settings file given; using default forecast settings.")
            return ForecastSettings()
        logger.info(f"Using settings file from {SETTINGS_ENV_VAR}: {config_path}")

    return parse_settings(load_yaml_config(config_path))


# Expose for import
__all__ = [
    "load_yaml_config",
    "parse_settings",
    "load_settings",
    "ConfigLoadError",
    "SETTINGS_ENV_VAR",
    "SETTINGS_SCHEMA",
]
