"""
Forecast settings: YAML loading and validation.
"""

from .loaders import SETTINGS_ENV_VAR, ConfigLoadError, load_settings, load_yaml_config, parse_settings
from .models import ForecastSettings, StandardEntry

__all__ = [
    "ConfigLoadError",
    "ForecastSettings",
    "StandardEntry",
    "SETTINGS_ENV_VAR",
    "load_settings",
    "load_yaml_config",
    "parse_settings",
]
