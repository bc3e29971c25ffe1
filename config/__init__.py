"""
Configuration module for QueryMapper.

This module provides configuration management including
loading settings from YAML files and environment variables.

Example:
    >>> from config import Settings, load_config
    >>>
    >>> settings = load_config()
    >>> print(settings.predefined_parameters)
    ['sort', 'limit', 'page']
"""

from .settings import (
    Settings,
    ServerSettings,
    load_config,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "ServerSettings",
    "load_config",
    "get_default_config_path",
]
