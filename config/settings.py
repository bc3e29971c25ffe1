"""
Configuration management for QueryMapper.

Provides dataclasses for configuration and utilities
for loading settings from YAML files.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml

from querymapper.core.exceptions import ConfigurationError
from querymapper.query.parser import PREDEFINED_PARAMETERS


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerSettings:
    """Inspection server configuration."""
    host: str = "0.0.0.0"
    port: int = 8000
    api_prefix: str = "/api/v1"


@dataclass
class Settings:
    """
    Main settings container for QueryMapper.

    Attributes:
        predefined_parameters: Reserved control keys (never WHERE filters)
        strict: Fail the whole parse on a malformed segment instead of skipping it
        log_level: Logging level
        server: Inspection server settings
    """
    predefined_parameters: List[str] = field(
        default_factory=lambda: list(PREDEFINED_PARAMETERS)
    )
    strict: bool = False
    log_level: str = "INFO"

    server: ServerSettings = field(default_factory=ServerSettings)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        data = dict(data)
        server_data = data.pop("server", None) or {}

        try:
            settings = cls(server=ServerSettings(**server_data), **data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        settings.validate()
        return settings

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        from dataclasses import asdict
        return asdict(self)

    def validate(self) -> None:
        """
        Check the settings.

        Raises:
            ConfigurationError: If a value is invalid
        """
        if isinstance(self.predefined_parameters, str):
            raise ConfigurationError("predefined_parameters must be a list of keys")
        for key in self.predefined_parameters:
            if not isinstance(key, str) or not key:
                raise ConfigurationError(
                    f"Invalid predefined parameter: {key!r}"
                )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")


def get_default_config_path() -> Path:
    """
    Get path to default configuration file.

    QUERYMAPPER_CONFIG wins over ./config/default_config.yaml, which wins
    over the file shipped with this package.
    """
    env_config = os.environ.get("QUERYMAPPER_CONFIG")
    if env_config:
        return Path(env_config)

    local_config = Path("./config/default_config.yaml")
    if local_config.exists():
        return local_config

    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        return Settings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    return Settings.from_dict(data)
