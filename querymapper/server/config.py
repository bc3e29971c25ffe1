"""
Server configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os

from ..query.parser import PREDEFINED_PARAMETERS


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class ServerConfig:
    """Configuration for the QueryMapper inspection server."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    reload: bool = False

    # API settings
    api_prefix: str = "/api/v1"
    docs_enabled: bool = True

    # Parser settings
    predefined_parameters: List[str] = field(
        default_factory=lambda: list(PREDEFINED_PARAMETERS)
    )
    strict: bool = False

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("QUERYMAPPER_HOST", "0.0.0.0"),
            port=int(os.getenv("QUERYMAPPER_PORT", "8000")),
            workers=int(os.getenv("QUERYMAPPER_WORKERS", "1")),
            api_prefix=os.getenv("QUERYMAPPER_API_PREFIX", "/api/v1"),
            docs_enabled=_env_bool("QUERYMAPPER_DOCS_ENABLED", True),
            predefined_parameters=_env_list(
                "QUERYMAPPER_PREDEFINED", list(PREDEFINED_PARAMETERS)
            ),
            strict=_env_bool("QUERYMAPPER_STRICT"),
            log_level=os.getenv("QUERYMAPPER_LOG_LEVEL", "INFO"),
        )

    def to_env(self) -> Dict[str, str]:
        """Environment variables that from_env reads back into this config."""
        return {
            "QUERYMAPPER_HOST": self.host,
            "QUERYMAPPER_PORT": str(self.port),
            "QUERYMAPPER_WORKERS": str(self.workers),
            "QUERYMAPPER_API_PREFIX": self.api_prefix,
            "QUERYMAPPER_DOCS_ENABLED": "true" if self.docs_enabled else "false",
            "QUERYMAPPER_PREDEFINED": ",".join(self.predefined_parameters),
            "QUERYMAPPER_STRICT": "true" if self.strict else "false",
            "QUERYMAPPER_LOG_LEVEL": self.log_level,
        }

    @classmethod
    def from_settings(cls, settings) -> "ServerConfig":
        """Build a server configuration from loaded YAML settings."""
        return cls(
            host=settings.server.host,
            port=settings.server.port,
            api_prefix=settings.server.api_prefix,
            predefined_parameters=list(settings.predefined_parameters),
            strict=settings.strict,
            log_level=settings.log_level,
        )


# Global configuration
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get server configuration."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def set_config(config: ServerConfig) -> None:
    """Set server configuration."""
    global _config
    _config = config
