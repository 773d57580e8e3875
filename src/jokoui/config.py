"""
Configuration Management for JokoUI Applications

🔧 Explicit configuration:
Configuration objects are built once at startup (from defaults, a dict or the
environment) and handed to whatever needs them. Nothing here is global.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .client import ClientConfig
from .dom import DEFAULT_PARSER


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class RuntimeConfig:
    """Presentation tree settings"""
    parser: str = DEFAULT_PARSER
    host_id: str = "app"


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    client: ClientConfig = field(default_factory=ClientConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"
            config.client = ClientConfig(timeout=5.0)

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary. Unknown keys are ignored."""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for section in ("logging", "runtime"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        if "client" in config_dict:
            config.client = ClientConfig(**{**config.client.model_dump(), **config_dict["client"]})

        return config

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('JOKOUI_ENV', 'development')
        config = cls.for_environment(Environment(env_name))

        if os.getenv('JOKOUI_DEBUG'):
            config.debug = os.getenv('JOKOUI_DEBUG').lower() == 'true'

        if os.getenv('JOKOUI_LOG_LEVEL'):
            config.logging.level = os.getenv('JOKOUI_LOG_LEVEL').upper()

        client_overrides: Dict[str, Any] = {}
        if os.getenv('JOKOUI_BASE_URL'):
            client_overrides["base_url"] = os.getenv('JOKOUI_BASE_URL')
        if os.getenv('JOKOUI_TIMEOUT'):
            client_overrides["timeout"] = float(os.getenv('JOKOUI_TIMEOUT'))
        if client_overrides:
            config.client = config.client.model_copy(update=client_overrides)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count
            },
            "runtime": {
                "parser": self.runtime.parser,
                "host_id": self.runtime.host_id
            },
            "client": self.client.model_dump()
        }


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install handlers on the ``jokoui`` logger according to ``config``."""
    logger = logging.getLogger("jokoui")
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(config.format)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if config.file_path:
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = [
    "Environment", "LoggingConfig", "RuntimeConfig", "ApplicationConfig", "configure_logging",
]
