"""
cachesync - Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the runtime.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import EntityKind, SyncConfig

logger = logging.getLogger(__name__)

_config_instance: SyncConfig | None = None

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> SyncConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated SyncConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    if env_file:
        env_path = Path(env_file)
    else:
        env_path = Path.cwd() / ".env"

    if env_path.exists():
        logger.info("Loading environment from %s", env_path)
        try:
            load_dotenv(env_path, override=True)
        except Exception as e:
            logger.error(
                "Failed to load .env file from %s: %s",
                env_path,
                e,
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    config_dict = {
        "environment": os.getenv("ENVIRONMENT", "development"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "enabled": os.getenv("CACHESYNC_ENABLED", ",".join(kind.value for kind in EntityKind)),
        "channel": {
            "allowed_types": os.getenv("CACHESYNC_CHANNEL_TYPES"),
        },
    }

    try:
        _config_instance = SyncConfig(**config_dict)  # type: ignore[arg-type]
        logger.info(
            "Configuration loaded successfully (environment: %s)",
            _config_instance.environment.value,
            extra={
                "environment": _config_instance.environment.value,
                "enabled": [kind.value for kind in _config_instance.enabled],
            },
        )
        return _config_instance
    except ValidationError as e:
        logger.error(
            "Configuration validation failed: %s",
            e,
            extra={"validation_errors": e.errors(), "config_dict_keys": list(config_dict.keys())},
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables.",
            details={"validation_errors": e.errors()},
        ) from e


def get_config() -> SyncConfig:
    """
    Get the current configuration instance, loading it on first access.

    Returns:
        Current SyncConfig instance
    """
    if _config_instance is None:
        return load_config()

    return _config_instance


def reload_config(env_file: str | None = None) -> SyncConfig:
    """Force reload configuration."""
    return load_config(env_file=env_file, reload=True)


def reset_config() -> None:
    """Drop the cached configuration instance. Used in tests."""
    global _config_instance
    _config_instance = None


def configure_logging(config: SyncConfig | None = None) -> None:
    """Apply the configured log level to the root logger."""
    config = config or get_config()
    logging.basicConfig(level=config.log_level.value, format=LOG_FORMAT)
    logging.getLogger("cachesync").setLevel(config.log_level.value)
