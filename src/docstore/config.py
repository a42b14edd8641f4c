"""Configuration management."""
import logging
from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from docstore.exceptions import ConfigError
from docstore.search import MatchMode


class DocStoreConfig(BaseSettings):
    """Configuration for the document store."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Search settings
    match_mode: MatchMode = MatchMode.LAST_CRITERION

    # Logging
    verbose: bool = False


@lru_cache
def _get_config_cached() -> DocStoreConfig:
    try:
        return DocStoreConfig()
    except ValidationError as e:
        raise ConfigError(f"Invalid docstore configuration: {e}") from e


def clear_config_cache() -> None:
    """Drop the cached configuration without re-reading the environment."""
    _get_config_cached.cache_clear()


def get_config(clear_cache: bool = False) -> DocStoreConfig:
    """Get configuration instance.

    Args:
        clear_cache: If True, re-read the environment before returning config.
    """
    if clear_cache:
        clear_config_cache()
    return _get_config_cached()


def configure_logging(verbose: bool) -> None:
    """Set the level of the ``docstore`` logger.

    Handlers are left to the application.
    """
    logging.getLogger("docstore").setLevel(logging.DEBUG if verbose else logging.WARNING)
