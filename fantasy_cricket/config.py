"""Service configuration management."""

import os
from functools import lru_cache
from pathlib import Path

from .schemas import AppConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'app_config.json'

# Environment variable -> AppConfig field
ENV_OVERRIDES = {
    'FANTASY_HOST': 'host',
    'FANTASY_PORT': 'port',
    'FANTASY_TEAMS_PATH': 'teams_path',
    'FANTASY_MATCH_PATH': 'match_path',
    'FANTASY_STORE': 'store',
    'FANTASY_LOG_LEVEL': 'log_level',
}


def load_config(config_path: Path | str | None = None, environ=None) -> AppConfig:
    """
    Build configuration from the optional config file and the environment.

    Environment variables take precedence over the file, which takes
    precedence over the defaults declared on AppConfig.

    Args:
        config_path: JSON config file (default: data/app_config.json)
        environ: Mapping to read overrides from (default: os.environ)

    Raises:
        ValueError: If the file or the overrides fail validation
    """
    config_path = Path(config_path) if config_path else CONFIG_PATH
    environ = os.environ if environ is None else environ

    settings = {}
    if config_path.exists():
        settings = load_json(config_path, schema=AppConfig).model_dump()

    for env_key, field_name in ENV_OVERRIDES.items():
        if env_key in environ:
            settings[field_name] = environ[env_key]

    return AppConfig.model_validate(settings)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Load service configuration.

    Configuration is cached after first load.

    Example:
        from fantasy_cricket.config import get_config
        config = get_config()
        print(f"Listening on port {config.port}")
    """
    return load_config()


def get_server_address() -> tuple[str, int]:
    """Get the (host, port) the HTTP server binds to."""
    config = get_config()
    return config.host, config.port


def get_match_path() -> Path:
    """Get the path of the match results file."""
    return Path(get_config().match_path)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or environment changes during runtime.
    """
    get_config.cache_clear()
