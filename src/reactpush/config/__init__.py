"""Configuration models and loaders for ReactPush."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, STORAGE_ROOT_ENV, dump_example_config, load_config
from .models import HostConfig, LocatorConfig, LoggingConfig, ReactPushConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HostConfig",
    "LocatorConfig",
    "LoggingConfig",
    "ReactPushConfig",
    "STORAGE_ROOT_ENV",
    "dump_example_config",
    "load_config",
]
