"""Configuration module for gdelt-factcheck."""

from gdelt_factcheck.config.factory import create_from_config, create_searcher
from gdelt_factcheck.config.loader import get_default_config_path, load_config, resolve_config
from gdelt_factcheck.config.models import (
    FactCheckConfig,
    GdeltSearcherConfig,
    LoggingConfig,
    ReliabilityConfig,
    ServerConfig,
)

__all__ = [
    "FactCheckConfig",
    "GdeltSearcherConfig",
    "LoggingConfig",
    "ReliabilityConfig",
    "ServerConfig",
    "create_from_config",
    "create_searcher",
    "get_default_config_path",
    "load_config",
    "resolve_config",
]
