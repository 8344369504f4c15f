"""YAML configuration loading utilities."""

import os
from pathlib import Path

import yaml

from gdelt_factcheck.config.models import FactCheckConfig, ServerConfig

CONFIG_ENV_VAR = "FACTCHECK_CONFIG"


def load_config(path: Path | str) -> FactCheckConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated FactCheckConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return FactCheckConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parents[3] / "configs" / "default.yaml"


def resolve_config(path: Path | str | None = None) -> FactCheckConfig:
    """Load the effective configuration.

    An explicit ``path`` wins, then the FACTCHECK_CONFIG env var, then the
    bundled default file. Built-in defaults apply when none of those exist.
    The PORT env var overrides ``server.port``.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if path is not None:
        config = load_config(path)
    elif get_default_config_path().exists():
        config = load_config(get_default_config_path())
    else:
        config = FactCheckConfig()

    port = os.environ.get("PORT")
    if port:
        server = ServerConfig.model_validate({**config.server.model_dump(), "port": port})
        config = config.model_copy(update={"server": server})
    return config
