"""Factory functions to create components from configuration."""

from pathlib import Path

from gdelt_factcheck.config.models import FactCheckConfig, GdeltSearcherConfig
from gdelt_factcheck.pipeline import FactCheckPipeline
from gdelt_factcheck.run_logger import RunLogger
from gdelt_factcheck.search.gdelt import GdeltSearcher


def create_searcher(config: GdeltSearcherConfig) -> GdeltSearcher:
    """Create a GDELT searcher from config."""
    return GdeltSearcher(
        base_url=config.base_url,
        mode=config.mode,
        max_records=config.max_records,
        sort=config.sort,
        timeout=config.timeout_seconds,
    )


def create_from_config(
    config: FactCheckConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FactCheckPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if run logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = FactCheckPipeline(
        create_searcher(config.search),
        max_query_length=config.reliability.max_query_length,
        max_matches=config.reliability.max_matches,
        reason_language=config.reliability.reason_language,
        run_logger=run_logger,
    )
    return (pipeline, run_logger)
