"""Pydantic configuration models for gdelt-factcheck components."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gdelt_factcheck.search.gdelt import GDELT_DOC_API_URL

# ============================================================
# Search Config
# ============================================================


class GdeltSearcherConfig(BaseModel):
    """Configuration for GdeltSearcher."""

    base_url: str = GDELT_DOC_API_URL
    mode: str = "ArtList"
    max_records: int = Field(default=30, ge=1, le=250)
    sort: str = "datedesc"
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Reliability Config
# ============================================================


class ReliabilityConfig(BaseModel):
    """Configuration for query building and verdict construction."""

    max_query_length: int = Field(default=120, ge=1)
    max_matches: int = Field(default=10, ge=1)
    reason_language: Literal["en", "th"] = "en"

    model_config = {"frozen": True}


# ============================================================
# Server Config
# ============================================================


class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for process logging and per-run JSON records."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


# ============================================================
# Root Config
# ============================================================


class FactCheckConfig(BaseModel):
    """Root configuration for gdelt-factcheck."""

    search: GdeltSearcherConfig = Field(default_factory=GdeltSearcherConfig)
    reliability: ReliabilityConfig = Field(default_factory=ReliabilityConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
