#!/usr/bin/env python
"""CLI for the GDELT fact-check service."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Literal

import uvicorn
from pydantic import BaseModel, field_validator, model_validator

from gdelt_factcheck.api import ReliabilityOut, create_app
from gdelt_factcheck.config import FactCheckConfig, create_from_config, resolve_config

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["serve", "check"]
    text: str | None = None
    config: Path | None = None
    host: str | None = None
    port: int | None = None
    log: bool = False
    log_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Claim text must not be blank")
        return v

    @model_validator(mode="after")
    def check_requires_text(self) -> "CLIArgs":
        if self.command == "check" and self.text is None:
            raise ValueError("The check command needs claim text")
        return self


async def check(
    text: str,
    config: FactCheckConfig,
    *,
    log: bool = False,
    log_dir: str | None = None,
) -> None:
    """Fact-check a single claim and print the verdict as JSON.

    Args:
        text: Claim text.
        config: Effective configuration.
        log: Force a JSON run record regardless of config.
        log_dir: Override the configured run-record directory.
    """
    pipeline, run_logger = create_from_config(
        config,
        log_override=log if log else None,
        log_dir_override=log_dir,
    )

    logger.info(f"Checking claim: {text}")
    verdict = await pipeline.run(text)

    print(
        json.dumps(
            ReliabilityOut.from_verdict(verdict).model_dump(by_alias=True),
            ensure_ascii=False,
            indent=2,
        )
    )

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def serve(args: CLIArgs, config: FactCheckConfig) -> None:
    """Run the HTTP API with uvicorn."""
    host = args.host or config.server.host
    port = args.port or config.server.port
    app = create_app(config=config)
    logger.info(f"GDELT fact-check backend listening on {port}")
    uvicorn.run(app, host=host, port=port, log_level=config.logging.level.lower())


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Fact-check claims against GDELT news coverage.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $FACTCHECK_CONFIG or configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port (default: $PORT or 8080)")

    check_parser = subparsers.add_parser("check", help="Fact-check one claim and print the verdict")
    check_parser.add_argument("text", help="Claim text to check")
    check_parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON run record",
    )
    check_parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for run records (default: from config)",
    )

    ns = parser.parse_args()

    try:
        args = CLIArgs(
            command=ns.command,
            text=getattr(ns, "text", None),
            config=ns.config,
            host=getattr(ns, "host", None),
            port=getattr(ns, "port", None),
            log=getattr(ns, "log", False),
            log_dir=getattr(ns, "log_dir", None),
        )
        config = resolve_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.command == "serve":
            serve(args, config)
        elif args.text is not None:
            asyncio.run(check(args.text, config, log=args.log, log_dir=args.log_dir))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
