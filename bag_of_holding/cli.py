# bag_of_holding/cli.py
"""Command line entry point that serves the API with uvicorn."""

import argparse
import logging
from typing import List, Optional

import uvicorn

from .config import Settings
from .logging_config import setup_logging
from .web.app import create_app

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve random D&D characters over HTTP.")
    parser.add_argument("--host", help="Interface to bind (default: BOH_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: BOH_PORT or 5000)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: BOH_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--env-file", help="Optional .env file to load")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings, overridden by any command line flags."""
    settings = Settings.from_env(args.env_file)
    if args.host:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.log_level:
        settings.log_level = args.log_level
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = build_settings(args)
    setup_logging(settings.log_level)

    log.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
