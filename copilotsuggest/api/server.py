"""
Run the autosuggest API under uvicorn.

The app is created by uvicorn through the ``create_app`` factory, so
options that change how the dataset is loaded travel through the
environment (``COPILOTSUGGEST_DATASET_FILE``) rather than arguments.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

import uvicorn

from copilotsuggest.autosuggest.builder import DatasetBuilder
from copilotsuggest.config.logging_config import parse_level, setup_logging
from copilotsuggest.config.settings import DATASET_ENV, Settings, get_settings

APP_FACTORY = "copilotsuggest.api.app:create_app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve adaptive autosuggest over HTTP.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port.")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload.")
    parser.add_argument("--dataset", type=Path, default=None, help="Behavioral log (CSV) to serve.")
    parser.add_argument(
        "--build-pool", action="store_true",
        help="Rebuild and save the crowd pool snapshot before serving.",
    )
    parser.add_argument(
        "--log-level", default="info", choices=["debug", "info", "warning", "error"],
        help="Log level for the service.",
    )
    parser.add_argument(
        "--trace-keystrokes", action="store_true",
        help="Let per-keystroke engine/trigger debug logs through.",
    )
    return parser


def _resolve_settings(dataset: Optional[Path]) -> Settings:
    if dataset is not None:
        os.environ[DATASET_ENV] = str(dataset.resolve())
        get_settings.cache_clear()
    return get_settings()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = _resolve_settings(args.dataset)
    level = parse_level(args.log_level)
    setup_logging(log_dir=settings.logs_dir, level=level, trace_keystrokes=args.trace_keystrokes)
    logger = logging.getLogger(__name__)

    dataset_path = settings.dataset_path
    if not dataset_path.exists():
        logger.warning("Dataset %s not found; serving demonstration profiles only", dataset_path)

    if args.build_pool:
        settings.ensure_dirs()
        DatasetBuilder(settings).build(dataset_path, save=True)
    elif settings.pool_path.exists():
        logger.info("Pool snapshot available: %s", settings.pool_path)

    logger.info("Serving %s on %s:%d", dataset_path, args.host, args.port)
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
