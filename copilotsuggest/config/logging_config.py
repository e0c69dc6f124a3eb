"""
Logging setup for the autosuggest service and CLIs.

Everything logs under the ``copilotsuggest`` logger tree via
``logging.getLogger(__name__)``. The ranking engine and the trigger
package log at DEBUG on every keystroke, so ``setup_logging`` holds them
at INFO unless a caller asks for keystroke tracing.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Mapping, Optional

ROOT_LOGGER = "copilotsuggest"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-keystroke loggers, kept quiet even when the service runs at DEBUG
KEYSTROKE_LOGGERS = (
    "copilotsuggest.autosuggest.engine",
    "copilotsuggest.trigger",
)

DEFAULT_MODULE_LEVELS: dict[str, int] = {name: logging.INFO for name in KEYSTROKE_LOGGERS}


def parse_level(name: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names raise ValueError."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
    log_file: str = "copilotsuggest.log",
    module_levels: Optional[Mapping[str, int]] = None,
    trace_keystrokes: bool = False,
) -> None:
    """
    Configure the ``copilotsuggest`` logger tree.

    Args:
        log_dir: Directory for a rotating log file. None logs to stdout only.
        level: Level for the tree and its handlers.
        log_file: File name inside ``log_dir``.
        module_levels: Extra ``{logger name: level}`` overrides, applied
            after the keystroke defaults.
        trace_keystrokes: Let the per-keystroke loggers follow ``level``.

    Levels are applied on every call; handlers are attached only once.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    levels = {} if trace_keystrokes else dict(DEFAULT_MODULE_LEVELS)
    if trace_keystrokes:
        for name in KEYSTROKE_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)
    levels.update(module_levels or {})
    for name, module_level in levels.items():
        logging.getLogger(name).setLevel(module_level)

    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        root_logger.warning("Could not set up file logging in %s: %s", log_dir, e)
        return
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
