"""Logging setup for the rieger logger hierarchy."""

from __future__ import annotations

import logging
import sys
from typing import Any

from rieger.config import load_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    config: dict[str, Any] | None = None,
) -> logging.Logger:
    """
    Configure the "rieger" logger: level from verbose/quiet or config, console
    handler on stderr, optional file handler from config. Handlers are only added
    once, so repeated calls just adjust the level.
    """
    if config is None:
        config = load_config(None)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = str(log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("rieger")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter(LOG_FORMAT)
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)
    return root
