"""Root logger configuration: console output, plus log files when LOG_DIR is set."""

import logging
import os
from pathlib import Path

from gatekeeper.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings. Safe to call more than once."""
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    root = logging.getLogger()
    root.setLevel(level)

    if not settings.LOG_DIR:
        return
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    existing = {getattr(h, "baseFilename", None) for h in root.handlers}
    for filename, handler_level in (("error.log", logging.ERROR), ("combined.log", logging.NOTSET)):
        path = os.path.abspath(log_dir / filename)
        if path in existing:
            continue
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
