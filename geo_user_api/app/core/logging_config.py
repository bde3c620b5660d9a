"""Root logger setup: console output plus an optional ``LOG_FILE``."""

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach handlers to the root logger unless it already has some.

    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
