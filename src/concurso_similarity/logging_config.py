"""Root logger setup for the command line entry point."""
from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from concurso_similarity.config import Settings


def setup_logging(settings: Settings) -> None:
    """Send log records to stderr, as JSON unless ``LOG_JSON`` is off."""
    handler = logging.StreamHandler(sys.stderr)

    if settings.LOG_JSON:
        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
