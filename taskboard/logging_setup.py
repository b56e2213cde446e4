from __future__ import annotations

import logging
import sys


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep taskboard logs as configured, but let other libraries
    (uvicorn access logs, sqlalchemy, passlib) through only at WARNING+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskboard" or record.name.startswith("taskboard."):
            return True
        if record.name == "uvicorn.error":
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this ONCE, before the application starts serving.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
