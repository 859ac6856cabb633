"""Logging setup for scripts using numgrids.

The library only emits records through module-level loggers under the ``numgrids``
namespace and never installs handlers on import.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Send ``numgrids`` records to stdout and, optionally, to `log_file`."""

    logger = logging.getLogger("numgrids")
    logger.setLevel(level)

    # Repeated calls replace handlers instead of duplicating output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
