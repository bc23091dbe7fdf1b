"""Opt-in log output for applications embedding the package.

The package itself only creates loggers (``logging.getLogger(__name__)``);
nothing is printed until a handler is attached here or by the host
application.
"""

from __future__ import annotations

import logging
from typing import IO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "container_fleet"


def configure_logging(level: int | str = logging.INFO, stream: IO[str] | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``container_fleet`` logger.

    Calling it again replaces the previous handler instead of stacking
    a second one.
    """
    package_logger = logging.getLogger("container_fleet")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
