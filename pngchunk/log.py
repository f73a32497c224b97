"""
Logging setup for pngchunk.

Modules get their logger with:
    from pngchunk.log import get_logger
    logger = get_logger(__name__)

Handlers are only installed by configure_logging(), never on import.
"""

import logging
import sys


DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level=logging.INFO, fmt=DEFAULT_FORMAT, stream=sys.stdout, logger=None
):
    """
    Install a stream handler on `logger` (the root logger by default) and set
    its level.

    Calling it again only changes the level; the handler is not duplicated.
    """
    target = logger if logger is not None else logging.getLogger()
    if not target.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        target.addHandler(handler)

    target.setLevel(level)


def get_logger(name):
    return logging.getLogger(name)
