"""
stringtok logging configuration.

Library modules log through ``logging.getLogger(__name__)``, which places
them under the ``stringtok`` namespace. Nothing is printed unless the
application configures logging; ``setup_logging`` is the shortcut for
seeing the scanner's per-call DEBUG summaries.

Usage:
    from stringtok.logging_config import setup_logging

    setup_logging(verbose=True)
    tokenize(text="Hello, world!")   # stringtok.scanner DEBUG: Scanned 13 chars ...
"""

import logging
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "stringtok"

LOG_FORMAT = "%(name)s %(levelname)s: %(message)s"

# Marks the handler this module owns so repeat calls replace only it
_HANDLER_NAME = "stringtok-console"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a console handler to the ``stringtok`` logger.

    Handlers added by the application are left alone, and the root logger
    is not touched.

    Args:
        verbose: Enable DEBUG level logging (per-call scan summaries)
        quiet: Only show ERROR and above
        stream: Where to write; defaults to stderr

    Returns:
        The configured ``stringtok`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the stringtok namespace.

    Args:
        name: Logger name, typically __name__

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
