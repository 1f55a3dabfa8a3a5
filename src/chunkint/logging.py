# chunkint/logging.py
"""
Logging setup for chunkint.

Library modules use:
    from chunkint.logging import get_logger
    logger = get_logger(__name__)

The library itself never installs handlers. Applications (or a debugging
session) call configure_logging() once.
"""

import logging
import sys


DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

# subsystem tags
CHAIN = "[CHAIN]"
CURSOR = "[CURSOR]"
ADD = "[ADD]"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stdout,
):
    """
    Configure the chunkint logger tree.

    Safe to call multiple times; a second call only changes the level.
    """
    root = logging.getLogger("chunkint")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
