"""Logger setup shared by the CLI and core modules"""

import logging
import sys


def get_logger(name: str = "mdxname", verbose: bool = False) -> logging.Logger:
    """Return a logger writing to stderr; DEBUG when verbose, else INFO."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
