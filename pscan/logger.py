import logging
import sys

LOG_NAME = "pscan"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def create_logger(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(LOG_NAME)
    logger.setLevel(level.upper())

    # Prevent duplicate handlers when main() runs more than once
    if logger.handlers:
        return logger

    # stderr only; stdout carries scan results
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(sh)
    return logger
