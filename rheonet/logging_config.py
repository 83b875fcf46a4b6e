# Package logger setup for demos, the API server and the Streamlit app

import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "rheonet"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach handlers to the 'rheonet' logger and return it.

    Calling it again replaces the previous handlers instead of stacking
    them (Streamlit re-executes the page script on every interaction).

    Args:
        level: logging level, as a number or a name such as "DEBUG"
        log_file: also append records to this file
        stream: console stream, stdout by default
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{name}'")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return logger
