# vtree/log.py
import logging
from typing import Union

LOGGER_NAME = "vtree"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Union[int, str] = "WARNING") -> logging.Logger:
    """
    Installs a single stream handler on the ``vtree`` logger and sets its level.

    Safe to call repeatedly; later calls only change the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_vtree_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._vtree_handler = True
        logger.addHandler(handler)
    return logger
