"""
Opt-in logging setup for the funcset logger hierarchy.

Library modules only call logging.getLogger(__name__); nothing is
printed unless the application configures logging itself or calls
configure_logging.
"""
import logging

ROOT_LOGGER = "funcset"


def configure_logging(level: int = logging.INFO,
                      name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Sends the named logger to stderr with a message-only format.
    Calling it again only changes the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if not handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        handlers = [handler]
    for handler in handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
