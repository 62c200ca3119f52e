"""Logging configuration helpers."""

import logging

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the dashboard's logger tree.

    Calling this again only adjusts the level. Per-request transport logs are
    kept at WARNING so backend calls do not flood the console.
    """
    logger = logging.getLogger("caloriv_admin")
    logger.setLevel(level.upper())
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
