import logging

from backend import config

APP_LOGGERS = ("pomagotchi", "backend")


def setup_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL to the app's loggers inside the server process.

    A stream handler is attached once per logger so INFO records show up
    under uvicorn, which only configures its own loggers.
    """
    level = level or config.log_level()
    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(fmt)
            logger.addHandler(handler)
