import logging
from typing import Optional

from bikeshop.config import ShopConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[ShopConfig] = None) -> logging.Logger:
    """
    Configure the ``bikeshop`` logger.

    Args:
        config: Shop configuration. If None, defaults are used.
    Returns:
        The package logger.
    """
    if config is None:
        config = ShopConfig()

    logger = logging.getLogger("bikeshop")
    logger.setLevel(getattr(logging, config.log_level))

    # Remove any existing handlers so repeated setup does not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    logger.debug("Logging configured at %s", config.log_level)
    return logger
