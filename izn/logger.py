import logging
import sys

from izn.log_levels import LogLevel, coerce_log_level

logger = logging.getLogger("izn")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logger(level: LogLevel | str | int | None = None) -> None:
    """Attach a stderr handler to the izn logger.

    Without an explicit level, IZN_LOG_LEVEL (default WARNING) is used.
    """
    if level is None:
        from izn.config import default_settings

        level = default_settings().log_level

    resolved_level = coerce_log_level(level)
    lvl_value = int(resolved_level)

    logger.setLevel(lvl_value)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(sys.stderr))

    for handler in logger.handlers:
        handler.setLevel(lvl_value)
        handler.setFormatter(formatter)
