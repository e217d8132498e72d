# logging_config.py

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

PACKAGE_LOGGER = "LivePoints"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers owned by setup_logging so a second call replaces only those.
_OWNED = "_livepoints_handler"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    *,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Route the module loggers (`LivePoints.*`) to stdout and, optionally, to a
    rotating log file. Per-point traffic is logged at DEBUG, so a long
    auto-generation run at DEBUG level rolls over after `max_bytes`.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    logger.debug("Logging to stdout%s", f" and {log_file}" if log_file else "")
    return logger
