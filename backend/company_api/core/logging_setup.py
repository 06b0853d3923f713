import logging
import os
import sys

from company_api.core.config import settings

LOGGER_NAME = "company_api"
LOG_FORMAT = "%(asctime)s %(levelname)s %(module)s:%(lineno)d %(funcName)s() %(message)s"

_initialized = False


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the package logger once: stderr plus ``<log_dir>/all.log``."""
    global _initialized
    logger = logging.getLogger(LOGGER_NAME)
    if _initialized:
        return logger

    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    # Continue with stderr only if the log directory is not writable
    try:
        os.makedirs(settings.log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(settings.log_dir, "all.log")))
    except OSError as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _initialized = True
    return logger
