"""Logging for the visualizer: DEBUG to a log file, a quieter level on stderr."""

import logging
import os
import sys

# Path of the active log file after setup_logging(); None when the file could not be opened.
LOG_FILE_PATH: str | None = None

# Overrides the stderr level, e.g. LOFI_PIXEL_LOG_LEVEL=DEBUG
LEVEL_ENV = "LOFI_PIXEL_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_dir() -> str:
    return os.path.join(os.environ.get("TEMP", os.path.expanduser("~")), "LofiPixel")


def console_level() -> int:
    """stderr level from LOFI_PIXEL_LOG_LEVEL; unknown names fall back to INFO."""
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> str | None:
    """Attach file + stderr handlers to the lofi_pixel logger. Returns the log file path."""
    global LOG_FILE_PATH
    logger = logging.getLogger("lofi_pixel")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    LOG_FILE_PATH = None
    try:
        os.makedirs(log_dir(), exist_ok=True)
        path = os.path.join(log_dir(), "app.log")
        fh = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        pass
    else:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        LOG_FILE_PATH = path

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(console_level())
    eh.setFormatter(fmt)
    logger.addHandler(eh)

    logger.debug("Logging configured; file: %s", LOG_FILE_PATH or "(none)")
    return LOG_FILE_PATH
