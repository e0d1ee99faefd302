# storefront/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "storefront"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _file_handler(package: logging.Logger) -> logging.Handler | None:
    path = os.getenv("LOG_FILE", "/data/storefront.log")
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=int(os.getenv("LOG_MAX_BYTES", str(2 * 1024 * 1024))),
            backupCount=int(os.getenv("LOG_BACKUPS", "3")),
            encoding="utf-8",
        )
    except OSError as e:
        package.warning("File logging disabled, cannot open %s: %s", path, e)
        return None


def setup_logging() -> logging.Logger:
    """
    Configure the storefront logger tree once per process.

    Handlers hang off the "storefront" logger rather than the root, so an
    embedding application keeps its own logging setup. Records still
    propagate upwards. Stdout output is skipped when the root logger
    already has handlers, which would print the same lines again.
    """
    global _configured
    package = logging.getLogger(PACKAGE_LOGGER)
    if _configured:
        return package

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    package.setLevel(getattr(logging, level_name, logging.INFO))

    handlers = []
    if _env_flag("LOG_TO_STDOUT", "true") and not logging.getLogger().handlers:
        handlers.append(logging.StreamHandler(sys.stdout))
    # Off by default; the storefront usually runs embedded in another process.
    if _env_flag("LOG_TO_FILE", "false"):
        fh = _file_handler(package)
        if fh is not None:
            handlers.append(fh)

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        package.addHandler(handler)

    _configured = True
    return package


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the storefront tree; names outside it are nested below it."""
    setup_logging()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
