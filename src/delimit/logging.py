"""
Delimit Logging Utility
=======================
Handler setup for the ``delimit`` logger tree.

Library modules only call ``logging.getLogger(__name__)``. Handlers are added
here when a ``DelimitConfig`` with an enabled ``logging`` section is applied,
or when an application calls ``configure`` itself.
"""

from __future__ import annotations
import logging
import logging.config
from pathlib import Path
from delimit.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOG_LEVEL,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_FORMAT,
    LOG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
)
from delimit.exceptions import ConfigurationError

ROOT_LOGGER = "delimit"

_configured = False


def check_level(name: str, level: str) -> str:
    """Return ``level`` upper-cased, or raise if logging does not know it."""
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigurationError(
            f"{name} must be a logging level name, got {level!r}",
            {name: level, "suggestion": "Use DEBUG, INFO, WARNING, ERROR or CRITICAL"},
        )
    return level.upper()


def configure(
    *,
    console_level: str = DEFAULT_CONSOLE_LOG_LEVEL,
    file_dir: str | Path | None = DEFAULT_LOG_DIR,
    file_name: str | None = None,
    file_level: str = DEFAULT_FILE_LOG_LEVEL,
    fmt: str = DEFAULT_LOG_FORMAT,
    force: bool = False,
) -> bool:
    """
    Attach console (and optionally rotating file) handlers to the delimit logger.

    Only the first call takes effect unless ``force=True``. Returns True when
    handlers were (re)installed.

    Parameters
    ----------
    console_level : str
        Level for stderr.
    file_dir : str | Path | None
        Directory for the log file, created if missing.
    file_name : str | None
        Log file name. ``None`` = console only.
    file_level : str
        Level for the file handler.
    fmt : str
        Log-record format shared by both handlers.
    force : bool
        Replace handlers installed by an earlier call.
    """
    global _configured

    log = logging.getLogger(f"{ROOT_LOGGER}.logging")
    if _configured and not force:
        log.debug("Logging already configured, ignoring configuration request")
        return False

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": check_level("console_level", console_level),
            "formatter": "basic",
            "stream": "ext://sys.stderr",
        }
    }

    log_path = None
    if file_name:
        log_path = Path(file_dir if file_dir is not None else DEFAULT_LOG_DIR) / file_name
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": check_level("file_level", file_level),
            "formatter": "basic",
            "filename": str(log_path),
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUP_COUNT,
        }

    # Only the delimit tree is touched; other loggers keep their handlers.
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"basic": {"format": fmt}},
            "handlers": handlers,
            "loggers": {
                ROOT_LOGGER: {
                    "handlers": list(handlers),
                    "level": "DEBUG",
                    "propagate": False,
                }
            },
        }
    )

    _configured = True
    log.info("Logging configured - console_level: %s, file: %s", console_level, log_path)
    return True


def is_configured() -> bool:
    return _configured


def reset() -> None:
    """Forget an earlier ``configure`` call so the next one takes effect (tests)."""
    global _configured
    _configured = False
