"""Audit log of cleanup actions.

One line per event, ``<local timestamp> - <message>``, appended to a
system log file. When that file cannot be opened the log silently moves
to a file in the user's home directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cleara.settings import Settings

log = logging.getLogger(__name__)

AUDIT_LOGGER = "cleara.audit"

_FORMAT = "%(asctime)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _open_handler(path: Path) -> logging.FileHandler | None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        log.debug("Cannot open audit log %s: %s", path, e)
        return None


def setup_audit_log(settings: Settings | None = None) -> logging.Logger:
    """Configure the audit logger and return it.

    Calling this again replaces the previously installed handler.
    """
    settings = settings or Settings.instance()
    logger = logging.getLogger(AUDIT_LOGGER)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler | None = None
    for key in ("audit.log_file", "audit.fallback_log_file"):
        handler = _open_handler(Path(settings.get(key)).expanduser())
        if handler is not None:
            break
    if handler is None:
        log.debug("No writable audit log location, audit entries are discarded")
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def audit_path(logger: logging.Logger | None = None) -> Path | None:
    """Return the file the audit log currently writes to, if any."""
    logger = logger or logging.getLogger(AUDIT_LOGGER)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None
