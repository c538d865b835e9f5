"""The append-only `app.log` in the config directory.

The file handler is attached to the `wifisleep` package logger so every
module's `logging.getLogger(__name__)` ends up there. Verbose logging only
moves that logger between INFO and DEBUG.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .config.paths import log_file_path

logger = logging.getLogger(__name__)


PACKAGE_LOGGER = "wifisleep"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def set_verbose(verbose: bool) -> None:
    package_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


def _is_app_log_handler(handler: logging.Handler, path: Path) -> bool:
    base = getattr(handler, "baseFilename", None)
    return isinstance(handler, logging.FileHandler) and base is not None and Path(base) == path


def attach_file_handler(*, path: Optional[Path] = None, verbose: bool = False) -> Optional[logging.Handler]:
    """Attach (once) a FileHandler writing to app.log.

    Returns the handler, or None when the file could not be opened.
    """

    target = Path(path) if path is not None else log_file_path()
    pkg = package_logger()
    set_verbose(verbose)

    for h in pkg.handlers:
        if _is_app_log_handler(h, Path(os.path.abspath(target))):
            return h

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, mode="a", encoding="utf-8", delay=True)
    except OSError as exc:
        logger.debug("Could not open log file %s: %s", target, exc)
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg.addHandler(handler)
    return handler


def detach_file_handlers() -> None:
    pkg = package_logger()
    for h in list(pkg.handlers):
        if isinstance(h, logging.FileHandler):
            pkg.removeHandler(h)
            try:
                h.close()
            except (OSError, ValueError) as exc:
                logger.debug("Failed to close log handler %r: %s", h, exc)


def clear_log(path: Optional[Path] = None) -> bool:
    """Truncate app.log. Returns False if the file could not be written."""

    target = Path(path) if path is not None else log_file_path()
    # Open handlers keep their own file offset; flush them before truncating.
    for h in package_logger().handlers:
        try:
            h.flush()
        except (OSError, ValueError) as exc:
            logger.debug("Failed to flush log handler %r: %s", h, exc)
    try:
        if not target.exists():
            return True
        target.write_text("", encoding="utf-8")
        return True
    except OSError as exc:
        logger.debug("Could not clear log file %s: %s", target, exc)
        return False


def trim_log_if_needed(*, max_bytes: int, path: Optional[Path] = None) -> bool:
    """Empty app.log once it grows past `max_bytes`. Returns True if cleared."""

    if max_bytes <= 0:
        return False
    target = Path(path) if path is not None else log_file_path()
    try:
        size = target.stat().st_size
    except OSError:
        return False
    if size <= max_bytes:
        return False
    return clear_log(target)
