from __future__ import annotations

import importlib
import logging
import os
from contextlib import suppress

from wifisleep.core.config import config_dir


_pystray_mod = None
_pystray_item = None
_instance_lock_fh = None


logger = logging.getLogger(__name__)


def get_pystray():
    """Import pystray only when the tray UI is actually needed.

    Importing `pystray` connects to the window server immediately, which
    breaks headless environments (like CI) that still need to be able to
    import tray modules.
    """

    global _pystray_mod, _pystray_item

    if _pystray_mod is not None and _pystray_item is not None:
        return _pystray_mod, _pystray_item

    try:
        if "PYSTRAY_BACKEND" in os.environ:
            logger.info("pystray backend: %s (explicit)", os.environ.get("PYSTRAY_BACKEND"))
        _pystray_mod = importlib.import_module("pystray")
    except Exception as exc:  # pragma: no cover (depends on desktop env)
        raise RuntimeError(
            "pystray could not be initialized. The menu-bar app requires a desktop "
            "session. In CI/headless environments, importing the module is "
            "supported but running the tray is not."
        ) from exc

    _pystray_item = getattr(_pystray_mod, "MenuItem")
    return _pystray_mod, _pystray_item


def acquire_single_instance_lock() -> bool:
    """Ensure only one tray app owns the sleep/wake state files."""

    global _instance_lock_fh

    try:
        import fcntl  # macOS/Unix
    except Exception:
        return True

    lock_dir = config_dir()
    with suppress(Exception):
        lock_dir.mkdir(parents=True, exist_ok=True)
    lock_path = lock_dir / "wifisleep.lock"

    try:
        _instance_lock_fh = open(lock_path, "a+")
        fcntl.flock(_instance_lock_fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        _instance_lock_fh.seek(0)
        _instance_lock_fh.truncate()
        _instance_lock_fh.write(f"pid={os.getpid()}\n")
        _instance_lock_fh.flush()
        return True
    except OSError:
        return False
