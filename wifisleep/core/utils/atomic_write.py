from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_text_atomic(path: Path, text: str, *, fsync: bool = False) -> None:
    """Replace `path` with `text` so readers never see a partial file.

    Writes a temp file in the same directory, then `os.replace`s it over the
    target. Creates the parent directory. Raises OSError on failure; the temp
    file is removed either way.
    """

    target = Path(path)
    parent = target.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_fd, tmp_path = tempfile.mkstemp(prefix=f"{target.name}.", suffix=".tmp", dir=str(parent))
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            f.write(text)
            if fsync:
                f.flush()
                os.fsync(f.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
        except OSError as exc:
            logger.debug("Failed to remove temp file %s: %s", tmp_path, exc)
