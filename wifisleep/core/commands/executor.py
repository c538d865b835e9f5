from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)


# GUI launches on macOS don't inherit the Homebrew PATH.
_EXTRA_TOOL_DIRS: tuple[str, ...] = (
    "/usr/local/bin",
    "/opt/homebrew/bin",
    "/usr/sbin",
)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command invocation."""

    ok: bool
    output: str = ""
    error: str = ""
    tool_missing: bool = False


Runner = Callable[[Sequence[str], float], CommandResult]


def run_command(argv: Sequence[str], timeout_s: float = 10.0) -> CommandResult:
    """Run one external command synchronously, never raising.

    Non-zero exit, timeouts and a missing executable all come back as a
    failed result; callers decide whether to continue.
    """

    args = [str(a) for a in argv]
    try:
        cp = subprocess.run(
            args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_s,
            check=False,
        )
    except FileNotFoundError as exc:
        logger.debug("Tool not found: %s (%s)", args[0] if args else "?", exc)
        return CommandResult(ok=False, error=str(exc), tool_missing=True)
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out after %.1fs: %s", timeout_s, " ".join(args))
        return CommandResult(ok=False, error="timeout")
    except OSError as exc:
        logger.debug("Command failed to start: %s (%s)", " ".join(args), exc)
        return CommandResult(ok=False, error=str(exc))
    except ValueError as exc:
        # e.g. an embedded NUL in an argument
        logger.debug("Invalid command line %r: %s", args, exc)
        return CommandResult(ok=False, error=str(exc))

    out = (cp.stdout or "").strip()
    err = (cp.stderr or "").strip()
    if cp.returncode != 0:
        logger.debug("Command exited %s: %s %s", cp.returncode, " ".join(args), err)
        return CommandResult(ok=False, output=out, error=err or f"exit status {cp.returncode}")
    return CommandResult(ok=True, output=out, error=err)


def find_tool(name: str, *, extra_dirs: Iterable[str] = _EXTRA_TOOL_DIRS) -> Optional[str]:
    """Locate an executable on PATH or in the usual install prefixes."""

    found = shutil.which(name)
    if found:
        return found

    for d in extra_dirs:
        cand = os.path.join(d, name)
        if os.path.isfile(cand) and os.access(cand, os.X_OK):
            return cand
    return None
