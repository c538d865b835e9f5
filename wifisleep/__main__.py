"""`python -m wifisleep` runs the helper trigger CLI.

For the menu-bar app use `python -m wifisleep.tray` or the
`wifi-sleep-manager` console script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
