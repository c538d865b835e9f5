"""WiFi Sleep Manager menu-bar app.

pystray is imported lazily (see `integrations.runtime`), so importing this
package is safe in headless environments.
"""

from .entrypoint import main

__all__ = ["main"]
