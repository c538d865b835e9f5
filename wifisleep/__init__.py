"""WiFi Sleep Manager.

Turns Wi-Fi, Bluetooth and other network services off while the Mac sleeps
and restores them on wake.
"""

__version__ = "0.3.0"
