"""Core (UI-free) parts of WiFi Sleep Manager."""
