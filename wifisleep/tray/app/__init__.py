from .application import WiFiSleepTray

__all__ = ["WiFiSleepTray"]
