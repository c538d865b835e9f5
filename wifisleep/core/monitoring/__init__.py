from __future__ import annotations

from .display_monitoring import DisplayActivityPoller, read_display_active
from .workspace_notifications import Subscription, WorkspaceNotificationSource

__all__ = [
    "DisplayActivityPoller",
    "Subscription",
    "WorkspaceNotificationSource",
    "read_display_active",
]
