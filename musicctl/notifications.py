"""Desktop notifications via org.freedesktop.Notifications."""

import logging
from typing import Dict, List, Optional

from .constants import DEFAULT_DBUS_TIMEOUT_MS, NOTIFICATIONS_PATH, NOTIFICATIONS_SERVICE
from .dbus import DBusProxy

logger = logging.getLogger(__name__)


class Notifier:
    """Client for the notification server on the session bus."""

    def __init__(self, connection, timeout_ms: int = DEFAULT_DBUS_TIMEOUT_MS, proxy_factory=DBusProxy):
        self.proxy = proxy_factory(connection, NOTIFICATIONS_SERVICE, NOTIFICATIONS_PATH,
                                   NOTIFICATIONS_SERVICE, timeout_ms)

    def notify(
        self,
        app_name: str,
        replaces_id: int,
        app_icon: str,
        summary: str,
        body: str,
        actions: Optional[List[str]] = None,
        hints: Optional[Dict] = None,
        expire_timeout: int = 0,
    ) -> int:
        """Show a notification and return its id."""
        (notification_id,) = self.proxy.call(
            "Notify",
            "(susssasa{sv}i)",
            app_name,
            replaces_id,
            app_icon,
            summary,
            body,
            actions or [],
            hints or {},
            expire_timeout,
        )
        logger.debug(f"Notify -> {notification_id}")
        return notification_id
