# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Notification client, inter-service communication.
Tells the new recipient their payout period has started.
"""

import httpx

from rosca.core.config import settings
from rosca.core.logging import get_logger
from rosca.metrics.prometheus import NOTIFICATIONS_SENT

logger = get_logger(__name__)


class NotificationClient:
    """Fire-and-forget notification sender via notification-service."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self._base_url = settings.NOTIFICATION_SERVICE_URL if base_url is None else base_url
        self._timeout = timeout or settings.NOTIFICATION_TIMEOUT

    @property
    def enabled(self) -> bool:
        return bool(self._base_url)

    def send(self, channel: str, recipient: str, message: str) -> None:
        """Send a notification. Failures are logged but never raised."""
        if not self.enabled:
            logger.info("Notification skipped (no endpoint): recipient=%s, message=%s", recipient, message)
            return
        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    f"{self._base_url.rstrip('/')}/api/v1/notify",
                    json={
                        "channel": channel,
                        "recipient": recipient,
                        "message": message,
                    },
                )
            NOTIFICATIONS_SENT.labels(channel=channel).inc()
            logger.info(
                "Notification sent: recipient=%s, channel=%s, status=%d",
                recipient,
                channel,
                resp.status_code,
            )
        except Exception as exc:
            logger.warning("Notification failed: %s", exc)
