"""Notifications — default Notifier that reports toasts through logging.

Invariants:
    - Fire-and-forget: nothing is returned, nothing raised
"""

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier used when no UI toast layer is attached."""

    def notify_success(self, title: str, description: str) -> None:
        logger.info(f"{title}: {description}", extra={"outcome": "success"})

    def notify_failure(self, title: str, description: str) -> None:
        logger.warning(f"{title}: {description}", extra={"outcome": "failure"})
