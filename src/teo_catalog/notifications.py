"""User-facing notices (the UI toast channel) for the TeO catalog.

The core only ever calls notify_success / notify_error on whatever Notifier
the session was built with.
"""

import shutil
import subprocess
from typing import Literal, Optional, Protocol

from teo_catalog.core.config import NotificationsConfig
from teo_catalog.core.output import log


class Notifier(Protocol):
    """Notification collaborator."""

    def notify_success(self, message: str) -> None: ...

    def notify_error(self, message: str) -> None: ...


def notify(
    title: str, message: str, urgency: Literal["low", "normal", "critical"] = "normal"
) -> None:
    """
    Show a desktop notification using notify-send.

    Args:
        title: Notification title
        message: Notification message body
        urgency: Urgency level ('low', 'normal', 'critical')

    Note:
        Silently skips notification if notify-send is not available.
    """
    if not shutil.which("notify-send"):
        return

    try:
        subprocess.run(
            [
                "notify-send",
                "--urgency",
                urgency,
                "--app-name",
                "TeO Music Studio",
                title,
                message,
            ],
            check=False,
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError):
        # Desktop notifications are optional
        pass


class LogNotifier:
    """Routes notices through the unified log output."""

    def __init__(self, config: Optional[NotificationsConfig] = None) -> None:
        self.config = config or NotificationsConfig()

    def notify_success(self, message: str) -> None:
        if self.config.enabled and self.config.show_success:
            log(f"✓ {message}", level="success")
            if self.config.desktop:
                notify("✓ TeO Music Studio", message, urgency="normal")

    def notify_error(self, message: str) -> None:
        if self.config.enabled and self.config.show_errors:
            log(f"✗ {message}", level="error")
            if self.config.desktop:
                notify("✗ TeO Music Studio", message, urgency="critical")


class RecordingNotifier:
    """Keeps every notice in order, for headless sessions and tests."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []  # (kind, message)

    def notify_success(self, message: str) -> None:
        self.messages.append(("success", message))

    def notify_error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def successes(self) -> list[str]:
        return [message for kind, message in self.messages if kind == "success"]

    @property
    def errors(self) -> list[str]:
        return [message for kind, message in self.messages if kind == "error"]
