"""Error types raised while resolving configuration and delivering messages."""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for notifier failures."""

    exit_code = 1


class ConfigurationError(NotifyError):
    """Required input is missing or malformed. Raised before any network I/O."""

    exit_code = 1


class DeliveryError(NotifyError):
    """The webhook POST failed at the transport level or returned a bad status."""

    exit_code = 2

    def __init__(self, message: str, status: str | None = None) -> None:
        super().__init__(message)
        self.status = status
