"""Release notify - CI build/release notifications for Slack incoming webhooks."""

__version__ = "0.1.0"

from release_notify.models import Envelope, Attachment, AttachmentField, Action
from release_notify.config import Settings, GitRef, parse_ref
from release_notify.builder import build_envelope
from release_notify.sender import send
from release_notify.errors import NotifyError, ConfigurationError, DeliveryError

__all__ = [
    "Envelope",
    "Attachment",
    "AttachmentField",
    "Action",
    "Settings",
    "GitRef",
    "parse_ref",
    "build_envelope",
    "send",
    "NotifyError",
    "ConfigurationError",
    "DeliveryError",
]
