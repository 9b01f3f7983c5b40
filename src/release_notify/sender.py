"""Webhook sender - posts the envelope to the incoming-webhook endpoint."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from release_notify.config import HTTP_TIMEOUT
from release_notify.errors import DeliveryError
from release_notify.models import Envelope

logger = logging.getLogger(__name__)

# Statuses at or above this are failures.
FAILURE_STATUS = 299


def encode(envelope: Envelope) -> bytes:
    return json.dumps(envelope.to_dict(), ensure_ascii=False).encode("utf-8")


def status_line(code: int, reason: str | None) -> str:
    return f"{code} {reason}" if reason else str(code)


def send(endpoint: str, envelope: Envelope) -> str:
    """POST the envelope once and return the response status line.

    Raises DeliveryError on a transport failure or a status of 299 or above.
    """
    headers = {"Content-Type": "application/json"}
    data = encode(envelope)

    logger.info(f"Posting notification to {urllib.parse.urlsplit(endpoint).netloc}")

    try:
        req = urllib.request.Request(endpoint, data=data, headers=headers, method="POST")
        with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT) as response:
            code, reason = response.status, response.reason
    except urllib.error.HTTPError as e:
        with e:
            code, reason = e.code, e.reason
    except (urllib.error.URLError, OSError, ValueError) as e:
        reason = getattr(e, "reason", e)
        logger.warning(f"Webhook request failed: {reason}")
        raise DeliveryError(f"could not send message: {reason}") from e

    status = status_line(code, reason)
    if code >= FAILURE_STATUS:
        logger.warning(f"Webhook rejected message: {status}")
        raise DeliveryError(f"could not send message: {status}", status=status)

    return status
