"""Tests for webhook delivery."""

import json
import socket
import urllib.error

import pytest

from release_notify.errors import DeliveryError
from release_notify.models import Attachment, Envelope
from release_notify.sender import encode, send

ENDPOINT = "https://hooks.example.com/services/T000/B000/XXX"


@pytest.fixture
def envelope():
    return Envelope(channel="#releases", attachments=(Attachment(fallback="built", color="good"),))


class TestEncode:
    def test_json_body(self, envelope):
        assert json.loads(encode(envelope)) == {
            "channel": "#releases",
            "unfurl_links": False,
            "attachments": [{"fallback": "built", "color": "good"}],
        }

    def test_utf8(self):
        body = encode(Envelope(attachments=(Attachment(fallback="Релиз готов"),)))
        assert "Релиз готов".encode("utf-8") in body


class TestSend:
    def test_success_returns_status_line(self, fake_http, envelope):
        fake = fake_http(status=200, reason="OK")

        assert send(ENDPOINT, envelope) == "200 OK"
        assert len(fake.requests) == 1

    def test_posts_json(self, fake_http, envelope):
        fake = fake_http()
        send(ENDPOINT, envelope)

        req = fake.requests[0]
        assert req.full_url == ENDPOINT
        assert req.get_method() == "POST"
        assert req.get_header("Content-type") == "application/json"
        assert json.loads(req.data) == envelope.to_dict()

    def test_2xx_other_than_200(self, fake_http, envelope):
        fake_http(status=204, reason="No Content")
        assert send(ENDPOINT, envelope) == "204 No Content"

    def test_299_is_failure(self, fake_http, envelope):
        fake_http(status=299, reason="Odd")

        with pytest.raises(DeliveryError) as exc_info:
            send(ENDPOINT, envelope)
        assert exc_info.value.status == "299 Odd"

    def test_404(self, fake_http, envelope):
        fake = fake_http(status=404, reason="Not Found")

        with pytest.raises(DeliveryError, match="404 Not Found") as exc_info:
            send(ENDPOINT, envelope)
        assert exc_info.value.status == "404 Not Found"
        assert len(fake.requests) == 1

    def test_error_response_is_closed(self, fake_http, envelope):
        fake = fake_http(status=500, reason="Internal Server Error")

        with pytest.raises(DeliveryError, match="500 Internal Server Error"):
            send(ENDPOINT, envelope)
        assert fake.error_body.closed

    def test_connection_refused(self, fake_http, envelope):
        fake = fake_http(error=urllib.error.URLError(ConnectionRefusedError(111, "Connection refused")))

        with pytest.raises(DeliveryError, match="Connection refused") as exc_info:
            send(ENDPOINT, envelope)
        assert exc_info.value.status is None
        assert len(fake.requests) == 1

    def test_timeout(self, fake_http, envelope):
        fake_http(error=socket.timeout("timed out"))

        with pytest.raises(DeliveryError, match="timed out"):
            send(ENDPOINT, envelope)

    def test_invalid_url(self, envelope):
        with pytest.raises(DeliveryError):
            send("not a url", envelope)
