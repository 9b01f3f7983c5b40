"""Shared fixtures for notifier tests."""

import io
import urllib.error

import pytest

from release_notify import config

KNOWN_VARS = [value for name, value in vars(config).items() if name.startswith("ENV_")]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in KNOWN_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tag_env(monkeypatch):
    values = {
        "SLACK_WEBHOOK": "https://hooks.example.com/services/T000/B000/XXX",
        "GITHUB_REF": "refs/tags/v2.3.1",
        "GITHUB_ACTOR": "octocat",
        "GITHUB_ACTION": "notify",
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_REPOSITORY": "octo/app",
        "GITHUB_WORKFLOW": "release",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values


class FakeResponse:
    def __init__(self, status, reason):
        self.status = status
        self.reason = reason

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeUrlopen:
    """Stands in for urllib.request.urlopen and records each request."""

    def __init__(self, status=200, reason="OK", error=None):
        self.status = status
        self.reason = reason
        self.error = error
        self.requests = []
        self.error_body = None

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        if self.error is not None:
            raise self.error
        if self.status >= 400:
            self.error_body = io.BytesIO(b"error")
            raise urllib.error.HTTPError(req.full_url, self.status, self.reason, {}, self.error_body)
        return FakeResponse(self.status, self.reason)


@pytest.fixture
def fake_http(monkeypatch):
    def install(**kwargs):
        fake = FakeUrlopen(**kwargs)
        monkeypatch.setattr("urllib.request.urlopen", fake)
        return fake
    return install
