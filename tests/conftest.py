"""Shared fixtures for opsman tests."""

import json
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from opsman.cli.platform.client import OpsManagerClient

TARGET = "https://opsman.example.com"


def make_response(status_code: int = 200, body=None, reason: str = "") -> MagicMock:
    """Build a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if body is None:
        resp.content = b""
        resp.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
    else:
        resp.content = json.dumps(body).encode()
        resp.json.return_value = body
    return resp


class FakePrompt:
    """CredentialPrompt that answers from a fixed list and counts calls."""

    def __init__(self, username: str = "admin", password: str = "secret"):
        self.username = username
        self.password = password
        self.calls = 0

    def ask_credentials(self) -> tuple[str, str]:
        self.calls += 1
        return self.username, self.password


@pytest.fixture
def runner():
    """Provide a CLI runner."""
    return CliRunner()


@pytest.fixture
def http():
    """A mock requests.Session."""
    return MagicMock()


@pytest.fixture
def sessions():
    """A session manager stub that always hands out the same token."""
    manager = MagicMock()
    manager.get_valid_token.return_value = "tok-123"
    return manager


@pytest.fixture
def client(http, sessions):
    """Ops Manager client wired to a mock HTTP session."""
    return OpsManagerClient(TARGET, sessions=sessions, session=http, verify=False)
