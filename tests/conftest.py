"""Shared fixtures for nubank_client tests."""

import json
from unittest.mock import MagicMock

import pytest
from requests.structures import CaseInsensitiveDict

from nubank_client import EndpointDirectory, JsonHttpClient, Settings

CERT_URL = "https://example.test/api/gen-certificate"
TOKEN_URL = "https://example.test/api/token"


def make_response(status_code, body=None, headers=None):
    """Build a mock ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        response.text = ""
        response.json.side_effect = ValueError("no JSON body")
    elif isinstance(body, str):
        response.text = body
        response.json.side_effect = ValueError("invalid JSON")
    else:
        response.text = json.dumps(body)
        response.json.return_value = body
    return response


def challenge_response(header='device-authorization encrypted-code="abc123", other=xyz'):
    return make_response(401, "", headers={"WWW-Authenticate": header})


@pytest.fixture
def settings():
    return Settings(client_id="test-client", client_secret="test-secret", timeout=5.0)


@pytest.fixture
def http(settings):
    return JsonHttpClient(settings)


@pytest.fixture
def endpoints():
    return EndpointDirectory({"gen_certificate": CERT_URL, "token": TOKEN_URL})
