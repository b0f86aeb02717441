from __future__ import annotations

import logging
import threading

import requests

from ..client.discovery import GEN_CERTIFICATE, EndpointDirectory
from ..client.http import JsonHttpClient
from ..crypto.keys import KeyPairGenerator
from ..errors import UnexpectedResponseError
from ..types import ChallengeState, PendingRequest
from .header import parse_authenticate_header

logger = logging.getLogger(__name__)


class ChallengeRequester:
    """Registers device keys and collects the server's login challenge."""

    def __init__(
        self,
        http: JsonHttpClient,
        endpoints: EndpointDirectory,
        key_generator: KeyPairGenerator | None = None,
    ) -> None:
        self.http = http
        self.endpoints = endpoints
        self.key_generator = key_generator or KeyPairGenerator(http.settings.key_size)
        self.pending: PendingRequest | None = None
        self.last_response: requests.Response | None = None

    def request_challenge(
        self,
        identifier: str,
        secret: str,
        device_label: str,
        *,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
    ) -> ChallengeState:
        """Submit login and public keys, returning the parsed challenge.

        The server is expected to refuse with ``401`` and carry the challenge
        in its ``WWW-Authenticate`` header. The request stays on
        ``self.pending`` for the code exchange.
        """
        signing_key = self.key_generator.generate()
        encryption_key = self.key_generator.generate()
        pending = PendingRequest(
            signing_key=signing_key,
            encryption_key=encryption_key,
            payload={
                "login": identifier,
                "password": secret,
                "public_key": signing_key.public_key_pem(),
                "public_key_crypto": encryption_key.public_key_pem(),
                "model": f"{self.http.settings.client_model} ({device_label})",
                "device_id": device_label,
            },
        )

        url = self.endpoints.url(GEN_CERTIFICATE)
        response = self.http.post_json(url, pending.payload, deadline=deadline, cancel=cancel)
        self.last_response = response
        authenticate = response.headers.get("WWW-Authenticate", "")
        if response.status_code != 401 or not authenticate:
            logger.warning(f"Challenge request for device {device_label} got {response.status_code}")
            raise UnexpectedResponseError(response.status_code, response.text, expected=401)

        challenge = parse_authenticate_header(authenticate)
        logger.debug(f"Challenge parameters received: {sorted(challenge)}")
        pending.accept_challenge(challenge)
        self.pending = pending
        return challenge
