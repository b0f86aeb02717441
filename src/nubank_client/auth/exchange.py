from __future__ import annotations

import logging
import threading

from ..client.discovery import GEN_CERTIFICATE, EndpointDirectory
from ..client.http import JsonHttpClient
from ..errors import NoPendingChallengeError, UnexpectedResponseError
from ..types import ClientCertificate, PendingRequest

logger = logging.getLogger(__name__)


class CodeExchanger:
    """Trades a verification code for a signed client certificate."""

    def __init__(
        self, http: JsonHttpClient, endpoints: EndpointDirectory, pending: PendingRequest | None
    ) -> None:
        self.http = http
        self.endpoints = endpoints
        self.pending = pending

    def exchange(
        self,
        code: str,
        *,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
    ) -> ClientCertificate:
        pending = self.pending
        if pending is None or not pending.encrypted_code or pending.signing_key is None:
            raise NoPendingChallengeError()
        pending.payload["code"] = code

        url = self.endpoints.url(GEN_CERTIFICATE)
        response = self.http.post_json(url, pending.payload, deadline=deadline, cancel=cancel)
        if response.status_code != 200:
            logger.warning(f"Certificate exchange got {response.status_code}")
            raise UnexpectedResponseError(response.status_code, response.text, expected=200)

        try:
            body = response.json()
        except ValueError as e:
            raise UnexpectedResponseError(response.status_code, response.text) from e
        certificate = body.get("certificate") if isinstance(body, dict) else None
        if not isinstance(certificate, str) or not certificate:
            raise UnexpectedResponseError(response.status_code, response.text)

        return ClientCertificate(
            private_key_pem=pending.signing_key.private_key_pem(),
            certificate=certificate,
        )
