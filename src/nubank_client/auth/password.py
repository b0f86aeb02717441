from __future__ import annotations

import logging
import threading

from ..client.discovery import TOKEN, EndpointDirectory
from ..client.http import JsonHttpClient
from ..errors import UnexpectedResponseError
from ..types import BearerToken

logger = logging.getLogger(__name__)


class PasswordGrantAuthenticator:
    """Exchanges login and password directly for a bearer token."""

    def __init__(
        self,
        http: JsonHttpClient,
        endpoints: EndpointDirectory,
        client_id: str | None = None,
        client_secret: str | None = None,
    ) -> None:
        self.http = http
        self.endpoints = endpoints
        self.client_id = client_id if client_id is not None else http.settings.client_id
        self.client_secret = (
            client_secret if client_secret is not None else http.settings.client_secret
        )
        if not self.client_id or not self.client_secret:
            raise ValueError("client_id and client_secret are required for the password grant")

    def authenticate(
        self,
        identifier: str,
        secret: str,
        *,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
    ) -> BearerToken:
        """Request a token; follow-up links in the response extend ``endpoints``."""
        payload = {
            "grant_type": "password",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "login": identifier,
            "password": secret,
        }
        response = self.http.post_json(
            self.endpoints.url(TOKEN), payload, deadline=deadline, cancel=cancel
        )
        if response.status_code != 200:
            logger.warning(f"Token request got {response.status_code}")
            raise UnexpectedResponseError(response.status_code, response.text, expected=200)

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseError(response.status_code, response.text) from e
        if not isinstance(data, dict) or not isinstance(data.get("access_token"), str):
            raise UnexpectedResponseError(response.status_code, response.text)

        try:
            token = BearerToken.from_response(data)
        except (TypeError, ValueError, AttributeError) as e:
            raise UnexpectedResponseError(response.status_code, response.text) from e
        self.endpoints.update(token.links)
        logger.info(f"Password grant succeeded, {len(token.links)} links received")
        return token
