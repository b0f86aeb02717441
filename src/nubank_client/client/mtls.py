from __future__ import annotations

from typing import Any

import requests

from ..config import Settings
from ..errors import NotAuthenticatedError, UnexpectedResponseError
from ..types import BearerToken
from .http import JsonHttpClient


class AuthorizedClient:
    """Issues API calls authorized by a bearer token or a client certificate.

    Mutual TLS needs the certificate and key on disk, so that path is built
    from files the caller persisted after the handshake.
    """

    def __init__(self, http: JsonHttpClient, token: BearerToken | None = None) -> None:
        self.http = http
        self.token = token
        self._uses_certificate = False

    @classmethod
    def from_token(cls, token: BearerToken, settings: Settings | None = None) -> AuthorizedClient:
        return cls(JsonHttpClient(settings), token=token)

    @classmethod
    def from_certificate_files(
        cls, cert_path: str, key_path: str, settings: Settings | None = None
    ) -> AuthorizedClient:
        session = requests.Session()
        session.cert = (cert_path, key_path)
        client = cls(JsonHttpClient(settings, session=session))
        client._uses_certificate = True
        return client

    @property
    def authenticated(self) -> bool:
        return self._uses_certificate or bool(self.token and self.token.access_token)

    def get_json(self, url: str, **kwargs: Any) -> Any:
        response = self.http.get(url, headers=self._auth_headers(), **kwargs)
        return _json_or_raise(response)

    def post_json(self, url: str, payload: dict[str, Any], **kwargs: Any) -> Any:
        response = self.http.post_json(url, payload, headers=self._auth_headers(), **kwargs)
        return _json_or_raise(response)

    def _auth_headers(self) -> dict[str, str]:
        if not self.authenticated:
            raise NotAuthenticatedError("client not authenticated. Did you call authenticate()?")
        if self.token is not None:
            return {"Authorization": self.token.authorization_header()}
        return {}


def _json_or_raise(response: requests.Response) -> Any:
    if response.status_code != 200:
        raise UnexpectedResponseError(response.status_code, response.text, expected=200)
    return response.json()
