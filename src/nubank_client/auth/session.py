from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..client.discovery import EndpointDirectory
from ..client.http import JsonHttpClient
from ..crypto.keys import KeyPairGenerator, new_device_id
from ..errors import InvalidStateError, NoPendingChallengeError, UnexpectedResponseError
from ..types import ENCRYPTED_CODE, ChallengeState, ClientCertificate, SessionState
from .challenge import ChallengeRequester
from .exchange import CodeExchanger

logger = logging.getLogger(__name__)

CodeProvider = Callable[[ChallengeState], str]


class AuthenticationSession:
    """One certificate bootstrap attempt.

    ``IDLE -> CHALLENGE_SENT -> AWAITING_CODE -> AUTHENTICATED``, with
    ``FAILED`` reachable from every non-terminal state. Failures are final:
    challenge tokens are single use, so retrying needs a new session.
    """

    def __init__(
        self,
        http: JsonHttpClient,
        endpoints: EndpointDirectory,
        key_generator: KeyPairGenerator | None = None,
        *,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        self.http = http
        self.endpoints = endpoints
        self.deadline = deadline
        self.cancel_event = cancel
        self.device_label: str | None = None
        self._requester = ChallengeRequester(http, endpoints, key_generator)
        self._state = SessionState.IDLE
        self._challenge: ChallengeState = {}

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def challenge(self) -> ChallengeState:
        return dict(self._challenge)

    def request_challenge(
        self, identifier: str, secret: str, device_label: str | None = None
    ) -> ChallengeState:
        self._transition(SessionState.CHALLENGE_SENT, allowed_from=(SessionState.IDLE,))
        self.device_label = device_label or new_device_id()
        logger.info(f"Requesting login challenge for device {self.device_label}")
        try:
            challenge = self._requester.request_challenge(
                identifier,
                secret,
                self.device_label,
                deadline=self.deadline,
                cancel=self.cancel_event,
            )
            if not challenge.get(ENCRYPTED_CODE):
                response = self._requester.last_response
                raise UnexpectedResponseError(response.status_code, response.text, expected=401)
        except Exception:
            self._fail()
            raise

        self._challenge = challenge
        self._transition(SessionState.AWAITING_CODE, allowed_from=(SessionState.CHALLENGE_SENT,))
        return dict(challenge)

    def exchange(self, code: str) -> ClientCertificate:
        if self._state is not SessionState.AWAITING_CODE:
            if not self._state.terminal:
                self._fail()
            raise NoPendingChallengeError()

        exchanger = CodeExchanger(self.http, self.endpoints, self._requester.pending)
        try:
            credential = exchanger.exchange(code, deadline=self.deadline, cancel=self.cancel_event)
        except Exception:
            self._fail()
            raise

        self._transition(SessionState.AUTHENTICATED, allowed_from=(SessionState.AWAITING_CODE,))
        self._forget()
        logger.info(f"Device {self.device_label} authorized, client certificate issued")
        return credential

    def authenticate(
        self, identifier: str, secret: str, code_provider: CodeProvider
    ) -> ClientCertificate:
        """Run the full handshake, asking ``code_provider`` for the verification code."""
        challenge = self.request_challenge(identifier, secret)
        try:
            code = code_provider(challenge)
        except Exception:
            self._fail()
            raise
        return self.exchange(code)

    def cancel(self) -> None:
        if not self._state.terminal:
            logger.info(f"Authentication for device {self.device_label} cancelled")
            self._fail()

    def _transition(self, new: SessionState, allowed_from: tuple[SessionState, ...]) -> None:
        if self._state not in allowed_from:
            raise InvalidStateError(f"cannot move from {self._state.value} to {new.value}")
        logger.debug(f"Session {self._state.value} -> {new.value}")
        self._state = new

    def _fail(self) -> None:
        logger.warning(f"Authentication for device {self.device_label} failed in {self._state.value}")
        self._state = SessionState.FAILED
        self._forget()

    def _forget(self) -> None:
        if self._requester.pending is not None:
            self._requester.pending.discard()
            self._requester.pending = None
        self._requester.last_response = None
        self._challenge = {}


class CertificateAuthenticator:
    """Certificate bootstrap behind the same interface as the password grant.

    Every call runs a fresh :class:`AuthenticationSession`.
    """

    def __init__(
        self,
        http: JsonHttpClient,
        endpoints: EndpointDirectory,
        code_provider: CodeProvider,
        key_generator: KeyPairGenerator | None = None,
    ) -> None:
        self.http = http
        self.endpoints = endpoints
        self.code_provider = code_provider
        self.key_generator = key_generator

    def new_session(self, **kwargs) -> AuthenticationSession:
        return AuthenticationSession(self.http, self.endpoints, self.key_generator, **kwargs)

    def authenticate(self, identifier: str, secret: str) -> ClientCertificate:
        return self.new_session().authenticate(identifier, secret, self.code_provider)
