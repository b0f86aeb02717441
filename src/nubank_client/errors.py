"""Exceptions raised by the Nubank client."""

from __future__ import annotations


class NubankClientError(Exception):
    """Base class for every error raised by this package."""


class KeyGenerationError(NubankClientError):
    """Key material could not be generated; no client identity can exist."""


class UnexpectedResponseError(NubankClientError):
    """The server answered with a status or shape the protocol does not allow."""

    def __init__(self, status_code: int, body: str, expected: int | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.expected = expected
        message = f"unexpected status code: [{status_code}] - {body}"
        if expected is not None:
            message = f"unexpected status code (want {expected}): [{status_code}] - {body}"
        super().__init__(message)


class NoPendingChallengeError(NubankClientError):
    """Raised when a code exchange is attempted without an encrypted code."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "no encrypted code found. Did you call request_challenge() before exchanging?"
        )


class InvalidStateError(NubankClientError):
    """An operation was called in a session state that does not allow it."""


class NotAuthenticatedError(NubankClientError):
    """An authorized request was attempted without a credential."""


class UnknownEndpointError(NubankClientError, KeyError):
    """No URL is known for the requested endpoint name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RequestCancelledError(NubankClientError):
    """The request deadline passed or the cancel signal was set before sending."""
