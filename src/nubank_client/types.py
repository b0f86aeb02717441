"""Type definitions for the Nubank client."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, Union, runtime_checkable

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

ENCRYPTED_CODE = "encrypted-code"

ChallengeState = dict[str, str]


class SessionState(enum.Enum):
    IDLE = "idle"
    CHALLENGE_SENT = "challenge_sent"
    AWAITING_CODE = "awaiting_code"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (SessionState.AUTHENTICATED, SessionState.FAILED)


@dataclass
class KeyPair:
    private_key: rsa.RSAPrivateKey

    def public_key_pem(self) -> str:
        return (
            self.private_key.public_key()
            .public_bytes(
                serialization.Encoding.PEM,
                serialization.PublicFormat.SubjectPublicKeyInfo,
            )
            .decode("ascii")
        )

    def private_key_pem(self) -> str:
        return self.private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ).decode("ascii")


@dataclass
class PendingRequest:
    """Login payload plus challenge parameters for one login attempt."""

    signing_key: KeyPair | None
    encryption_key: KeyPair | None
    payload: dict[str, str]
    challenge: ChallengeState = field(default_factory=dict)

    @property
    def encrypted_code(self) -> str:
        return self.payload.get(ENCRYPTED_CODE, "")

    def accept_challenge(self, challenge: ChallengeState) -> None:
        self.challenge = dict(challenge)
        self.payload[ENCRYPTED_CODE] = challenge.get(ENCRYPTED_CODE, "")

    def discard(self) -> None:
        self.signing_key = None
        self.encryption_key = None
        self.payload.clear()
        self.challenge.clear()


@dataclass(frozen=True)
class ClientCertificate:
    """Private key and certificate for the mutual TLS path."""

    private_key_pem: str
    certificate: str


@dataclass(frozen=True)
class BearerToken:
    """Access token obtained through the password grant."""

    access_token: str
    token_type: str = "bearer"
    refresh_token: str | None = None
    refresh_before: datetime | None = None
    links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> BearerToken:
        refresh_before = data.get("refresh_before")
        links = {
            name: link["href"]
            for name, link in (data.get("_links") or {}).items()
            if isinstance(link, dict) and isinstance(link.get("href"), str)
        }
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type") or "bearer",
            refresh_token=data.get("refresh_token") or None,
            refresh_before=_parse_timestamp(refresh_before) if refresh_before else None,
            links=links,
        )

    def authorization_header(self) -> str:
        return f"Bearer {self.access_token}"


Credential = Union[ClientCertificate, BearerToken]


@runtime_checkable
class Authenticator(Protocol):
    """A strategy that turns login and secret into a credential."""

    def authenticate(self, identifier: str, secret: str) -> Credential: ...


_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    # fromisoformat() before 3.11 rejects the "Z" suffix and sub-microsecond digits
    value = _FRACTION.sub(r"\1", value.replace("Z", "+00:00"))
    return datetime.fromisoformat(value)
